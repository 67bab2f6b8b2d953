"""Shared pytest fixtures for the GeoNames index test suite."""

from __future__ import annotations

import pytest

from geonames_index.models.geoname import GeoName

# ---------------------------------------------------------------------------
# GeoNames rows
# ---------------------------------------------------------------------------


def geonames_row(
    geoname_id: int,
    name: str,
    latitude: float | str,
    longitude: float | str,
    *,
    feature_class: str = "P",
    feature_code: str = "PPL",
    country_code: str = "CH",
    population: str = "0",
    elevation: str = "",
    timezone: str = "Europe/Zurich",
    alternate_names: str = "",
) -> str:
    """Return a 19-field tab-separated GeoNames row."""
    fields = [
        str(geoname_id),
        name,
        name,
        alternate_names,
        str(latitude),
        str(longitude),
        feature_class,
        feature_code,
        country_code,
        "",  # cc2
        "",  # admin1
        "",  # admin2
        "",  # admin3
        "",  # admin4
        population,
        elevation,
        "",  # dem
        timezone,
        "2024-01-15",
    ]
    return "\t".join(fields) + "\n"


@pytest.fixture()
def make_row():
    """Return the ``geonames_row`` builder."""
    return geonames_row


ZURICH = (47.36667, 8.55)
BERN = (46.94809, 7.44744)
GENEVA = (46.20222, 6.14569)
TOKYO = (35.6895, 139.69171)
SYDNEY = (-33.86785, 151.20732)


@pytest.fixture()
def zurich_row() -> str:
    """A real-shaped GeoNames row for Zurich (PPLA, CH)."""
    return (
        "2657896\tZürich\tZurich\tTsuerich,Zurich,Zuerich\t47.36667\t8.55\tP\tPPLA\tCH\t\t"
        "25\t112\t261\t\t341730\t\t410\tEurope/Zurich\t2023-10-04\n"
    )


@pytest.fixture()
def city_rows() -> list[str]:
    """Rows for five well-separated cities."""
    return [
        geonames_row(2657896, "Zurich", *ZURICH, population="341730"),
        geonames_row(2661552, "Bern", *BERN, population="121631"),
        geonames_row(2660646, "Geneva", *GENEVA, population="183981"),
        geonames_row(
            1850147, "Tokyo", *TOKYO, country_code="JP", population="8336599",
            timezone="Asia/Tokyo",
        ),
        geonames_row(
            2147714, "Sydney", *SYDNEY, country_code="AU", population="4627345",
            timezone="Australia/Sydney",
        ),
    ]


@pytest.fixture()
def city_records() -> list[GeoName]:
    """The same five cities as ``GeoName`` instances."""
    return [
        GeoName(*ZURICH, name="Zurich", country_code="CH", population=341730),
        GeoName(*BERN, name="Bern", country_code="CH", population=121631),
        GeoName(*GENEVA, name="Geneva", country_code="CH", population=183981),
        GeoName(*TOKYO, name="Tokyo", country_code="JP", population=8336599),
        GeoName(*SYDNEY, name="Sydney", country_code="AU", population=4627345),
    ]


@pytest.fixture()
def country_rows() -> list[str]:
    """A ``countryInfo.txt`` excerpt with its comment header."""
    header = "#ISO\tISO3\tISO-Numeric\tfips\tCountry\tCapital\tArea(in sq km)\tPopulation\t" \
        "Continent\ttld\tCurrencyCode\tCurrencyName\tPhone\tPostal Code Format\t" \
        "Postal Code Regex\tLanguages\tgeonameid\tneighbours\tEquivalentFipsCode\n"
    ch = "\t".join([
        "CH", "CHE", "756", "SZ", "Switzerland", "Bern", "41290", "8516543", "EU", ".ch",
        "CHF", "Franc", "41", "####", "^(\\d{4})$", "de-CH,fr-CH,it-CH,rm", "2658434",
        "DE,IT,LI,FR,AT", "",
    ]) + "\n"
    jp = "\t".join([
        "JP", "JPN", "392", "JA", "Japan", "Tokyo", "377835", "126529100", "AS", ".jp",
        "JPY", "Yen", "81", "###-####", "^(\\d{7})$", "ja", "1861060", "", "",
    ]) + "\n"
    return [header, ch, jp]
