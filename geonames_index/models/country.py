"""Data model for a GeoNames country reference row (``countryInfo.txt``)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CountryInfo:
    """One country from the GeoNames country table.

    Attributes:
        iso: ISO-3166 alpha-2 code (join key for ``GeoName.country_code``).
        iso3: ISO-3166 alpha-3 code.
        iso_numeric: ISO-3166 numeric code.
        fips: FIPS 10-4 code.
        name: Country name.
        capital: Capital city name.
        area_km2: Area in square kilometres.
        population: Population.
        continent: Two-letter continent code (``EU``, ``AS`` …).
        tld: Top-level domain, leading dot included.
        currency_code: ISO-4217 currency code.
        currency_name: Currency name.
        phone: International dialling prefix.
        postal_code_format: Postal code format mask.
        postal_code_regex: Postal code validation regex.
        languages: Language tags spoken in the country.
        geoname_id: GeoNames id of the country feature.
        neighbours: ISO alpha-2 codes of neighbouring countries.
    """

    iso: str
    name: str
    iso3: str = ""
    iso_numeric: str = ""
    fips: str = ""
    capital: str = ""
    area_km2: float = 0.0
    population: int = 0
    continent: str = ""
    tld: str = ""
    currency_code: str = ""
    currency_name: str = ""
    phone: str = ""
    postal_code_format: str = ""
    postal_code_regex: str = ""
    languages: tuple[str, ...] = ()
    geoname_id: int = 0
    neighbours: tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.name
