"""Data model for a GeoNames point record and its tree ordering.

A ``GeoName`` is one row of a GeoNames dump (``allCountries.txt``,
``cities15000.txt`` …) reduced to the fields callers care about.  Only
latitude and longitude take part in geometry; everything else is
payload that rides along with the point.

Coordinates are validated at construction and projected onto the unit
sphere once; ``GeoNameOrdering`` reads the cached projection.

See http://www.geonames.org/export/codes.html for the feature classes.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from geonames_index.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from geonames_index.core.exceptions import InvalidCoordinateError, InvalidFeatureClassError
from geonames_index.geometry.ordering import Axis, AxisOrdering
from geonames_index.geometry.projection import project

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import date

    from geonames_index.models.country import CountryInfo


class FeatureClass(enum.Enum):
    """GeoNames feature class, keyed by its single-letter code."""

    COUNTRY = "A"  # country, state, region
    WATER_BODY = "H"  # stream, lake
    LAND_AREA = "L"  # parks, area
    CITY = "P"  # city, village
    TRANSPORT_ROUTE = "R"  # road, railroad
    FACILITY = "S"  # spot, building, farm
    LANDMARK = "T"  # mountain, hill, rock
    UNDERSEA = "U"
    VEGETATION = "V"  # forest, heath

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> FeatureClass:
        """Return the feature class for a single-letter *code*.

        Raises:
            InvalidFeatureClassError: If *code* is not a known class letter.
        """
        if len(code) != 1:
            msg = f"Invalid feature class {code!r}: expected a single letter"
            raise InvalidFeatureClassError(msg)
        try:
            return cls(code.upper())
        except ValueError as exc:
            msg = f"Invalid feature class {code!r}"
            raise InvalidFeatureClassError(msg) from exc


def validate_coordinate(latitude: float, longitude: float) -> None:
    """Check that a coordinate pair is finite and within WGS 84 bounds.

    Raises:
        InvalidCoordinateError: If either value is out of range or not finite.
    """
    if not math.isfinite(latitude) or not MIN_LATITUDE <= latitude <= MAX_LATITUDE:
        msg = f"Latitude {latitude} out of WGS 84 range [{MIN_LATITUDE}, {MAX_LATITUDE}]"
        raise InvalidCoordinateError(msg)
    if not math.isfinite(longitude) or not MIN_LONGITUDE <= longitude <= MAX_LONGITUDE:
        msg = f"Longitude {longitude} out of WGS 84 range [{MIN_LONGITUDE}, {MAX_LONGITUDE}]"
        raise InvalidCoordinateError(msg)


@dataclass(frozen=True, slots=True)
class GeoName:
    """A single GeoNames point record.

    Attributes:
        latitude: Latitude in decimal degrees (WGS 84).
        longitude: Longitude in decimal degrees (WGS 84).
        name: Name of the place (UTF-8).
        geoname_id: GeoNames integer id (0 for ad-hoc query points).
        ascii_name: Name in plain ASCII characters.
        alternate_names: Alternate names, transliterations included.
        feature_class: GeoNames feature class, ``None`` when unknown.
        feature_code: GeoNames feature code (e.g. ``"PPLC"``).
        country_code: ISO-3166 two-letter country code.
        admin1_code: First-level administrative division code.
        population: Population (0 when unknown).
        elevation: Elevation in metres, ``None`` when absent.
        timezone: IANA timezone id.
        modification_date: Date the record was last modified.
        country: Joined country reference row, if a table was supplied.
    """

    latitude: float
    longitude: float
    name: str = ""
    geoname_id: int = 0
    ascii_name: str = ""
    alternate_names: tuple[str, ...] = ()
    feature_class: FeatureClass | None = None
    feature_code: str = ""
    country_code: str = ""
    admin1_code: str = ""
    population: int = 0
    elevation: int | None = None
    timezone: str = ""
    modification_date: date | None = None
    country: CountryInfo | None = None
    xyz: tuple[float, float, float] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        validate_coordinate(self.latitude, self.longitude)
        object.__setattr__(self, "xyz", project(self.latitude, self.longitude))

    @classmethod
    def at(cls, latitude: float, longitude: float) -> GeoName:
        """Build a bare query point from a coordinate pair."""
        return cls(latitude=float(latitude), longitude=float(longitude))

    def with_country(self, countries: Mapping[str, CountryInfo]) -> GeoName:
        """Return a copy with ``country`` joined from *countries* by ISO code.

        The record is returned unchanged when its code is not in the table.
        """
        info = countries.get(self.country_code.upper())
        if info is None:
            return self
        return replace(self, country=info)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a JSON-friendly dict (the joined country row is left out)."""
        return {
            "geoname_id": self.geoname_id,
            "name": self.name,
            "ascii_name": self.ascii_name,
            "alternate_names": list(self.alternate_names),
            "latitude": self.latitude,
            "longitude": self.longitude,
            "feature_class": self.feature_class.code if self.feature_class else "",
            "feature_code": self.feature_code,
            "country_code": self.country_code,
            "admin1_code": self.admin1_code,
            "population": self.population,
            "elevation": self.elevation,
            "timezone": self.timezone,
            "modification_date": (
                self.modification_date.isoformat() if self.modification_date else ""
            ),
        }

    def __str__(self) -> str:
        return self.name or f"({self.latitude}, {self.longitude})"


class GeoNameOrdering(AxisOrdering[GeoName]):
    """``AxisOrdering`` for ``GeoName`` using its cached unit-sphere projection."""

    def axis_value(self, point: GeoName, axis: Axis | int) -> float:
        return point.xyz[Axis.coerce(axis)]

    def coordinates(self, point: GeoName) -> tuple[float, float, float]:
        return point.xyz


#: Shared stateless ordering instance.
GEONAME_ORDERING = GeoNameOrdering()
