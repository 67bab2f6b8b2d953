"""GeoNames row parsing.

Turns rows of the GeoNames dump files into domain models:

- **_geonames**: point rows (``allCountries.txt`` layout) → ``GeoName``
- **_country**: ``countryInfo.txt`` rows → ``CountryInfo``
- **_fields**: shared field coercion (ints, floats, lists, dates)

Reading files is left to the caller; every function takes lines.
Malformed rows raise ``RecordParseError`` (or a subclass) from the
single-row parsers; the streaming parsers log and skip them unless
``strict`` is set.
"""

from __future__ import annotations

from geonames_index.core.exceptions import (
    InvalidCoordinateError,
    InvalidFeatureClassError,
    RecordParseError,
)
from geonames_index.parsing._country import load_country_table, parse_country_info
from geonames_index.parsing._geonames import parse_record, parse_records

__all__ = [
    "InvalidCoordinateError",
    "InvalidFeatureClassError",
    "RecordParseError",
    "load_country_table",
    "parse_country_info",
    "parse_record",
    "parse_records",
]
