"""Data models.

- GeoName: A GeoNames point record (the indexable payload)
- GeoNameOrdering: The ``AxisOrdering`` for ``GeoName``
- FeatureClass: GeoNames single-letter feature classes
- CountryInfo: A row of the GeoNames country reference table
- GeoNeighbor: A search hit with its distance in metres
"""

from geonames_index.models.country import CountryInfo
from geonames_index.models.geoname import (
    GEONAME_ORDERING,
    FeatureClass,
    GeoName,
    GeoNameOrdering,
    validate_coordinate,
)
from geonames_index.models.neighbor import GeoNeighbor

__all__ = [
    "GEONAME_ORDERING",
    "CountryInfo",
    "FeatureClass",
    "GeoName",
    "GeoNameOrdering",
    "GeoNeighbor",
    "validate_coordinate",
]
