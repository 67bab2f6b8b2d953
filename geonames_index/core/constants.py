"""Shared constants — single source of truth.

Coordinate bounds, the mean earth radius used for chord/metre
conversion, and the column layout of the GeoNames dump files.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# WGS 84 coordinate bounds
# ---------------------------------------------------------------------------

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# ---------------------------------------------------------------------------
# Earth model
# ---------------------------------------------------------------------------

MEAN_EARTH_RADIUS_M: float = 6_371_008.8
"""IUGG mean earth radius in metres (sphere used for chord conversion)."""

DEFAULT_ELLIPSOID: str = "WGS84"
"""Ellipsoid name passed to ``pyproj.Geod`` for reported distances."""

# Largest squared chord between two points on the unit sphere (antipodes).
MAX_SQUARED_CHORD = 4.0

# ---------------------------------------------------------------------------
# Search defaults
# ---------------------------------------------------------------------------

DEFAULT_K = 5

# ---------------------------------------------------------------------------
# GeoNames dump layout (http://www.geonames.org/export/codes.html)
# ---------------------------------------------------------------------------

GEONAMES_FIELD_COUNT = 19
COUNTRY_INFO_FIELD_COUNT = 19
FIELD_SEPARATOR = "\t"
LIST_SEPARATOR = ","
COMMENT_PREFIX = "#"
