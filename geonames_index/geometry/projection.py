"""Unit-sphere projection of WGS 84 coordinates.

Latitude/longitude are mapped onto the unit sphere so that plain
Euclidean distance between projected points is the chord length, a
monotonic function of great-circle distance.  A flat lat/lon metric
would put points either side of the antimeridian (lon ±180°) or across
a pole far apart; the chord does not.

No validation happens here: out-of-range degrees still produce a
well-defined (if meaningless) point.  Callers validate first.
"""

from __future__ import annotations

import math


def project(latitude_deg: float, longitude_deg: float) -> tuple[float, float, float]:
    """Project ``(latitude, longitude)`` in decimal degrees to ``(x, y, z)``.

    ``x = cos(lat)·cos(lon)``, ``y = cos(lat)·sin(lon)``, ``z = sin(lat)``.

    Returns:
        A point on the unit sphere.
    """
    lat_rad = math.radians(latitude_deg)
    lon_rad = math.radians(longitude_deg)
    cos_lat = math.cos(lat_rad)
    return (
        cos_lat * math.cos(lon_rad),
        cos_lat * math.sin(lon_rad),
        math.sin(lat_rad),
    )
