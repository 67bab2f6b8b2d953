"""Distance conversions between the unit-sphere index and the real world.

The tree ranks by squared chord length on the unit sphere.  Radius
queries need the inverse mapping (metres → chord) and result rows
report an ellipsoidal geodesic distance in metres via ``pyproj.Geod``.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import TYPE_CHECKING

from geonames_index.core.constants import (
    DEFAULT_ELLIPSOID,
    MAX_SQUARED_CHORD,
    MEAN_EARTH_RADIUS_M,
)

if TYPE_CHECKING:
    from pyproj import Geod


def metres_to_squared_chord(
    distance_m: float,
    *,
    earth_radius_m: float = MEAN_EARTH_RADIUS_M,
) -> float:
    """Convert a great-circle distance in metres to a squared unit chord.

    Distances of half the circumference or more return ``math.inf`` so
    every point on the sphere is within range, antipodes included.
    """
    theta = distance_m / earth_radius_m
    if theta >= math.pi:
        return math.inf
    # |chord| = 2·sin(θ/2)
    half_chord = math.sin(theta / 2.0)
    return 4.0 * half_chord * half_chord


def squared_chord_to_metres(
    squared_chord: float,
    *,
    earth_radius_m: float = MEAN_EARTH_RADIUS_M,
) -> float:
    """Convert a squared unit chord back to a great-circle distance in metres."""
    half_chord = math.sqrt(min(max(squared_chord, 0.0), MAX_SQUARED_CHORD)) / 2.0
    return 2.0 * math.asin(min(1.0, half_chord)) * earth_radius_m


@lru_cache(maxsize=8)
def _geod(ellipsoid: str) -> Geod:
    from pyproj import Geod

    return Geod(ellps=ellipsoid)


def geodesic_distance_m(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    *,
    ellipsoid: str = DEFAULT_ELLIPSOID,
) -> float:
    """Geodesic distance in metres between two WGS 84 points.

    Uses ``pyproj.Geod.inv`` on *ellipsoid* (default WGS 84).
    """
    # Geod takes (lon, lat) order
    _fwd_az, _back_az, distance = _geod(ellipsoid).inv(lon1, lat1, lon2, lat2)
    return float(distance)
