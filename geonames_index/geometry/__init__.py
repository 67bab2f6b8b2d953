"""Geometry primitives shared by the KD-tree and the GeoNames adapter.

- projection: latitude/longitude → unit-sphere Cartesian coordinates
- ordering: the ``AxisOrdering`` capability every indexable point type provides
- geodesy: chord/metre conversion and ellipsoidal distances
"""

from geonames_index.geometry.ordering import Axis, AxisOrdering, CartesianOrdering
from geonames_index.geometry.projection import project

__all__ = [
    "Axis",
    "AxisOrdering",
    "CartesianOrdering",
    "project",
]
