"""The ``AxisOrdering`` capability.

The KD-tree never looks inside the points it stores.  Everything it
needs (a coordinate per axis, a one-axis squared distance for pruning,
and a full squared distance for ranking) comes from an ``AxisOrdering``
instance supplied alongside the points.  This keeps the tree generic
over the payload type: ``CartesianOrdering`` handles plain ``(x, y, z)``
sequences, ``GeoNameOrdering`` handles GeoNames records.

Axis selectors outside ``{0, 1, 2}`` are a programming error and raise
``InvalidAxisError`` immediately.
"""

from __future__ import annotations

import abc
import enum
from collections.abc import Sequence
from typing import Generic, TypeVar

from geonames_index.core.exceptions import InvalidAxisError

P = TypeVar("P")

AXIS_COUNT = 3


class Axis(enum.IntEnum):
    """Cartesian axis used for splitting and comparison."""

    X = 0
    Y = 1
    Z = 2

    @classmethod
    def coerce(cls, axis: object) -> Axis:
        """Return *axis* as an ``Axis``.

        Raises:
            InvalidAxisError: If *axis* is not 0, 1, 2 (or an ``Axis``).
        """
        if isinstance(axis, cls):
            return axis
        if isinstance(axis, bool) or not isinstance(axis, int):
            raise InvalidAxisError(axis)
        try:
            return cls(axis)
        except ValueError as exc:
            raise InvalidAxisError(axis) from exc

    @classmethod
    def for_depth(cls, depth: int) -> Axis:
        """Splitting axis at tree *depth* (cycles X → Y → Z → X …)."""
        return cls(depth % AXIS_COUNT)


class AxisOrdering(abc.ABC, Generic[P]):
    """Contract every indexable point type must satisfy.

    Subclasses implement ``axis_value``; the distance operations are
    derived from it but may be overridden when a cheaper form exists.
    """

    @abc.abstractmethod
    def axis_value(self, point: P, axis: Axis | int) -> float:
        """Return *point*'s coordinate on *axis*.

        Raises:
            InvalidAxisError: If *axis* is outside ``{0, 1, 2}``.
        """

    def coordinates(self, point: P) -> tuple[float, float, float]:
        """Return all three coordinates of *point*."""
        return (
            self.axis_value(point, Axis.X),
            self.axis_value(point, Axis.Y),
            self.axis_value(point, Axis.Z),
        )

    def axis_squared_distance(self, a: P, b: P, axis: Axis | int) -> float:
        """Squared distance between *a* and *b* along *axis* only.

        This is the squared distance from *b* to the splitting plane
        through *a*, used for the pruning test.
        """
        delta = self.axis_value(a, axis) - self.axis_value(b, axis)
        return delta * delta

    def squared_distance(self, a: P, b: P) -> float:
        """Full 3-D squared Euclidean distance between *a* and *b*."""
        ax, ay, az = self.coordinates(a)
        bx, by, bz = self.coordinates(b)
        dx = ax - bx
        dy = ay - by
        dz = az - bz
        return dx * dx + dy * dy + dz * dz


class CartesianOrdering(AxisOrdering[Sequence[float]]):
    """Ordering for plain ``(x, y, z)`` sequences (tuples, lists, arrays)."""

    def axis_value(self, point: Sequence[float], axis: Axis | int) -> float:
        return float(point[Axis.coerce(axis)])
