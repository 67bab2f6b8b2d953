"""Balanced KD-tree construction by recursive median split.

At depth ``d`` the slice is split on axis ``d mod 3``.  The median is
located with ``numpy.argpartition`` (introselect, linear time per
level) rather than a full sort, so construction stays O(n log n).
Lower-half points go left, the rest right.  Each level halves the
slice regardless of the input distribution, which bounds the height
at ``floor(log2 n) + 1``.

Each point's three coordinates are read from the ordering once, up
front, into an ``(n, 3)`` array; recursion then works on index arrays.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

import numpy as np

from geonames_index.geometry.ordering import AXIS_COUNT, Axis
from geonames_index.kdtree.node import KDNode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from geonames_index.geometry.ordering import AxisOrdering

logger = logging.getLogger("geonames_index.kdtree.builder")

P = TypeVar("P")


def build_tree(points: Iterable[P], ordering: AxisOrdering[P]) -> KDNode[P] | None:
    """Build a balanced KD-tree from *points*.

    Args:
        points: Points to index, in any order.  Duplicates are allowed.
        ordering: Supplies per-axis coordinates for *points*.

    Returns:
        The root node, or ``None`` when *points* is empty.
    """
    items = list(points)
    if not items:
        logger.debug("KD-tree build skipped | points=0")
        return None

    coords = np.empty((len(items), AXIS_COUNT), dtype=np.float64)
    for row, point in enumerate(items):
        coords[row] = ordering.coordinates(point)

    root = _build(items, coords, np.arange(len(items)), 0)
    logger.debug("KD-tree built | points=%d", len(items))
    return root


def _build(
    items: list[P],
    coords: np.ndarray,
    indices: np.ndarray,
    depth: int,
) -> KDNode[P] | None:
    count = len(indices)
    if count == 0:
        return None

    axis = Axis.for_depth(depth)
    if count == 1:
        return KDNode(point=items[int(indices[0])], axis=axis)

    median = count // 2
    # Everything before `median` is <= the median value, everything after is >=.
    order = np.argpartition(coords[indices, axis], median, kind="introselect")
    partitioned = indices[order]

    left = _build(items, coords, partitioned[:median], depth + 1)
    right = _build(items, coords, partitioned[median + 1 :], depth + 1)
    return KDNode(
        point=items[int(partitioned[median])],
        axis=axis,
        left=left,
        right=right,
    )
