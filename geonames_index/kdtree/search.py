"""Exact nearest-neighbour search with plane pruning.

All three searches descend first into the child on the query's side of
each splitting plane, then backtrack into the other ("far") child only
when the squared distance from the query to the splitting plane could
still match the current bound.  Every point in the far subtree is at
least that plane distance away, so skipping it never loses a closer
point.

Squared distances are used throughout; no square roots are taken.
Equal distances are settled by the points' coordinates (smallest
first), so the answer never depends on the order the tree was built
from.  Searches read the tree and never mutate it.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from geonames_index.geometry.ordering import AxisOrdering
    from geonames_index.kdtree.node import KDNode

P = TypeVar("P")

_Key = tuple[float, float, float]


@dataclass(frozen=True, slots=True)
class Neighbor(Generic[P]):
    """A search hit: the stored point and its squared distance to the query."""

    point: P
    squared_distance: float


def _split(
    node: KDNode[P], query: P, ordering: AxisOrdering[P]
) -> tuple[KDNode[P] | None, KDNode[P] | None]:
    """Return ``(near, far)`` children of *node* relative to *query*."""
    if ordering.axis_value(query, node.axis) < ordering.axis_value(node.point, node.axis):
        return node.left, node.right
    return node.right, node.left


def _negate(key: _Key) -> _Key:
    return (-key[0], -key[1], -key[2])


def _closer(candidate: Neighbor[P], best: Neighbor[P], ordering: AxisOrdering[P]) -> bool:
    if candidate.squared_distance != best.squared_distance:
        return candidate.squared_distance < best.squared_distance
    return ordering.coordinates(candidate.point) < ordering.coordinates(best.point)


# ---------------------------------------------------------------------------
# Single nearest
# ---------------------------------------------------------------------------


def nearest(
    root: KDNode[P] | None,
    query: P,
    ordering: AxisOrdering[P],
) -> Neighbor[P] | None:
    """Return the stored point closest to *query*, or ``None`` for an empty tree.

    Of several equally close points, the one with the smallest
    coordinates wins.
    """
    if root is None:
        return None

    best = Neighbor(root.point, ordering.squared_distance(root.point, query))
    near, far = _split(root, query, ordering)

    candidate = nearest(near, query, ordering)
    if candidate is not None and _closer(candidate, best, ordering):
        best = candidate

    # an equally distant point may still sit on the plane
    plane = ordering.axis_squared_distance(root.point, query, root.axis)
    if plane <= best.squared_distance:
        candidate = nearest(far, query, ordering)
        if candidate is not None and _closer(candidate, best, ordering):
            best = candidate

    return best


# ---------------------------------------------------------------------------
# k nearest
# ---------------------------------------------------------------------------


def k_nearest(
    root: KDNode[P] | None,
    query: P,
    k: int,
    ordering: AxisOrdering[P],
) -> list[Neighbor[P]]:
    """Return the *k* stored points closest to *query*, ascending by distance.

    Returns fewer than *k* results only when the tree holds fewer
    points; ``k <= 0`` returns ``[]``.  Equal distances are ordered by
    coordinates.
    """
    if root is None or k <= 0:
        return []

    # Max-heap on (distance, coordinates) via negation; the sequence
    # number only separates exact duplicates.
    heap: list[tuple[float, _Key, int, P]] = []
    counter = itertools.count()

    def visit(node: KDNode[P] | None) -> None:
        if node is None:
            return

        distance = ordering.squared_distance(node.point, query)
        key = ordering.coordinates(node.point)
        entry = (-distance, _negate(key), -next(counter), node.point)
        if len(heap) < k:
            heapq.heappush(heap, entry)
        elif (distance, key) < (-heap[0][0], _negate(heap[0][1])):
            heapq.heapreplace(heap, entry)

        near, far = _split(node, query, ordering)
        visit(near)

        plane = ordering.axis_squared_distance(node.point, query, node.axis)
        if len(heap) < k or plane <= -heap[0][0]:
            visit(far)

    visit(root)
    ranked = sorted(heap, key=lambda entry: (-entry[0], _negate(entry[1]), -entry[2]))
    return [Neighbor(point, -neg_distance) for neg_distance, _key, _seq, point in ranked]


# ---------------------------------------------------------------------------
# Fixed radius
# ---------------------------------------------------------------------------


def within_distance(
    root: KDNode[P] | None,
    query: P,
    max_squared_distance: float,
    ordering: AxisOrdering[P],
) -> list[Neighbor[P]]:
    """Return every stored point within *max_squared_distance* of *query*.

    The bound is inclusive.  Results are ascending by distance, then by
    coordinates; a negative bound returns ``[]``.
    """
    if root is None or max_squared_distance < 0:
        return []

    found: list[tuple[float, _Key, int, P]] = []
    counter = itertools.count()
    stack: list[KDNode[P]] = [root]
    while stack:
        node = stack.pop()
        distance = ordering.squared_distance(node.point, query)
        if distance <= max_squared_distance:
            found.append((distance, ordering.coordinates(node.point), next(counter), node.point))

        near, far = _split(node, query, ordering)
        plane = ordering.axis_squared_distance(node.point, query, node.axis)
        if far is not None and plane <= max_squared_distance:
            stack.append(far)
        if near is not None:
            stack.append(near)

    found.sort(key=lambda entry: (entry[0], entry[1], entry[2]))
    return [Neighbor(point, distance) for distance, _key, _seq, point in found]
