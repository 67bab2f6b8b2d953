"""Generic 3-D KD-tree.

- node: immutable ``KDNode``
- builder: balanced median-split construction (``build_tree``)
- search: ``nearest``, ``k_nearest`` and ``within_distance``

``KDTree`` bundles a built root with the ``AxisOrdering`` it was built
with, so callers don't have to pass the ordering to every query.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from geonames_index.kdtree.builder import build_tree
from geonames_index.kdtree.node import KDNode, subtree_height, subtree_size
from geonames_index.kdtree.search import Neighbor, k_nearest, nearest, within_distance

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from geonames_index.geometry.ordering import AxisOrdering

__all__ = [
    "KDNode",
    "KDTree",
    "Neighbor",
    "build_tree",
    "k_nearest",
    "nearest",
    "within_distance",
]

P = TypeVar("P")


class KDTree(Generic[P]):
    """A read-only KD-tree over points of type ``P``.

    Build once with ``KDTree.build``; to pick up new points, build a new
    tree and swap the reference.  Instances are safe to share between
    threads.

    Example usage::

        tree = KDTree.build([(1.0, 0.0, 0.0), (0.0, 1.0, 0.0)], CartesianOrdering())
        hit = tree.nearest((0.9, 0.1, 0.0))
    """

    __slots__ = ("_ordering", "_root", "_size")

    def __init__(self, root: KDNode[P] | None, ordering: AxisOrdering[P]) -> None:
        self._root = root
        self._ordering = ordering
        self._size = subtree_size(root)

    @classmethod
    def build(cls, points: Iterable[P], ordering: AxisOrdering[P]) -> KDTree[P]:
        return cls(build_tree(points, ordering), ordering)

    @property
    def root(self) -> KDNode[P] | None:
        return self._root

    @property
    def ordering(self) -> AxisOrdering[P]:
        return self._ordering

    @property
    def size(self) -> int:
        return self._size

    @property
    def height(self) -> int:
        """Number of levels in the tree (0 when empty)."""
        return subtree_height(self._root)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[P]:
        if self._root is None:
            return iter(())
        return self._root.iter_points()

    def nearest(self, query: P) -> Neighbor[P] | None:
        return nearest(self._root, query, self._ordering)

    def k_nearest(self, query: P, k: int) -> list[Neighbor[P]]:
        return k_nearest(self._root, query, k, self._ordering)

    def within(self, query: P, max_squared_distance: float) -> list[Neighbor[P]]:
        return within_distance(self._root, query, max_squared_distance, self._ordering)
