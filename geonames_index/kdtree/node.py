"""KD-tree node.

Nodes are frozen: the builder creates children first and hands them to
the parent's constructor, so a finished tree is never mutated and can
be shared between any number of concurrent readers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

    from geonames_index.geometry.ordering import Axis

P = TypeVar("P")


@dataclass(frozen=True, slots=True)
class KDNode(Generic[P]):
    """One node of a balanced KD-tree.

    Attributes:
        point: The stored point.
        axis: Splitting axis at this node (cycles with depth).
        left: Subtree whose coordinates on ``axis`` are <= this node's.
        right: Subtree whose coordinates on ``axis`` are >= this node's.
    """

    point: P
    axis: Axis
    left: KDNode[P] | None = None
    right: KDNode[P] | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def iter_points(self) -> Iterator[P]:
        """Yield every point in this subtree, pre-order."""
        stack: list[KDNode[P]] = [self]
        while stack:
            node = stack.pop()
            yield node.point
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)


def subtree_height(node: KDNode[P] | None) -> int:
    """Number of levels below and including *node* (0 for an absent subtree)."""
    if node is None:
        return 0
    return 1 + max(subtree_height(node.left), subtree_height(node.right))


def subtree_size(node: KDNode[P] | None) -> int:
    if node is None:
        return 0
    return 1 + subtree_size(node.left) + subtree_size(node.right)
