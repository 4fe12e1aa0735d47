"""
Region quadtree nodes.

A node is either a Leaf holding one resolved color for its whole
bounding box, or an Interior node holding exactly four children that
partition its box in canonical quadrant order. Nodes are immutable once
built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from regionqt.core.data_types import GRAY, ColorState, Rgba
from regionqt.core.geometry import BoundingBox

# Canonical child indices
TOP_LEFT = 0
TOP_RIGHT = 1
BOTTOM_LEFT = 2
BOTTOM_RIGHT = 3


@dataclass(frozen=True)
class Leaf:
    """
    Homogeneous region.

    Attributes:
        bounding: Region covered
        color: Color of every pixel in the region
    """

    bounding: BoundingBox
    color: Rgba

    is_leaf = True

    @property
    def data(self) -> Rgba:
        return self.color

    @property
    def children(self) -> tuple[()]:
        return ()

    def __repr__(self) -> str:
        return f"Leaf({self.bounding!r}, {self.color!r})"


@dataclass(frozen=True)
class Interior:
    """
    Heterogeneous region split into four quadrants.

    Attributes:
        bounding: Region covered
        children: Sub-regions as (top-left, top-right, bottom-left, bottom-right)
    """

    bounding: BoundingBox
    children: tuple[RegionNode, RegionNode, RegionNode, RegionNode]

    is_leaf = False

    def __post_init__(self) -> None:
        if len(self.children) != 4:
            raise ValueError(f"Interior node needs 4 children, got {len(self.children)}")

    @property
    def data(self) -> ColorState:
        return GRAY

    def __repr__(self) -> str:
        return f"Interior({self.bounding!r})"


RegionNode = Union[Leaf, Interior]


def iter_nodes(root: RegionNode) -> Iterator[RegionNode]:
    """Walk every node in pre-order (parent, then children 0..3)."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        # Reversed so child 0 is visited first
        stack.extend(reversed(node.children))


def iter_leaves(root: RegionNode) -> Iterator[Leaf]:
    """Walk leaves in pre-order."""
    for node in iter_nodes(root):
        if node.is_leaf:
            yield node


def count_nodes(root: RegionNode) -> int:
    return sum(1 for _ in iter_nodes(root))


def count_leaves(root: RegionNode) -> int:
    return sum(1 for _ in iter_leaves(root))


def tree_depth(root: RegionNode) -> int:
    """Number of levels below the root (0 for a single leaf)."""
    depth = 0
    level = [root]
    while True:
        level = [child for node in level for child in node.children]
        if not level:
            return depth
        depth += 1
