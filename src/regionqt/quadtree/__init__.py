"""Region quadtree build engine, codec and projections."""

from regionqt.quadtree.node import Interior, Leaf, RegionNode
from regionqt.quadtree.tree import RegionQt

__all__ = [
    "Interior",
    "Leaf",
    "RegionNode",
    "RegionQt",
]
