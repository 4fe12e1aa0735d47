"""
Public region quadtree handle.

RegionQt ties the build engine, codec and raster projections together
behind one object that is empty until build() or load() populates it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator

from regionqt.config import settings
from regionqt.core.data_types import PixelBuffer, Rgba, as_pixel_source
from regionqt.core.errors import EmptyTreeError
from regionqt.core.geometry import LineSegment
from regionqt.io import open_image, read_tree, write_tree
from regionqt.quadtree import codec, raster
from regionqt.quadtree.build import build_tree
from regionqt.quadtree.node import (
    Leaf,
    RegionNode,
    count_leaves,
    count_nodes,
    iter_leaves,
    tree_depth,
)


class RegionQt:
    """
    Region quadtree over an RGBA image.

    Usage:
        tree = RegionQt().build(pixels)
        data = tree.save()
        restored = RegionQt.load(data)
        assert restored.to_pixel_buffer() == tree.to_pixel_buffer()

    Attributes:
        width: Image width recorded at build time
        height: Image height recorded at build time
    """

    def __init__(self) -> None:
        """Create an empty tree."""
        self._root: RegionNode | None = None
        self.width: int = 0
        self.height: int = 0

    @property
    def is_built(self) -> bool:
        return self._root is not None

    @property
    def root(self) -> RegionNode:
        """Root node (raises EmptyTreeError before a build)."""
        return self._require_root("access the root")

    def _require_root(self, operation: str) -> RegionNode:
        if self._root is None:
            raise EmptyTreeError(operation)
        return self._root

    def build(self, source: Any, workers: int | None = None) -> RegionQt:
        """
        Build the tree from an image, replacing any previous tree.

        Args:
            source: PixelSource, HWC numpy array, PIL image, or a path
                    to an image file
            workers: Threads for the root quadrants (default:
                     settings.build_workers)

        Returns:
            self, for chaining
        """
        if isinstance(source, (str, Path)):
            source = open_image(source)
        pixels = as_pixel_source(source)

        if workers is None:
            workers = settings.build_workers

        # Discard first so a failed build never leaves a stale tree
        self._root = None
        self.width = self.height = 0

        root = build_tree(pixels, workers=workers)
        self._root = root
        self.width, self.height = root.bounding.width, root.bounding.height
        return self

    def dimensions(self) -> tuple[int, int]:
        """Image size as (width, height)."""
        self._require_root("get dimensions")
        return (self.width, self.height)

    def save(self) -> bytes:
        """Encode the tree to bytes."""
        root = self._require_root("save")
        return codec.encode(root, self.width, self.height)

    @classmethod
    def load(cls, data: bytes) -> RegionQt:
        """
        Restore a tree from save() output.

        Raises:
            CorruptDataError: If the data is truncated or malformed
        """
        root, width, height = codec.decode(data)
        tree = cls()
        tree._root = root
        tree.width, tree.height = width, height
        return tree

    def write(self, path: str | Path) -> None:
        """Save the tree to a file."""
        write_tree(path, self.save())

    @classmethod
    def from_file(cls, path: str | Path) -> RegionQt:
        """Load a tree written by write()."""
        return cls.load(read_tree(path))

    def to_pixel_buffer(self) -> PixelBuffer:
        """Rasterize the tree back into pixels."""
        root = self._require_root("rasterize")
        return raster.rasterize(root, self.width, self.height)

    def overlay_lines(self) -> list[LineSegment]:
        """Split lines of every interior node, in pre-order."""
        root = self._require_root("extract overlay lines")
        return raster.split_lines(root)

    def render_overlay(
        self,
        color: Rgba | tuple[int, int, int, int] | None = None,
        base: PixelBuffer | None = None,
        frame: bool = False,
    ) -> PixelBuffer:
        """
        Draw the subdivision over the rasterized tree (or over base).

        Args:
            color: Line color (default: settings.overlay_color)
            base: Image to draw over, same size as the tree
            frame: Also outline the image border
        """
        root = self._require_root("render overlay")
        if base is not None and base.size != (self.width, self.height):
            raise ValueError(
                f"Overlay base is {base.width}x{base.height}, tree is {self.width}x{self.height}"
            )
        line_color = Rgba(*(color if color is not None else settings.overlay_color))
        return raster.render_overlay(root, self.width, self.height, line_color, base, frame)

    def leaves(self) -> Iterator[Leaf]:
        """Iterate leaves in pre-order."""
        return iter_leaves(self._require_root("iterate leaves"))

    def node_count(self) -> int:
        return count_nodes(self._require_root("count nodes"))

    def leaf_count(self) -> int:
        return count_leaves(self._require_root("count leaves"))

    def depth(self) -> int:
        """Levels below the root (0 for a uniform image)."""
        return tree_depth(self._require_root("measure depth"))

    def __repr__(self) -> str:
        if self._root is None:
            return "RegionQt(empty)"
        return f"RegionQt({self.width}x{self.height}, {self.leaf_count()} leaves)"
