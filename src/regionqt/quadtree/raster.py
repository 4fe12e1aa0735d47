"""
Read-only projections of a region quadtree.

Rasterization paints every leaf back into a pixel buffer; split-line
extraction lists the quadrant boundaries of every interior node so a
rendering surface can overlay the subdivision.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from regionqt.core.data_types import PixelBuffer, Rgba
from regionqt.core.geometry import BoundingBox, LineSegment, Point
from regionqt.quadtree.node import RegionNode, iter_leaves, iter_nodes


def rasterize(root: RegionNode, width: int, height: int) -> PixelBuffer:
    """
    Reconstruct the pixel grid a tree was built from.

    Args:
        root: Root node
        width: Output width
        height: Output height

    Returns:
        Buffer where each leaf's box is filled with its color
    """
    buffer = PixelBuffer.blank(width, height)
    for leaf in iter_leaves(root):
        buffer.fill(leaf.bounding, leaf.color)
    return buffer


def iter_split_lines(root: RegionNode) -> Iterator[LineSegment]:
    """
    Yield the center cross of every interior node in pre-order.

    For each interior node the vertical line x = center.x over
    [min.y, max.y] comes first, then the horizontal line y = center.y
    over [min.x, max.x].
    """
    for node in iter_nodes(root):
        if node.is_leaf:
            continue
        box = node.bounding
        c = box.center()
        yield LineSegment(Point(c.x, box.min.y), Point(c.x, box.max.y))
        yield LineSegment(Point(box.min.x, c.y), Point(box.max.x, c.y))


def split_lines(root: RegionNode) -> list[LineSegment]:
    """All split lines of a tree, see iter_split_lines()."""
    return list(iter_split_lines(root))


def draw_lines(
    buffer: PixelBuffer,
    lines: Iterable[LineSegment],
    color: Rgba,
) -> PixelBuffer:
    """
    Paint axis-aligned segments onto a copy of a buffer.

    Segments are clipped to the buffer; parts outside it are dropped.

    Args:
        buffer: Image to draw on (left unchanged)
        lines: Vertical or horizontal segments
        color: Line color

    Returns:
        New buffer with the lines drawn

    Raises:
        ValueError: If a segment is neither vertical nor horizontal
    """
    out = buffer.copy()
    w, h = out.width, out.height

    for line in lines:
        x0, x1 = sorted((line.start.x, line.end.x))
        y0, y1 = sorted((line.start.y, line.end.y))

        if line.is_vertical:
            if x0 >= w:
                continue
            out.data[y0 : min(y1 + 1, h), x0] = color
        elif line.is_horizontal:
            if y0 >= h:
                continue
            out.data[y0, x0 : min(x1 + 1, w)] = color
        else:
            raise ValueError(f"Only axis-aligned lines can be drawn, got {line!r}")

    return out


def render_overlay(
    root: RegionNode,
    width: int,
    height: int,
    color: Rgba,
    base: PixelBuffer | None = None,
    frame: bool = False,
) -> PixelBuffer:
    """
    Visualize the subdivision of a tree.

    Args:
        root: Root node
        width: Image width
        height: Image height
        color: Line color
        base: Image to draw over (default: the rasterized tree)
        frame: Also outline the outermost pixels of the image

    Returns:
        New buffer with split lines drawn over the base image
    """
    if base is None:
        base = rasterize(root, width, height)

    lines = split_lines(root)
    if frame:
        # Last row/column are max - 1 since max is exclusive
        outline = BoundingBox(Point(0, 0), Point(width - 1, height - 1))
        lines.extend(outline.edges())

    return draw_lines(base, lines, color)
