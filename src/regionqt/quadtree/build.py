"""
Region quadtree build engine.

Recursively tests each region for a single color and splits the
non-homogeneous ones into four quadrants until every leaf is uniform
or a single pixel.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from regionqt.core.data_types import GRAY, Color, PixelBuffer, PixelSource, Rgba
from regionqt.core.errors import SourceUnavailableError
from regionqt.core.geometry import BoundingBox, Point
from regionqt.quadtree.node import Interior, Leaf, RegionNode, count_leaves, count_nodes

logger = logging.getLogger(__name__)


def _sample(source: PixelSource, point: Point) -> Rgba:
    """Read one pixel, turning source failures into SourceUnavailableError."""
    try:
        return Rgba.from_channels(source.pixel(point.x, point.y))
    except (OSError, IndexError, ValueError, TypeError) as e:
        raise SourceUnavailableError(f"Cannot read pixel ({point.x}, {point.y}): {e}") from e


def _dimension(source: PixelSource, name: str) -> int:
    """Read width or height, whether exposed as an attribute or a method."""
    try:
        value = getattr(source, name)
        return int(value() if callable(value) else value)
    except (AttributeError, TypeError, ValueError) as e:
        raise SourceUnavailableError(f"Cannot read pixel source {name}: {e}") from e


def region_color(source: PixelSource, box: BoundingBox) -> Color:
    """
    Determine whether a region is a single color.

    The pixel at box.min is the candidate; the scan stops at the first
    pixel that differs. PixelBuffer sources are compared in one numpy
    pass, anything else is scanned pixel by pixel in row-major order.

    Args:
        source: Image to sample
        box: Region to test

    Returns:
        The shared Rgba color, or GRAY if the region has more than one
        color. Empty boxes count as homogeneous.
    """
    candidate = _sample(source, box.min)

    if box.is_empty:
        return candidate

    if isinstance(source, PixelBuffer):
        if (source.region(box) != candidate).any():
            return GRAY
        return candidate

    for y in range(box.min.y, box.max.y):
        for x in range(box.min.x, box.max.x):
            if _sample(source, Point(x, y)) != candidate:
                return GRAY

    return candidate


def build_region(source: PixelSource, bounding: BoundingBox) -> RegionNode:
    """
    Build the subtree covering one region.

    Args:
        source: Image to sample
        bounding: Region this subtree covers

    Returns:
        Leaf if the region is uniform or at most one pixel in each axis,
        otherwise an Interior node over bounding.quadrants()
    """
    # Must stop before center(): quartering a unit box repeats itself
    if not bounding.is_divisible:
        return Leaf(bounding, _sample(source, bounding.min))

    color = region_color(source, bounding)
    if color is not GRAY:
        return Leaf(bounding, color)

    children = tuple(build_region(source, quadrant) for quadrant in bounding.quadrants())
    return Interior(bounding, children)


def build_tree(source: PixelSource, workers: int = 1) -> RegionNode:
    """
    Build a region quadtree covering a whole image.

    Args:
        source: Decoded image with width, height and pixel(x, y)
        workers: Threads used for the root's four quadrants. With more
                 than one worker the quadrants are built concurrently and
                 reassembled in canonical order, giving the same tree as
                 a serial build.

    Returns:
        Root node of the tree

    Raises:
        SourceUnavailableError: If the source is empty or cannot be sampled
    """
    width, height = _dimension(source, "width"), _dimension(source, "height")
    if width <= 0 or height <= 0:
        raise SourceUnavailableError(f"Pixel source has no pixels ({width}x{height})")

    bounding = BoundingBox.from_size(width, height)

    if workers > 1 and bounding.is_divisible and region_color(source, bounding) is GRAY:
        with ThreadPoolExecutor(max_workers=min(workers, 4)) as pool:
            children = tuple(
                pool.map(lambda quadrant: build_region(source, quadrant), bounding.quadrants())
            )
        root: RegionNode = Interior(bounding, children)
    else:
        root = build_region(source, bounding)

    if logger.isEnabledFor(logging.INFO):
        logger.info(
            "Built %dx%d region quadtree: %d nodes, %d leaves",
            width,
            height,
            count_nodes(root),
            count_leaves(root),
        )

    return root
