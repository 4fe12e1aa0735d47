"""
regionqt - lossless region quadtrees for raster images.

Builds a quadtree whose leaves are single-color rectangles, serializes
it to a compact binary form, and projects it back into pixels or into
split-line overlays.
"""

__version__ = "0.1.0"

from regionqt.core.data_types import PixelBuffer, PixelSource, Rgba
from regionqt.core.errors import (
    CorruptDataError,
    EmptyTreeError,
    InvalidBoundingBoxError,
    RegionQtError,
    SourceUnavailableError,
)
from regionqt.core.geometry import BoundingBox, LineSegment, Point
from regionqt.quadtree.tree import RegionQt

__all__ = [
    "__version__",
    "RegionQt",
    "PixelBuffer",
    "PixelSource",
    "Rgba",
    "Point",
    "BoundingBox",
    "LineSegment",
    "RegionQtError",
    "SourceUnavailableError",
    "EmptyTreeError",
    "CorruptDataError",
    "InvalidBoundingBoxError",
]
