"""Geometry, pixel data types and errors."""

from regionqt.core.data_types import (
    GRAY,
    Color,
    ColorState,
    PixelBuffer,
    PixelSource,
    Rgba,
    as_pixel_source,
)
from regionqt.core.errors import (
    CorruptDataError,
    EmptyTreeError,
    InvalidBoundingBoxError,
    RegionQtError,
    SourceUnavailableError,
)
from regionqt.core.geometry import BoundingBox, LineSegment, Point

__all__ = [
    "GRAY",
    "Color",
    "ColorState",
    "PixelBuffer",
    "PixelSource",
    "Rgba",
    "as_pixel_source",
    "Point",
    "BoundingBox",
    "LineSegment",
    "RegionQtError",
    "SourceUnavailableError",
    "EmptyTreeError",
    "CorruptDataError",
    "InvalidBoundingBoxError",
]
