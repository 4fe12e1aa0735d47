"""
Core data types for regionqt.

Provides Rgba colors, the PixelSource protocol consumed by the build
engine, and PixelBuffer, the numpy-backed RGBA grid used both as a
pixel source and as the rasterization target.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, NamedTuple, Protocol, Union, runtime_checkable

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from regionqt.core.geometry import BoundingBox


class Rgba(NamedTuple):
    """Resolved 8-bit RGBA color."""

    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_channels(cls, channels: Any) -> Rgba:
        """Create from any 4-item sequence or array of channel values."""
        r, g, b, a = (int(c) for c in channels)
        for value in (r, g, b, a):
            if not 0 <= value <= 255:
                raise ValueError(f"Channel value {value} outside 0-255")
        return cls(r, g, b, a)

    def __repr__(self) -> str:
        return f"Rgba({self.r}, {self.g}, {self.b}, {self.a})"


class ColorState(Enum):
    """Color marker for regions that are not a single color."""

    GRAY = auto()  # Heterogeneous, interior nodes only


GRAY = ColorState.GRAY

Color = Union[Rgba, ColorState]


@runtime_checkable
class PixelSource(Protocol):
    """
    Decoded image the build engine samples from.

    Anything with integer width/height (attributes or zero-argument
    methods) and a pixel(x, y) method returning four 0-255 channel
    values qualifies.
    """

    width: int
    height: int

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        ...


@dataclass(eq=False)
class PixelBuffer:
    """
    RGBA uint8 pixel grid.

    Attributes:
        data: Array with shape (H, W, 4)

    Shape Convention:
        - Height-width-channel format, row index is y
        - 2D input is treated as grayscale and expanded to RGBA
        - 3-channel input gets an opaque alpha channel
    """

    data: NDArray[np.uint8]

    def __post_init__(self) -> None:
        """Validate and normalize the buffer after creation."""
        data = np.asarray(self.data)

        if data.ndim == 2:
            data = np.repeat(data[:, :, np.newaxis], 3, axis=2)
        elif data.ndim != 3:
            raise ValueError(f"PixelBuffer data must be 2D or 3D, got {data.ndim}D")

        channels = data.shape[2]
        if channels == 3:
            alpha = np.full(data.shape[:2] + (1,), 255, dtype=data.dtype)
            data = np.concatenate([data, alpha], axis=2)
        elif channels != 4:
            raise ValueError(f"PixelBuffer needs 3 or 4 channels, got {channels}")

        if data.dtype != np.uint8:
            data = np.clip(data, 0, 255).astype(np.uint8)

        self.data = np.ascontiguousarray(data)

    @property
    def height(self) -> int:
        """Image height in pixels."""
        return self.data.shape[0]

    @property
    def width(self) -> int:
        """Image width in pixels."""
        return self.data.shape[1]

    @property
    def shape(self) -> tuple[int, int, int]:
        """Shape as (height, width, 4)."""
        return self.data.shape  # type: ignore

    @property
    def size(self) -> tuple[int, int]:
        """Size as (width, height) - common image convention."""
        return (self.width, self.height)

    @property
    def bounding(self) -> BoundingBox:
        """Box covering the whole buffer."""
        return BoundingBox.from_size(self.width, self.height)

    def pixel(self, x: int, y: int) -> Rgba:
        """
        Get the color at a pixel.

        Raises:
            IndexError: If (x, y) lies outside the buffer
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        return Rgba.from_channels(self.data[y, x])

    def set_pixel(self, x: int, y: int, color: Rgba) -> None:
        """Set a single pixel (no-op if out of bounds)."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.data[y, x] = color

    def region(self, box: BoundingBox) -> NDArray[np.uint8]:
        """View of the pixels inside a box, shape (box.height, box.width, 4)."""
        return self.data[box.min.y : box.max.y, box.min.x : box.max.x]

    def fill(self, box: BoundingBox, color: Rgba) -> None:
        """Paint every pixel of a box (clips to bounds)."""
        self.data[box.min.y : box.max.y, box.min.x : box.max.x] = color

    def copy(self) -> PixelBuffer:
        """Create a deep copy of this buffer."""
        return PixelBuffer(self.data.copy())

    @classmethod
    def blank(cls, width: int, height: int, color: Rgba = Rgba(0, 0, 0, 0)) -> PixelBuffer:
        """Create a buffer filled with a single color."""
        data = np.empty((height, width, 4), dtype=np.uint8)
        data[:, :] = color
        return cls(data)

    @classmethod
    def from_hwc(cls, data: NDArray) -> PixelBuffer:
        """Create from height-width-channel array (H, W) / (H, W, 3) / (H, W, 4)."""
        return cls(np.asarray(data))

    def to_hwc(self) -> NDArray[np.uint8]:
        """Copy of the pixels in (H, W, 4) format for PIL/OpenCV."""
        return self.data.copy()

    def to_image(self) -> Image.Image:
        """Convert to an RGBA PIL image."""
        return Image.fromarray(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return np.array_equal(self.data, other.data)

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height})"


def as_pixel_source(source: Any) -> PixelSource:
    """
    Coerce common image representations into a PixelSource.

    Args:
        source: PixelSource, numpy array in HWC layout, or PIL image

    Returns:
        The source itself if it already satisfies PixelSource,
        otherwise a PixelBuffer copy of it
    """
    if isinstance(source, PixelBuffer):
        return source
    if isinstance(source, Image.Image):
        return PixelBuffer(np.array(source.convert("RGBA")))
    if isinstance(source, np.ndarray):
        return PixelBuffer.from_hwc(source)
    if isinstance(source, PixelSource):
        return source
    raise TypeError(f"Cannot use {type(source).__name__} as a pixel source")
