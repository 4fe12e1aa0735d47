"""
Persistence boundary.

Decodes image files into PixelBuffers with Pillow and moves encoded
trees to and from disk. File system errors are left to propagate so
callers can tell a missing file apart from a corrupt one.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from regionqt.core.data_types import PixelBuffer
from regionqt.core.errors import SourceUnavailableError

logger = logging.getLogger(__name__)


def open_image(path: str | Path) -> PixelBuffer:
    """
    Decode an image file into an RGBA PixelBuffer.

    Args:
        path: Any format Pillow can read

    Returns:
        Decoded pixels

    Raises:
        SourceUnavailableError: If the file is missing, unreadable or
            cannot be decoded
    """
    path = Path(path)
    try:
        with Image.open(path) as img:
            buffer = PixelBuffer(np.array(img.convert("RGBA")))
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as e:
        raise SourceUnavailableError(f"Cannot decode image {path}: {e}") from e

    logger.info("Loaded %s (%dx%d)", path, buffer.width, buffer.height)
    return buffer


def write_tree(path: str | Path, data: bytes) -> None:
    """Write an encoded tree to a file."""
    path = Path(path)
    path.write_bytes(data)
    logger.info("Wrote %d bytes to %s", len(data), path)


def read_tree(path: str | Path) -> bytes:
    """Read an encoded tree from a file."""
    path = Path(path)
    data = path.read_bytes()
    logger.info("Read %d bytes from %s", len(data), path)
    return data
