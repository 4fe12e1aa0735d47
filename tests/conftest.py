"""Shared image fixtures for regionqt tests."""

import numpy as np
import pytest

from regionqt.core.data_types import PixelBuffer, Rgba

# Corner colors of the 2x2 checkerboard, indexed by (x, y)
CORNERS = {
    (0, 0): Rgba(255, 0, 0, 255),
    (1, 0): Rgba(0, 255, 0, 255),
    (0, 1): Rgba(0, 0, 255, 255),
    (1, 1): Rgba(255, 255, 0, 128),
}


def make_image(width, height, colors=3, seed=0):
    """Random image drawn from a small palette so some regions merge."""
    rng = np.random.default_rng(seed)
    palette = rng.integers(0, 256, size=(colors, 4), dtype=np.uint8)
    index = rng.integers(0, colors, size=(height, width))
    return PixelBuffer(palette[index])


@pytest.fixture
def uniform_image():
    """Solid 4x4 image."""
    return PixelBuffer.blank(4, 4, Rgba(10, 20, 30, 255))


@pytest.fixture
def checkerboard():
    """2x2 image with four distinct colors."""
    data = np.zeros((2, 2, 4), dtype=np.uint8)
    for (x, y), color in CORNERS.items():
        data[y, x] = color
    return PixelBuffer(data)


@pytest.fixture
def blocky_image():
    """32x32 image with large uniform blocks and one noisy corner."""
    data = np.zeros((32, 32, 4), dtype=np.uint8)
    data[..., 3] = 255
    data[:16, :16, 0] = 200
    data[16:, 16:, 1] = 120
    rng = np.random.default_rng(7)
    data[:4, 28:, :3] = rng.integers(0, 4, size=(4, 4, 3)) * 60
    return PixelBuffer(data)
