"""
Tests for rasterization and overlay extraction.
"""

import pytest

from conftest import CORNERS
from regionqt.core.data_types import PixelBuffer, Rgba
from regionqt.core.geometry import LineSegment, Point
from regionqt.quadtree.build import build_tree
from regionqt.quadtree.node import iter_nodes
from regionqt.quadtree.raster import (
    draw_lines,
    iter_split_lines,
    rasterize,
    render_overlay,
    split_lines,
)

WHITE = Rgba(255, 255, 255, 255)


class TestRasterize:
    """Tests for rasterize."""

    def test_uniform(self, uniform_image):
        assert rasterize(build_tree(uniform_image), 4, 4) == uniform_image

    def test_checkerboard(self, checkerboard):
        out = rasterize(build_tree(checkerboard), 2, 2)
        for (x, y), color in CORNERS.items():
            assert out.pixel(x, y) == color


class TestSplitLines:
    """Tests for split-line extraction."""

    def test_uniform_has_no_lines(self, uniform_image):
        assert split_lines(build_tree(uniform_image)) == []

    def test_checkerboard_center_cross(self, checkerboard):
        lines = split_lines(build_tree(checkerboard))

        assert lines == [
            LineSegment(Point(1, 0), Point(1, 2)),
            LineSegment(Point(0, 1), Point(2, 1)),
        ]

    def test_two_lines_per_interior(self, blocky_image):
        root = build_tree(blocky_image)
        interior = [node for node in iter_nodes(root) if not node.is_leaf]

        lines = split_lines(root)
        assert len(lines) == 2 * len(interior)
        assert lines[:2] == [
            LineSegment(Point(16, 0), Point(16, 32)),
            LineSegment(Point(0, 16), Point(32, 16)),
        ]

    def test_restartable(self, blocky_image):
        root = build_tree(blocky_image)
        assert list(iter_split_lines(root)) == list(iter_split_lines(root))


class TestOverlay:
    """Tests for drawing overlays."""

    def test_draw_lines_clips(self):
        base = PixelBuffer.blank(3, 3, Rgba(0, 0, 0, 255))
        lines = [
            LineSegment(Point(1, 0), Point(1, 5)),
            LineSegment(Point(3, 0), Point(3, 2)),
        ]
        out = draw_lines(base, lines, WHITE)

        for y in range(3):
            assert out.pixel(1, y) == WHITE
            assert out.pixel(0, y) == Rgba(0, 0, 0, 255)
        # Base untouched
        assert base.pixel(1, 1) == Rgba(0, 0, 0, 255)

    def test_draw_lines_rejects_diagonal(self):
        base = PixelBuffer.blank(3, 3)
        with pytest.raises(ValueError):
            draw_lines(base, [LineSegment(Point(0, 0), Point(2, 2))], WHITE)

    def test_render_overlay_checkerboard(self, checkerboard):
        out = render_overlay(build_tree(checkerboard), 2, 2, WHITE)

        assert out.pixel(0, 0) == CORNERS[(0, 0)]
        assert out.pixel(1, 0) == WHITE
        assert out.pixel(0, 1) == WHITE
        assert out.pixel(1, 1) == WHITE

    def test_render_overlay_frame(self, uniform_image):
        out = render_overlay(build_tree(uniform_image), 4, 4, WHITE, frame=True)

        for i in range(4):
            assert out.pixel(0, i) == WHITE
            assert out.pixel(3, i) == WHITE
            assert out.pixel(i, 0) == WHITE
            assert out.pixel(i, 3) == WHITE
        assert out.pixel(1, 1) == Rgba(10, 20, 30, 255)

    def test_render_overlay_on_base(self, checkerboard):
        base = PixelBuffer.blank(2, 2, Rgba(1, 1, 1, 1))
        out = render_overlay(build_tree(checkerboard), 2, 2, WHITE, base=base)
        assert out.pixel(0, 0) == Rgba(1, 1, 1, 1)
