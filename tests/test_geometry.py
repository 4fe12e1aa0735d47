"""Tests for Point, BoundingBox and LineSegment."""

import pytest

from regionqt.core.errors import InvalidBoundingBoxError
from regionqt.core.geometry import BoundingBox, LineSegment, Point


def box(x0, y0, x1, y1):
    return BoundingBox(Point(x0, y0), Point(x1, y1))


class TestPoint:
    """Tests for Point arithmetic."""

    def test_arithmetic(self):
        assert Point(3, 4) + Point(1, 2) == Point(4, 6)
        assert Point(3, 4) - Point(1, 2) == Point(2, 2)
        assert Point(5, 7) // 2 == Point(2, 3)

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            Point(-1, 0)
        with pytest.raises(ValueError):
            Point(1, 1) - Point(2, 0)

    def test_l1_distance(self):
        assert Point(1, 1).l1(Point(4, 5)) == 7
        assert Point(4, 5).l1(Point(1, 1)) == 7

    def test_unpack_and_from_tuple(self):
        x, y = Point.from_tuple((6, 9))
        assert (x, y) == (6, 9)


class TestBoundingBox:
    """Tests for BoundingBox geometry and the quadrant rule."""

    def test_invalid_box(self):
        with pytest.raises(InvalidBoundingBoxError):
            box(3, 0, 2, 5)
        with pytest.raises(ValueError):
            box(0, 4, 5, 3)

    def test_dimensions(self):
        b = box(1, 2, 6, 5)
        assert (b.width, b.height, b.area) == (5, 3, 15)
        assert not b.is_empty
        assert box(2, 2, 2, 7).is_empty

    def test_center_floors_toward_min(self):
        assert box(0, 0, 4, 4).center() == Point(2, 2)
        assert box(1, 1, 4, 4).center() == Point(2, 2)
        assert box(0, 0, 5, 3).center() == Point(2, 1)

    def test_quadrant_order(self):
        tl, tr, bl, br = box(0, 0, 5, 3).quadrants()

        assert tl == box(0, 1, 2, 3)
        assert tr == box(2, 1, 5, 3)
        assert bl == box(0, 0, 2, 1)
        assert br == box(2, 0, 5, 1)

    def test_quadrants_partition_parent(self):
        for parent in [box(0, 0, 8, 8), box(3, 1, 10, 4), box(0, 0, 1, 7), box(2, 5, 9, 6)]:
            quadrants = parent.quadrants()
            assert sum(q.area for q in quadrants) == parent.area
            assert all(parent.contains_box(q) for q in quadrants)

    def test_unit_width_box_yields_empty_children(self):
        tl, tr, bl, br = box(4, 0, 5, 4).quadrants()
        assert tl.is_empty and bl.is_empty
        assert tr == box(4, 2, 5, 4)
        assert br == box(4, 0, 5, 2)

    def test_divisible(self):
        assert box(0, 0, 2, 1).is_divisible
        assert not box(0, 0, 1, 1).is_divisible
        assert not box(3, 3, 3, 3).is_divisible

    def test_contains_is_half_open(self):
        b = box(0, 0, 2, 2)
        assert b.contains(Point(0, 0))
        assert b.contains(Point(1, 1))
        assert not b.contains(Point(2, 1))
        assert not b.contains(Point(1, 2))

    def test_edges_walk_corners(self):
        left, top, right, bottom = box(0, 0, 2, 3).edges()

        assert left == LineSegment(Point(0, 0), Point(0, 3))
        assert top == LineSegment(Point(0, 3), Point(2, 3))
        assert right == LineSegment(Point(2, 3), Point(2, 0))
        assert bottom == LineSegment(Point(2, 0), Point(0, 0))


class TestLineSegment:
    """Tests for LineSegment."""

    def test_orientation(self):
        vertical = LineSegment(Point(2, 0), Point(2, 5))
        horizontal = LineSegment(Point(0, 3), Point(4, 3))

        assert vertical.is_vertical and not vertical.is_horizontal
        assert horizontal.is_horizontal and not horizontal.is_vertical
        assert vertical.length == 5
        assert horizontal.length == 4
