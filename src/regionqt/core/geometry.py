"""
Integer geometry primitives.

Provides Point, BoundingBox and LineSegment. BoundingBox.quadrants() is
the single place the center-split rule lives; building, encoding,
decoding and overlay extraction all derive child regions from it so the
four traversals agree on the tree shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from regionqt.core.errors import InvalidBoundingBoxError


@dataclass(frozen=True)
class Point:
    """
    Non-negative integer coordinate pair.

    Attributes:
        x: Column
        y: Row
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Point coordinates must be non-negative, got ({self.x}, {self.y})")

    @classmethod
    def from_tuple(cls, value: tuple[int, int]) -> Point:
        """Create a point from an (x, y) tuple."""
        return cls(int(value[0]), int(value[1]))

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __floordiv__(self, divisor: int) -> Point:
        return Point(self.x // divisor, self.y // divisor)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def l1(self, other: Point) -> int:
        """Manhattan distance to another point."""
        return abs(other.x - self.x) + abs(other.y - self.y)

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"


@dataclass(frozen=True)
class LineSegment:
    """
    Segment between two points, both endpoints inclusive.

    Attributes:
        start: First endpoint
        end: Second endpoint
    """

    start: Point
    end: Point

    @property
    def is_vertical(self) -> bool:
        return self.start.x == self.end.x

    @property
    def is_horizontal(self) -> bool:
        return self.start.y == self.end.y

    @property
    def length(self) -> int:
        """Manhattan length of the segment."""
        return self.start.l1(self.end)

    def __repr__(self) -> str:
        return f"LineSegment({self.start!r} -> {self.end!r})"


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned pixel rectangle [min.x, max.x) x [min.y, max.y).

    The max corner is exclusive, so a box from (0, 0) to (w, h) covers
    exactly the pixels of a w x h image.

    Attributes:
        min: Inclusive lower corner
        max: Exclusive upper corner
    """

    min: Point
    max: Point

    def __post_init__(self) -> None:
        if self.min.x > self.max.x or self.min.y > self.max.y:
            raise InvalidBoundingBoxError(
                f"Bounding box min {self.min!r} exceeds max {self.max!r}"
            )

    @classmethod
    def from_size(cls, width: int, height: int) -> BoundingBox:
        """Box covering a whole width x height image."""
        return cls(Point(0, 0), Point(width, height))

    @property
    def width(self) -> int:
        return self.max.x - self.min.x

    @property
    def height(self) -> int:
        return self.max.y - self.min.y

    @property
    def area(self) -> int:
        """Number of pixels covered."""
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    @property
    def is_divisible(self) -> bool:
        """False once the box is at most one pixel in both axes."""
        return self.width > 1 or self.height > 1

    def center(self) -> Point:
        """Split point, floored toward min for odd sizes."""
        return (self.min + self.max) // 2

    def quadrants(self) -> tuple[BoundingBox, BoundingBox, BoundingBox, BoundingBox]:
        """
        Split into four child boxes in canonical order.

        Returns:
            (top-left, top-right, bottom-left, bottom-right), where "top"
            is the half with the larger y values. Children of a box one
            pixel wide (or tall) may be empty.
        """
        c = self.center()
        return (
            BoundingBox(Point(self.min.x, c.y), Point(c.x, self.max.y)),
            BoundingBox(c, self.max),
            BoundingBox(self.min, c),
            BoundingBox(Point(c.x, self.min.y), Point(self.max.x, c.y)),
        )

    def contains(self, point: Point) -> bool:
        """Check if a pixel coordinate lies inside the box."""
        return self.min.x <= point.x < self.max.x and self.min.y <= point.y < self.max.y

    def contains_box(self, other: BoundingBox) -> bool:
        """Check if another box lies entirely inside this one."""
        return (
            self.min.x <= other.min.x
            and self.min.y <= other.min.y
            and other.max.x <= self.max.x
            and other.max.y <= self.max.y
        )

    def edges(self) -> tuple[LineSegment, LineSegment, LineSegment, LineSegment]:
        """Outline as (left, top, right, bottom) segments, walking the corners."""
        top_left = Point(self.min.x, self.max.y)
        bottom_right = Point(self.max.x, self.min.y)
        return (
            LineSegment(self.min, top_left),
            LineSegment(top_left, self.max),
            LineSegment(self.max, bottom_right),
            LineSegment(bottom_right, self.min),
        )

    def __repr__(self) -> str:
        return f"BoundingBox(({self.min.x}, {self.min.y}) .. ({self.max.x}, {self.max.y}))"
