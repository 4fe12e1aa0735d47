"""
Exception hierarchy for regionqt.

All errors raised by the package derive from RegionQtError so callers
can catch them in one place. Validation errors also derive from
ValueError to match how the rest of the package reports bad input.
"""

from __future__ import annotations


class RegionQtError(Exception):
    """Base class for all region quadtree errors."""


class SourceUnavailableError(RegionQtError):
    """The pixel source could not be read or decoded."""


class EmptyTreeError(RegionQtError):
    """An operation needs a built tree but none exists yet."""

    def __init__(self, operation: str = "operation") -> None:
        super().__init__(f"Cannot {operation}: the tree has not been built")
        self.operation = operation


class CorruptDataError(RegionQtError, ValueError):
    """Serialized tree data is truncated or malformed."""

    def __init__(self, message: str, offset: int | None = None) -> None:
        if offset is not None:
            message = f"{message} (at byte {offset})"
        super().__init__(message)
        self.offset = offset


class InvalidBoundingBoxError(RegionQtError, ValueError):
    """A bounding box was constructed with min greater than max."""
