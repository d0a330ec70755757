"""
Axis-parallel d-dimensional boxes.

A box is given by its lowest and highest corner; the empty box has no
corners. Boxes form a monoid under union (``|``) with the empty box as the
identity, which is how bounding boxes of point sets are built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from .range import Range
from .types import Point


@dataclass(frozen=True)
class Box:
    """
    A closed axis-parallel box.

    Attributes:
        min_point: Corner with the lowest coordinates (None for the empty box)
        max_point: Corner with the highest coordinates (None for the empty box)
    """

    min_point: Optional[Point] = None
    max_point: Optional[Point] = None

    @classmethod
    def empty(cls) -> Box:
        return cls()

    @classmethod
    def from_corners(cls, low: Point, high: Point) -> Box:
        return cls(tuple(low), tuple(high))

    @classmethod
    def bounding_box(cls, points: Iterable[Point]) -> Box:
        """The smallest box containing all points."""
        box = cls.empty()
        for p in points:
            box = box | cls(tuple(p), tuple(p))
        return box

    @property
    def is_empty(self) -> bool:
        return self.min_point is None or self.max_point is None

    def __or__(self, other: Box) -> Box:
        """The smallest box containing both boxes."""
        if self.is_empty:
            return other
        if other.is_empty:
            return self
        assert self.min_point is not None and self.max_point is not None
        assert other.min_point is not None and other.max_point is not None
        return Box(
            tuple(min(a, b) for a, b in zip(self.min_point, other.min_point)),
            tuple(max(a, b) for a, b in zip(self.max_point, other.max_point)),
        )

    def __and__(self, other: Box) -> Box:
        """The common part of two boxes; empty if they are disjoint."""
        if self.is_empty or other.is_empty:
            return Box.empty()
        assert self.min_point is not None and self.max_point is not None
        assert other.min_point is not None and other.max_point is not None
        lo = tuple(max(a, b) for a, b in zip(self.min_point, other.min_point))
        hi = tuple(min(a, b) for a, b in zip(self.max_point, other.max_point))
        if any(a > b for a, b in zip(lo, hi)):
            return Box.empty()
        return Box(lo, hi)

    def intersect(self, other: Box) -> Box:
        return self & other

    def extent(self) -> Optional[list[Range]]:
        """
        The closed range covered in each dimension.

        Returns:
            One Range per dimension (index 0 is the first dimension), or
            None for the empty box
        """
        if self.is_empty:
            return None
        assert self.min_point is not None and self.max_point is not None
        return [Range.closed(a, b) for a, b in zip(self.min_point, self.max_point)]

    def contains(self, p: Point) -> bool:
        """Test if a point lies in the (closed) box."""
        ranges = self.extent()
        if ranges is None:
            return False
        return all(r.in_range(x) for r, x in zip(ranges, p))

    def __contains__(self, p: Point) -> bool:
        return self.contains(p)

    def size(self) -> tuple[Any, ...]:
        """Width in every dimension; () for the empty box."""
        ranges = self.extent()
        if ranges is None:
            return ()
        return tuple(r.width for r in ranges)

    def width_in(self, dimension: int) -> Any:
        """
        Width in a given dimension. Dimensions are 1-indexed.

        The empty box has width 0 in every dimension.

        Raises:
            IndexError: If dimension is below 1 or above the box dimension
        """
        if dimension < 1:
            raise IndexError(f"Dimensions start at 1, got {dimension}")
        sizes = self.size()
        if not sizes:
            return 0
        if dimension > len(sizes):
            raise IndexError(f"Box has {len(sizes)} dimensions, got dimension {dimension}")
        return sizes[dimension - 1]

    @property
    def width(self) -> Any:
        return self.width_in(1)

    @property
    def height(self) -> Any:
        return self.width_in(2)

    def corners(self) -> Optional[tuple[Point, Point, Point, Point]]:
        """
        The corners of a rectangle.

        Returns:
            (top_left, top_right, bottom_right, bottom_left), or None if empty
        """
        if self.is_empty:
            return None
        assert self.min_point is not None and self.max_point is not None
        (x0, y0), (x1, y1) = self.min_point, self.max_point
        return (x0, y1), (x1, y1), (x1, y0), (x0, y0)


def in_box(p: Point, box: Box) -> bool:
    return box.contains(p)


def bounding_box(points: Iterable[Point]) -> Box:
    return Box.bounding_box(points)


__all__ = ["Box", "in_box", "bounding_box"]
