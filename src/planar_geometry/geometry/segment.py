"""
Lines and line segments in the plane.

Segment endpoints may be open or closed; polygon edges use half-open
segments [start, end) so that a vertex belongs to exactly one edge.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .types import Point, add, cross, div, dot, scale, sub


@dataclass(frozen=True)
class Line:
    """The line {point + t * direction}."""

    point: Point
    direction: Point

    @classmethod
    def through(cls, p: Point, q: Point) -> Line:
        return cls(p, sub(q, p))

    @classmethod
    def horizontal(cls, y: object) -> Line:
        return cls((0, y), (1, 0))

    def perpendicular(self) -> Line:
        """The line through the same point, rotated by 90 degrees."""
        vx, vy = self.direction
        return Line(self.point, (-vy, vx))

    def contains(self, q: Point) -> bool:
        return cross(self.direction, sub(q, self.point)) == 0


def perpendicular_bisector(p: Point, q: Point) -> Line:
    """The line of points equidistant from p and q."""
    v = sub(q, p)
    midpoint = add(p, tuple(div(c, 2) for c in v))
    return Line(midpoint, v).perpendicular()


def intersect_lines(a: Line, b: Line) -> Union[Point, Line, None]:
    """
    Intersect two lines.

    Returns:
        The intersection point, ``a`` itself if the lines coincide, or None
        if they are parallel and distinct
    """
    denom = cross(a.direction, b.direction)
    if denom == 0:
        return a if a.contains(b.point) else None
    t = div(cross(sub(b.point, a.point), b.direction), denom)
    return add(a.point, scale(a.direction, t))


@dataclass(frozen=True)
class LineSegment:
    """
    A segment between two points.

    Attributes:
        start, end: Endpoints
        start_closed, end_closed: Whether each endpoint belongs to the segment
    """

    start: Point
    end: Point
    start_closed: bool = True
    end_closed: bool = True

    @classmethod
    def half_open(cls, start: Point, end: Point) -> LineSegment:
        """The segment [start, end)."""
        return cls(start, end, True, False)

    def supporting_line(self) -> Line:
        return Line.through(self.start, self.end)

    def parameter_in_range(self, num: object, den: object) -> bool:
        """
        Test if the point start + (num / den) * (end - start) is on the segment.

        ``den`` must be positive.
        """
        if num < 0 or num > den:  # type: ignore[operator]
            return False
        if num == 0 and not self.start_closed:
            return False
        if num == den and not self.end_closed:
            return False
        return True

    def on_segment(self, q: Point) -> bool:
        """Test if q lies on the segment (respecting open endpoints)."""
        v = sub(self.end, self.start)
        w = sub(q, self.start)
        if cross(v, w) != 0:
            return False
        length2 = dot(v, v)
        if length2 == 0:
            return q == self.start and self.start_closed and self.end_closed
        return self.parameter_in_range(dot(w, v), length2)

    def intersect_line(self, line: Line) -> Union[Point, LineSegment, None]:
        """
        Intersect the segment with a line.

        Returns:
            The intersection point, the segment itself if it lies on the
            line, or None
        """
        hit = intersect_lines(self.supporting_line(), line)
        if hit is None:
            return None
        if isinstance(hit, Line):
            return self
        return hit if self.on_segment(hit) else None


def on_segment(q: Point, segment: LineSegment) -> bool:
    return segment.on_segment(q)


__all__ = [
    "Line",
    "LineSegment",
    "perpendicular_bisector",
    "intersect_lines",
    "on_segment",
]
