"""
d-dimensional balls, disks and circles.

A ball is stored by its center and squared radius so that point location
stays exact for exact coordinates. Circles (the boundary of a 2D ball) are
represented by the same type. Intersections of lines with circles need a
square root and are computed in floating point.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .segment import Line, LineSegment, intersect_lines, perpendicular_bisector
from .types import Point, PointLocation, add, div, scale, squared_distance, sub


@dataclass(frozen=True)
class Ball:
    """
    A closed d-dimensional ball.

    Attributes:
        center: Center point
        squared_radius: Radius squared
    """

    center: Point
    squared_radius: object

    @property
    def dimension(self) -> int:
        return len(self.center)

    @classmethod
    def from_diameter(cls, p: Point, q: Point) -> Ball:
        """The ball having segment pq as a diameter."""
        c = add(p, tuple(div(x, 2) for x in sub(q, p)))
        return cls(c, squared_distance(c, p))

    @classmethod
    def from_center_and_point(cls, center: Point, p: Point) -> Ball:
        """The ball around ``center`` with p on its boundary."""
        return cls(center, squared_distance(center, p))

    def locate(self, p: Point) -> PointLocation:
        d = squared_distance(p, self.center)
        if d < self.squared_radius:  # type: ignore[operator]
            return PointLocation.INSIDE
        if d == self.squared_radius:
            return PointLocation.ON_BOUNDARY
        return PointLocation.OUTSIDE


def unit_ball(dimension: int = 2) -> Ball:
    """The unit ball centered at the origin."""
    return Ball((0,) * dimension, 1)


def in_ball(p: Point, ball: Ball) -> PointLocation:
    return ball.locate(p)


def inside_ball(p: Point, ball: Ball) -> bool:
    """
    Test if a point lies strictly inside a ball.

    >>> inside_ball((0.5, 0), unit_ball())
    True
    >>> inside_ball((1, 0), unit_ball())
    False
    """
    return ball.locate(p) is PointLocation.INSIDE


def in_closed_ball(p: Point, ball: Ball) -> bool:
    return ball.locate(p) is not PointLocation.OUTSIDE


def on_ball(p: Point, ball: Ball) -> bool:
    """Test if a point lies on the boundary sphere of a ball."""
    return ball.locate(p) is PointLocation.ON_BOUNDARY


def disk(p: Point, q: Point, r: Point) -> Optional[Ball]:
    """
    The disk whose boundary passes through three points.

    The center is the intersection of the perpendicular bisectors of pr and
    qr.

    Returns:
        The disk, or None if the points are collinear

    >>> d = disk((0, 10), (10, 0), (-10, 0))
    >>> d.center == (0, 0), d.squared_radius
    (True, Fraction(100, 1))
    """
    center = intersect_lines(perpendicular_bisector(p, r), perpendicular_bisector(q, r))
    if center is None or isinstance(center, Line):
        return None
    return Ball(center, squared_distance(center, p))


# -----------------------------------------------------------------------------
# Intersections with circles
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Touching:
    """A line or segment meeting a circle in a single tangent point."""

    point: Point


CircleHit = Union[Tuple[()], Touching, Point, Tuple[Point, Point]]


def _line_parameters(line: Line, circle: Ball) -> Optional[Tuple[float, float]]:
    """
    Solve |line.point + t * line.direction - center|^2 = r^2 for t.

    Returns:
        (t1, t2) with t1 <= t2, or None if the line misses the circle
    """
    vx, vy = line.direction
    px, py = sub(line.point, circle.center)
    a = vx * vx + vy * vy
    b = 2 * (px * vx + py * vy)
    c = px * px + py * py - circle.squared_radius  # type: ignore[operator]
    discr = b * b - 4 * a * c
    if discr < 0:
        return None
    root = math.sqrt(discr)
    return (-b - root) / (2 * a), (-b + root) / (2 * a)


def line_circle_intersection(line: Line, circle: Ball) -> CircleHit:
    """
    Intersect a line with a circle.

    Returns:
        () if they do not meet, Touching(point) for a tangent, or the two
        intersection points ordered along the line direction
    """
    params = _line_parameters(line, circle)
    if params is None:
        return ()
    t1, t2 = params
    if t1 == t2:
        return Touching(add(line.point, scale(line.direction, t1)))
    return (
        add(line.point, scale(line.direction, t1)),
        add(line.point, scale(line.direction, t2)),
    )


def segment_circle_intersection(segment: LineSegment, circle: Ball) -> CircleHit:
    """
    Intersect a segment with a circle.

    Returns:
        (), Touching(point), a single point (one crossing on the segment),
        or a pair of points
    """
    line = segment.supporting_line()
    params = _line_parameters(line, circle)
    if params is None:
        return ()

    def at(t: float) -> Point:
        return add(line.point, scale(line.direction, t))

    t1, t2 = params
    if t1 == t2:
        return Touching(at(t1)) if segment.parameter_in_range(t1, 1) else ()

    hits = [t for t in (t1, t2) if segment.parameter_in_range(t, 1)]
    if len(hits) == 2:
        return at(hits[0]), at(hits[1])
    if hits:
        return at(hits[0])
    return ()


__all__ = [
    "Ball",
    "Touching",
    "unit_ball",
    "in_ball",
    "inside_ball",
    "in_closed_ball",
    "on_ball",
    "disk",
    "line_circle_intersection",
    "segment_circle_intersection",
]
