"""
Polygons in the plane: simple polygons and polygons with holes.

Point location uses crossing counts along the horizontal line through the
query point. Edges are half-open, so a crossing at a vertex is counted for
one edge only; and a point is reported inside only if the number of
crossings to its left and to its right are both odd, which avoids
misclassifying points level with an extreme vertex.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from .segment import LineSegment
from .types import Point, PointLocation, cross, div


def _crossing_x(edge: LineSegment, y: Any) -> Optional[Any]:
    """
    x-coordinate where a half-open edge crosses the horizontal line at y.

    Horizontal edges never cross.
    """
    (px, py), (qx, qy) = edge.start, edge.end
    if py == qy:
        return None
    # Parameter along the edge, as num / den with den > 0
    num, den = y - py, qy - py
    if den < 0:
        num, den = -num, -den
    if not edge.parameter_in_range(num, den):
        return None
    return px + div((y - py) * (qx - px), qy - py)


@dataclass(frozen=True)
class SimplePolygon:
    """
    A polygon without holes, given by its boundary vertices in order.

    Attributes:
        outer_boundary: The vertices
    """

    outer_boundary: tuple[Point, ...]

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> SimplePolygon:
        return cls(tuple(tuple(p) for p in points))

    @property
    def holes(self) -> tuple[SimplePolygon, ...]:
        return ()

    def vertices(self) -> list[Point]:
        return list(self.outer_boundary)

    def outer_boundary_edges(self) -> list[LineSegment]:
        """The half-open edges [v_i, v_{i+1}) of the outer boundary."""
        vs = self.outer_boundary
        return [LineSegment.half_open(vs[i], vs[(i + 1) % len(vs)]) for i in range(len(vs))]

    def on_boundary(self, q: Point) -> bool:
        """Test if q lies on the boundary of the polygon (holes included)."""
        rings = [self.outer_boundary_edges()] + [h.outer_boundary_edges() for h in self.holes]
        return any(e.on_segment(q) for ring in rings for e in ring)

    def in_polygon(self, q: Point) -> PointLocation:
        """
        Locate a point relative to the polygon. Running time: O(n).

        >>> square = SimplePolygon.from_points([(0, 0), (2, 0), (2, 2), (0, 2)])
        >>> square.in_polygon((1, 1))
        <PointLocation.INSIDE: 'inside'>
        """
        if self.on_boundary(q):
            return PointLocation.ON_BOUNDARY

        qx, qy = q
        left = right = 0
        for edge in self.outer_boundary_edges():
            x = _crossing_x(edge, qy)
            if x is None:
                continue
            if x < qx:
                left += 1
            elif x > qx:
                right += 1

        if left % 2 == 1 and right % 2 == 1:
            if not any(h.inside_polygon(q) for h in self.holes):
                return PointLocation.INSIDE
        return PointLocation.OUTSIDE

    def inside_polygon(self, q: Point) -> bool:
        """Test if q lies strictly inside the polygon."""
        return self.in_polygon(q) is PointLocation.INSIDE

    def signed_area(self) -> Any:
        """
        Signed area of the outer boundary.

        Positive for counterclockwise vertex order, negative for clockwise.
        """
        total = sum(cross(e.start, e.end) for e in self.outer_boundary_edges())
        return div(total, 2)

    def area(self) -> Any:
        return abs(self.signed_area()) - sum(h.area() for h in self.holes)

    def centroid(self) -> Point:
        """Centroid of the region bounded by the outer boundary."""
        sx = sy = 0
        for e in self.outer_boundary_edges():
            w = cross(e.start, e.end)
            sx += (e.start[0] + e.end[0]) * w
            sy += (e.start[1] + e.end[1]) * w
        a6 = 6 * self.signed_area()
        return (div(sx, a6), div(sy, a6))

    def is_counter_clockwise(self) -> bool:
        return self.signed_area() >= 0

    def to_clockwise_order(self) -> SimplePolygon:
        """The same polygon with its outer boundary in clockwise order."""
        if self.is_counter_clockwise():
            return SimplePolygon(tuple(reversed(self.outer_boundary)))
        return self

    def as_simple_polygon(self) -> SimplePolygon:
        """Forget about any holes."""
        return SimplePolygon(self.outer_boundary)


@dataclass(frozen=True)
class MultiPolygon(SimplePolygon):
    """
    A polygon with holes.

    Attributes:
        outer_boundary: Vertices of the outer boundary
        hole_list: The holes, each a simple polygon
    """

    hole_list: tuple[SimplePolygon, ...] = field(default=())

    @property
    def holes(self) -> tuple[SimplePolygon, ...]:
        return self.hole_list

    def vertices(self) -> list[Point]:
        """Outer vertices followed by the vertices of each hole."""
        result = list(self.outer_boundary)
        for h in self.hole_list:
            result.extend(h.vertices())
        return result

    def to_clockwise_order(self) -> MultiPolygon:
        if self.is_counter_clockwise():
            return MultiPolygon(tuple(reversed(self.outer_boundary)), self.hole_list)
        return self


def in_polygon(q: Point, polygon: SimplePolygon) -> PointLocation:
    return polygon.in_polygon(q)


def inside_polygon(q: Point, polygon: SimplePolygon) -> bool:
    return polygon.inside_polygon(q)


def on_boundary(q: Point, polygon: SimplePolygon) -> bool:
    return polygon.on_boundary(q)


__all__ = [
    "SimplePolygon",
    "MultiPolygon",
    "in_polygon",
    "inside_polygon",
    "on_boundary",
]
