"""
Geometric predicates over coordinates.

Provides ranges, boxes, balls, lines, segments and polygons. Points are
tuples of numbers; predicates are exact when the coordinates are exact
(ints or Fractions).
"""

from .ball import (
    Ball,
    Touching,
    disk,
    in_ball,
    in_closed_ball,
    inside_ball,
    line_circle_intersection,
    on_ball,
    segment_circle_intersection,
    unit_ball,
)
from .box import Box, bounding_box, in_box
from .polygon import MultiPolygon, SimplePolygon, in_polygon, inside_polygon, on_boundary
from .range import EndPoint, Range
from .segment import Line, LineSegment, intersect_lines, on_segment, perpendicular_bisector
from .types import Point, PointLocation

__all__ = [
    "Point",
    "PointLocation",
    # Ranges and boxes
    "EndPoint",
    "Range",
    "Box",
    "bounding_box",
    "in_box",
    # Lines
    "Line",
    "LineSegment",
    "intersect_lines",
    "perpendicular_bisector",
    "on_segment",
    # Balls
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
    # Polygons
    "SimplePolygon",
    "MultiPolygon",
    "in_polygon",
    "inside_polygon",
    "on_boundary",
]
