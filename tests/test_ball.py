"""Tests for balls, disks and circle intersections."""

from fractions import Fraction

import pytest

from planar_geometry.geometry import (
    Ball,
    Line,
    LineSegment,
    PointLocation,
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


class TestPointLocation:
    """Tests for locating points relative to a ball."""

    @pytest.mark.parametrize(
        "point, expected",
        [
            ((0, 0), PointLocation.INSIDE),
            ((1, 0), PointLocation.ON_BOUNDARY),
            ((0, -1), PointLocation.ON_BOUNDARY),
            ((1, 1), PointLocation.OUTSIDE),
        ],
    )
    def test_unit_disk(self, point, expected):
        assert in_ball(point, unit_ball()) is expected

    def test_predicates(self):
        b = Ball((2, 2), 4)
        assert inside_ball((3, 2), b)
        assert not inside_ball((4, 2), b)
        assert in_closed_ball((4, 2), b)
        assert on_ball((2, 0), b)
        assert not in_closed_ball((5, 5), b)

    def test_three_dimensional(self):
        b = unit_ball(3)
        assert b.dimension == 3
        assert inside_ball((0, 0, 0.5), b)
        assert on_ball((0, 0, 1), b)

    def test_from_diameter(self):
        b = Ball.from_diameter((0, 0), (2, 0))
        assert b.center == (1, 0)
        assert b.squared_radius == 1
        assert on_ball((1, 1), b)

    def test_from_center_and_point(self):
        b = Ball.from_center_and_point((1, 1), (4, 5))
        assert b.squared_radius == 25


class TestDisk:
    """Tests for the disk through three points."""

    def test_circumcircle(self):
        b = disk((0, 10), (10, 0), (-10, 0))
        assert b is not None
        assert b.center == (0, 0)
        assert b.squared_radius == 100

    def test_all_three_points_on_boundary(self):
        p, q, r = (0, 0), (4, 0), (0, 2)
        b = disk(p, q, r)
        assert b is not None
        assert b.center == (2, 1)
        assert all(on_ball(x, b) for x in (p, q, r))

    def test_collinear_points(self):
        assert disk((0, 0), (1, 1), (2, 2)) is None

    def test_integer_input_stays_exact(self):
        b = disk((0, 0), (4, 0), (1, 1))
        assert b is not None
        assert all(isinstance(c, Fraction) for c in b.center)
        assert b.center == (2, -1)
        assert b.squared_radius == 5

    def test_large_coordinates_near_the_circle(self):
        """Points one unit off a huge circle are located exactly."""
        r, k = 5 * 10**12, 123456789
        b = disk((k + r, k), (k, k + r), (k - r, k))
        assert b is not None
        assert b.center == (k, k)
        assert b.squared_radius == r * r
        assert in_ball((k + r, k + 1), b) is PointLocation.OUTSIDE
        assert in_ball((k + r - 1, k + 1), b) is PointLocation.INSIDE
        assert in_ball((k, k - r), b) is PointLocation.ON_BOUNDARY
        # A 3-4-5 triangle scaled by 10^12
        assert on_ball((k + 3 * 10**12, k + 4 * 10**12), b)


class TestCircleIntersection:
    """Tests for intersecting lines and segments with circles."""

    def test_line_crosses(self):
        hit = line_circle_intersection(Line.horizontal(0), unit_ball())
        assert hit == ((-1, 0), (1, 0))

    def test_line_tangent(self):
        hit = line_circle_intersection(Line.horizontal(1), unit_ball())
        assert hit == Touching((0, 1))

    def test_line_misses(self):
        assert line_circle_intersection(Line.horizontal(2), unit_ball()) == ()

    def test_segment_two_points(self):
        seg = LineSegment((-2, 0), (2, 0))
        assert segment_circle_intersection(seg, unit_ball()) == ((-1, 0), (1, 0))

    def test_segment_one_point(self):
        seg = LineSegment((0, 0), (2, 0))
        assert segment_circle_intersection(seg, unit_ball()) == (1, 0)

    def test_segment_outside(self):
        seg = LineSegment((2, 0), (3, 0))
        assert segment_circle_intersection(seg, unit_ball()) == ()

    def test_segment_tangent(self):
        seg = LineSegment((-1, 1), (1, 1))
        assert segment_circle_intersection(seg, unit_ball()) == Touching((0, 1))
