"""Tests for ranges with open and closed endpoints."""

import pytest

from planar_geometry.geometry import EndPoint, Range


class TestValidity:
    """Tests for range emptiness."""

    def test_proper_range(self):
        assert Range.open(0, 1).is_valid()

    def test_degenerate_closed_range(self):
        """A single value is a valid closed range."""
        assert Range.closed(1, 1).is_valid()

    @pytest.mark.parametrize(
        "lower, upper",
        [
            (EndPoint.open(1), EndPoint(1)),
            (EndPoint(1), EndPoint.open(1)),
            (EndPoint.open(1), EndPoint.open(1)),
        ],
    )
    def test_degenerate_open_range(self, lower, upper):
        """A single value with an open end is empty."""
        assert not Range(lower, upper).is_valid()

    def test_reversed_range(self):
        assert not Range.closed(2, 1).is_valid()


class TestMembership:
    """Tests for in_range."""

    def test_interior(self):
        assert Range.open(0, 2).in_range(1)

    def test_open_endpoint_excluded(self):
        r = Range(EndPoint(0), EndPoint.open(1))
        assert r.in_range(0)
        assert not r.in_range(1)

    def test_contains_operator(self):
        assert 1 in Range.closed(0, 1)
        assert 2 not in Range.closed(0, 1)

    def test_width(self):
        assert Range.closed(2, 7).width == 5


class TestIntersection:
    """Tests for intersect and clipping."""

    def test_overlap(self):
        r = Range.closed(0, 5) & Range.open(3, 8)
        assert r == Range(EndPoint.open(3), EndPoint(5))
        assert str(r) == "(3, 5]"

    def test_open_end_wins_tie(self):
        r = Range.closed(0, 5).intersect(Range(EndPoint.open(0), EndPoint(5)))
        assert r == Range(EndPoint.open(0), EndPoint(5))

    def test_disjoint(self):
        assert Range.closed(0, 1).intersect(Range.closed(2, 3)) is None

    def test_touching_closed(self):
        """Closed ranges sharing an endpoint intersect in that point."""
        assert Range.closed(0, 1) & Range.closed(1, 2) == Range.closed(1, 1)

    def test_touching_half_open(self):
        r = Range(EndPoint(0), EndPoint.open(1))
        assert r & Range.closed(1, 2) is None

    def test_intersection_is_symmetric(self):
        a = Range(EndPoint.open(-1), EndPoint(4))
        b = Range(EndPoint(0), EndPoint.open(4))
        assert a & b == b & a

    def test_clip_lower(self):
        r = Range.closed(0, 10).clip_lower(EndPoint.open(4))
        assert str(r) == "(4, 10]"

    def test_clip_upper_to_empty(self):
        assert Range.closed(0, 10).clip_upper(EndPoint(-1)) is None

    def test_clip_keeps_tighter_bound(self):
        r = Range.closed(5, 10).clip_lower(EndPoint(2))
        assert r == Range.closed(5, 10)
