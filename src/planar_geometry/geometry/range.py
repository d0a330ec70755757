"""
One-dimensional ranges with open or closed endpoints.

A Range is valid (non-empty) when lower < upper, or when lower == upper and
both endpoints are closed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class EndPoint:
    """A range endpoint; ``closed`` endpoints belong to the range."""

    value: Any
    closed: bool = True

    @classmethod
    def open(cls, value: Any) -> EndPoint:
        return cls(value, closed=False)

    @property
    def is_open(self) -> bool:
        return not self.closed


def _tighter_lower(a: EndPoint, b: EndPoint) -> EndPoint:
    """The more restrictive of two lower endpoints (open wins a tie)."""
    if a.value != b.value:
        return a if a.value > b.value else b
    return a if a.is_open else b


def _tighter_upper(a: EndPoint, b: EndPoint) -> EndPoint:
    """The more restrictive of two upper endpoints (open wins a tie)."""
    if a.value != b.value:
        return a if a.value < b.value else b
    return a if a.is_open else b


@dataclass(frozen=True)
class Range:
    """
    An interval [lower, upper] where either end may be open.

    Attributes:
        lower: Lower endpoint
        upper: Upper endpoint
    """

    lower: EndPoint
    upper: EndPoint

    @classmethod
    def closed(cls, lower: Any, upper: Any) -> Range:
        return cls(EndPoint(lower), EndPoint(upper))

    @classmethod
    def open(cls, lower: Any, upper: Any) -> Range:
        return cls(EndPoint.open(lower), EndPoint.open(upper))

    def is_valid(self) -> bool:
        """Check the range is non-empty."""
        lo, hi = self.lower.value, self.upper.value
        if lo < hi:
            return True
        return lo == hi and self.lower.closed and self.upper.closed

    def in_range(self, x: Any) -> bool:
        """
        Test if a value lies in the range.

        >>> Range.open(0, 2).in_range(1)
        True
        >>> Range.open(0, 1).in_range(1)
        False
        >>> Range.closed(0, 1).in_range(1)
        True
        """
        lo, hi = self.lower, self.upper
        if x < lo.value or x > hi.value:
            return False
        if x == lo.value and lo.is_open:
            return False
        if x == hi.value and hi.is_open:
            return False
        return True

    def __contains__(self, x: Any) -> bool:
        return self.in_range(x)

    @property
    def width(self) -> Any:
        return self.upper.value - self.lower.value

    def clip_lower(self, endpoint: EndPoint) -> Optional[Range]:
        """Raise the lower end to ``endpoint``; None if the range becomes empty."""
        r = Range(_tighter_lower(endpoint, self.lower), self.upper)
        return r if r.is_valid() else None

    def clip_upper(self, endpoint: EndPoint) -> Optional[Range]:
        """Lower the upper end to ``endpoint``; None if the range becomes empty."""
        r = Range(self.lower, _tighter_upper(endpoint, self.upper))
        return r if r.is_valid() else None

    def intersect(self, other: Range) -> Optional[Range]:
        """
        Intersect two ranges.

        Returns:
            The common range, or None if the ranges do not intersect
        """
        r = Range(
            _tighter_lower(self.lower, other.lower),
            _tighter_upper(self.upper, other.upper),
        )
        return r if r.is_valid() else None

    def __and__(self, other: Range) -> Optional[Range]:
        return self.intersect(other)

    def __str__(self) -> str:
        left = "(" if self.lower.is_open else "["
        right = ")" if self.upper.is_open else "]"
        return f"{left}{self.lower.value}, {self.upper.value}{right}"


__all__ = ["EndPoint", "Range"]
