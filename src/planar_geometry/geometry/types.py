"""Shared types for the geometric predicates."""

from __future__ import annotations

from enum import Enum
from fractions import Fraction
from numbers import Rational
from typing import Any, Tuple

# A point is a tuple of coordinates (ints, floats or Fractions)
Point = Tuple[Any, ...]


class PointLocation(Enum):
    """Where a point lies relative to a region."""

    INSIDE = "inside"
    ON_BOUNDARY = "on_boundary"
    OUTSIDE = "outside"


def sub(p: Point, q: Point) -> Point:
    return tuple(a - b for a, b in zip(p, q))


def add(p: Point, v: Point) -> Point:
    return tuple(a + b for a, b in zip(p, v))


def scale(v: Point, k: Any) -> Point:
    return tuple(a * k for a in v)


def dot(u: Point, v: Point) -> Any:
    return sum(a * b for a, b in zip(u, v))


def cross(u: Point, v: Point) -> Any:
    """z-component of the cross product of two 2D vectors."""
    return u[0] * v[1] - u[1] * v[0]


def squared_distance(p: Point, q: Point) -> Any:
    return sum((a - b) * (a - b) for a, b in zip(p, q))


def div(a: Any, b: Any) -> Any:
    """
    Divide without leaving exact arithmetic.

    Two rationals (ints or Fractions) give a Fraction; anything else falls
    back to true division.

    >>> div(1, 2)
    Fraction(1, 2)
    """
    if isinstance(a, Rational) and isinstance(b, Rational):
        return Fraction(a, b)
    return a / b


__all__ = [
    "Point",
    "PointLocation",
    "sub",
    "add",
    "scale",
    "dot",
    "cross",
    "squared_distance",
    "div",
]
