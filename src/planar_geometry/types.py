"""
Common types for planar graphs and their duals.

This module provides the identifiers shared by the permutation engine and
the planar graph layer:
- Direction: Orientation of a dart along its arc
- Arc: Undirected edge identity
- Dart: Directed half-edge (arc, direction)
- World: The space (primal or dual) a graph lives in
- VertexId / FaceId: Space-tagged vertex and face identifiers
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Generic, TypeVar


class Direction(IntEnum):
    """
    Orientation of a dart along its arc.

    - FORWARD: the dart with identity 2 * arc
    - BACKWARD: the dart with identity 2 * arc + 1
    """

    FORWARD = 0
    BACKWARD = 1

    def reversed(self) -> Direction:
        """Get the opposite direction."""
        return Direction.BACKWARD if self is Direction.FORWARD else Direction.FORWARD

    @classmethod
    def parse(cls, text: str) -> Direction:
        """
        Parse a direction from its display form.

        Args:
            text: "+1" (or "+") for FORWARD, "-1" (or "-") for BACKWARD

        Raises:
            ValueError: If the text is not a direction
        """
        if text in ("+1", "+"):
            return cls.FORWARD
        if text in ("-1", "-"):
            return cls.BACKWARD
        raise ValueError(f"Not a direction: {text!r}")

    def __str__(self) -> str:
        return "+1" if self is Direction.FORWARD else "-1"


class World(Enum):
    """The space a planar graph lives in."""

    PRIMAL = "primal"
    DUAL = "dual"

    def dual(self) -> World:
        """Get the space of the dual graph."""
        return World.DUAL if self is World.PRIMAL else World.PRIMAL

    # PRIMAL sorts before DUAL, so ids of both spaces can be sorted together
    def _rank(self) -> int:
        return 0 if self is World.PRIMAL else 1

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, World):
            return NotImplemented
        return self._rank() < other._rank()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, World):
            return NotImplemented
        return self._rank() <= other._rank()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, World):
            return NotImplemented
        return self._rank() > other._rank()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, World):
            return NotImplemented
        return self._rank() >= other._rank()


class Primal:
    """Static marker for identifiers of the primal space."""


class Dual:
    """Static marker for identifiers of the dual space."""


# Phantom space parameter of VertexId / FaceId
W = TypeVar("W")


@dataclass(frozen=True, order=True)
class Arc:
    """An undirected edge identity in [0, E)."""

    index: int

    def __index__(self) -> int:
        return self.index

    def __repr__(self) -> str:
        return f"Arc {self.index}"


@dataclass(frozen=True, order=True)
class Dart:
    """
    A directed half-edge.

    Every arc has exactly two darts, one per direction. The dense identity
    of a dart is 2 * arc for FORWARD and 2 * arc + 1 for BACKWARD, which is
    the identity the permutation engine indexes on.

    Attributes:
        arc: The undirected edge this dart belongs to
        direction: Orientation along the arc
    """

    arc: Arc
    direction: Direction = Direction.FORWARD

    @classmethod
    def from_index(cls, index: int) -> Dart:
        """Decode a dart from its dense identity."""
        if index < 0:
            raise ValueError(f"Dart identity must be non-negative, got {index}")
        return cls(Arc(index // 2), Direction(index % 2))

    @classmethod
    def parse(cls, arc: int, direction: str) -> Dart:
        """Build a dart from an arc number and a "+1"/"-1" direction."""
        return cls(Arc(arc), Direction.parse(direction))

    def twin(self) -> Dart:
        """Get the dart of the same arc with opposite direction."""
        return Dart(self.arc, self.direction.reversed())

    @property
    def is_forward(self) -> bool:
        return self.direction is Direction.FORWARD

    def __index__(self) -> int:
        return 2 * self.arc.index + int(self.direction)

    def __repr__(self) -> str:
        return f"Dart({self.arc.index}, {self.direction})"


def twin(dart: Dart) -> Dart:
    """Get the twin of a dart."""
    return dart.twin()


@dataclass(frozen=True, order=True)
class VertexId(Generic[W]):
    """
    A vertex identifier tagged with the space it belongs to.

    The type parameter is a static marker (Primal or Dual); ``world`` carries
    the same information at runtime so that mixing a dual id into a primal
    graph is rejected on access.
    """

    index: int
    world: World = World.PRIMAL

    def __repr__(self) -> str:
        return f"VertexId {self.index}"


@dataclass(frozen=True, order=True)
class FaceId(Generic[W]):
    """
    A face identifier.

    A face of a graph in space W is represented by the vertex of the dual
    graph (space Dual(W)) that stands for it.
    """

    vertex: VertexId

    @property
    def index(self) -> int:
        return self.vertex.index

    @property
    def world(self) -> World:
        """The space of the graph this face belongs to."""
        return self.vertex.world.dual()

    def __repr__(self) -> str:
        return f"FaceId {self.vertex.index}"


__all__ = [
    "Direction",
    "World",
    "Primal",
    "Dual",
    "Arc",
    "Dart",
    "twin",
    "VertexId",
    "FaceId",
]
