"""
Cyclic representation of permutations.

A permutation of a dense domain [0, n) is stored as its disjoint cycles
(orbits) plus an index table mapping every element identity to
(orbit_id, position). Elements may be any value with ``__index__``; the
identity of an element is ``operator.index(element)``.

Public API:
    Permutation.from_cycles(cycles) -> Permutation
    Permutation.from_function(universe, successor) -> Permutation
    apply / cycle_of / lookup_index / elems
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Generic, Iterator, Sequence, TypeVar

import numpy as np

from .validation import InvalidPartitionError, check_index, validate_partition

T = TypeVar("T")
U = TypeVar("U")

# An orbit is read cyclically: the successor of orbit[i] is orbit[(i + 1) % len]
Orbit = tuple


class Permutation(Generic[T]):
    """
    A permutation stored as a collection of disjoint cycles.

    Instances are immutable: the orbit tuples and the read-only index arrays
    are fixed at construction.

    Attributes:
        orbits: The cycles, in orbit-id order
        orbit_ids: orbit_ids[identity] is the orbit containing the element
        positions: positions[identity] is the element's position in its orbit
    """

    __slots__ = ("orbits", "orbit_ids", "positions")

    def __init__(
        self,
        orbits: tuple[tuple[T, ...], ...],
        orbit_ids: np.ndarray,
        positions: np.ndarray,
    ) -> None:
        orbit_ids.flags.writeable = False
        positions.flags.writeable = False
        self.orbits = orbits
        self.orbit_ids = orbit_ids
        self.positions = positions

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_cycles(cls, cycles: Sequence[Sequence[T]]) -> Permutation[T]:
        """
        Build a permutation from an explicit list of cycles.

        The cycles must partition [0, n), where n is the total number of
        elements. The partition is checked only when assertions are enabled
        (i.e. not under ``python -O``).

        Args:
            cycles: Ordered cycles of elements

        Returns:
            The permutation whose orbit i is cycles[i]

        Raises:
            InvalidPartitionError: If a check is run and the cycles are not a partition
        """
        orbits = tuple(tuple(c) for c in cycles)
        n = sum(len(o) for o in orbits)

        if __debug__:
            validate_partition([operator.index(x) for o in orbits for x in o])

        orbit_ids = np.empty(n, dtype=np.intp)
        positions = np.empty(n, dtype=np.intp)
        for i, orbit in enumerate(orbits):
            for j, x in enumerate(orbit):
                ident = operator.index(x)
                orbit_ids[ident] = i
                positions[ident] = j

        return cls(orbits, orbit_ids, positions)

    @classmethod
    def from_function(
        cls,
        universe: Sequence[T],
        successor: Callable[[T], T],
    ) -> Permutation[T]:
        """
        Decompose a permutation given as a function into its cycles.

        Elements are visited in ``universe`` order; every unvisited element
        starts a new orbit which is followed until it closes. Each element
        is visited exactly once, so this runs in O(n).

        Args:
            universe: All n elements of the domain
            successor: The permutation as a function

        Returns:
            The cyclic representation of ``successor``
        """
        n = len(universe)
        visited = np.zeros(n, dtype=bool)
        cycles: list[list[T]] = []

        for x in universe:
            ident = check_index("element", operator.index(x), n)
            if visited[ident]:
                continue
            visited[ident] = True
            orbit = [x]
            y = successor(x)
            while y != x:
                ident = check_index("element", operator.index(y), n)
                if visited[ident]:
                    raise InvalidPartitionError(
                        f"successor is not a permutation: {y!r} reached twice"
                    )
                visited[ident] = True
                orbit.append(y)
                y = successor(y)
            cycles.append(orbit)

        return cls.from_cycles(cycles)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def size(self) -> int:
        """Number of elements in the domain."""
        return len(self.orbit_ids)

    @property
    def orbit_count(self) -> int:
        """Number of cycles."""
        return len(self.orbits)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[tuple[T, ...]]:
        return iter(self.orbits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        return self.orbits == other.orbits

    def __hash__(self) -> int:
        return hash(self.orbits)

    def __repr__(self) -> str:
        return f"Permutation({[list(o) for o in self.orbits]!r})"

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def lookup_index(self, x: Any) -> tuple[int, int]:
        """
        Locate an element.

        Returns:
            (orbit_id, position) of x

        Raises:
            OutOfDomainError: If x is outside [0, size)
        """
        ident = check_index("element", operator.index(x), self.size)
        return int(self.orbit_ids[ident]), int(self.positions[ident])

    def cycle_of(self, x: Any) -> tuple[T, ...]:
        """Get the orbit containing x."""
        orbit_id, _ = self.lookup_index(x)
        return self.orbits[orbit_id]

    def apply(self, x: Any) -> T:
        """Get the cyclic successor of x within its orbit."""
        orbit_id, pos = self.lookup_index(x)
        orbit = self.orbits[orbit_id]
        return orbit[(pos + 1) % len(orbit)]

    def inverse_apply(self, x: Any) -> T:
        """Get the cyclic predecessor of x within its orbit."""
        orbit_id, pos = self.lookup_index(x)
        orbit = self.orbits[orbit_id]
        return orbit[(pos - 1) % len(orbit)]

    def elems(self) -> list[T]:
        """All elements, orbit by orbit, each orbit in stored order."""
        return [x for orbit in self.orbits for x in orbit]

    def map(self, fn: Callable[[T], U]) -> Permutation[U]:
        """
        Relabel every element, keeping the cycle structure.

        ``fn`` must preserve identities (``index(fn(x)) == index(x)``); the
        index table is shared with the result.
        """
        orbits = tuple(tuple(fn(x) for x in orbit) for orbit in self.orbits)
        return Permutation(orbits, self.orbit_ids, self.positions)


def from_cycles(cycles: Sequence[Sequence[T]]) -> Permutation[T]:
    """Build a permutation from its cycles. See Permutation.from_cycles."""
    return Permutation.from_cycles(cycles)


def from_function(universe: Sequence[T], successor: Callable[[T], T]) -> Permutation[T]:
    """Build a permutation from a function. See Permutation.from_function."""
    return Permutation.from_function(universe, successor)


def apply(perm: Permutation[T], x: Any) -> T:
    return perm.apply(x)


def cycle_of(perm: Permutation[T], x: Any) -> tuple[T, ...]:
    return perm.cycle_of(x)


def lookup_index(perm: Permutation[T], x: Any) -> tuple[int, int]:
    return perm.lookup_index(x)


def elems(perm: Permutation[T]) -> list[T]:
    return perm.elems()


__all__ = [
    "Orbit",
    "Permutation",
    "from_cycles",
    "from_function",
    "apply",
    "cycle_of",
    "lookup_index",
    "elems",
]
