"""
Contract checks for permutations and planar graphs.

Provides the exception hierarchy raised by the permutation engine and the
planar graph layer, together with the validation functions behind the
debug-only partition check and the opt-in embedding check. Raises
descriptive exceptions on invalid input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from .planar import PlanarGraph


class ValidationError(ValueError):
    """Base exception for contract violations."""

    pass


class InvalidPartitionError(ValidationError):
    """Raised when cycles do not partition [0, n)."""

    pass


class OutOfDomainError(ValidationError, IndexError):
    """Raised when an identity lies outside the current domain."""

    def __init__(self, what: str, index: int, size: int) -> None:
        super().__init__(f"{what} index {index} out of bounds [0, {size})")
        self.index = index
        self.size = size


class WorldMismatchError(ValidationError, TypeError):
    """Raised when a primal id is used on a dual graph, or vice versa."""

    pass


class PayloadLengthError(ValidationError):
    """Raised when attached payload data has the wrong length."""

    pass


class InvalidEmbeddingError(ValidationError):
    """Raised when a rotation system does not describe a planar embedding."""

    pass


def check_index(what: str, index: int, size: int) -> int:
    """
    Bounds-check a dense identity.

    Args:
        what: Name of the domain, used in the error message
        index: Identity to check
        size: Domain size

    Returns:
        The validated index

    Raises:
        OutOfDomainError: If index is not in [0, size)
    """
    if index < 0 or index >= size:
        raise OutOfDomainError(what, index, size)
    return index


def validate_partition(
    identities: Sequence[int],
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Validate that identities are exactly [0, n) with no repetition.

    Args:
        identities: Element identities in orbit order
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of (identity, issue_description) tuples

    Raises:
        InvalidPartitionError: If strict=True and the identities are not a partition
    """
    n = len(identities)
    issues: list[tuple[int, str]] = []
    seen = [False] * n

    for ident in identities:
        if ident < 0 or ident >= n:
            issues.append((ident, f"identity {ident} out of bounds [0, {n})"))
        elif seen[ident]:
            issues.append((ident, f"identity {ident} appears more than once"))
        else:
            seen[ident] = True

    for ident, hit in enumerate(seen):
        if not hit:
            issues.append((ident, f"identity {ident} is missing"))

    if strict and issues:
        msg = "Cycles do not partition the domain:\n" + "\n".join(i[1] for i in issues)
        raise InvalidPartitionError(msg)

    return issues


def validate_payload(name: str, data: Sequence[Any], expected: int) -> tuple[Any, ...]:
    """
    Validate the length of a payload array.

    Returns:
        The payload as a tuple

    Raises:
        PayloadLengthError: If the length does not match
    """
    values = tuple(data)
    if len(values) != expected:
        raise PayloadLengthError(
            f"{name} must have {expected} entries, got {len(values)}"
        )
    return values


def validate_embedding(
    graph: PlanarGraph[Any, Any, Any],
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Check that a graph's rotation system is a connected planar embedding.

    This is never run on the construction path. It checks that:
    - the darts come in twin pairs (even domain size)
    - no vertex has an empty rotation
    - the number of face cycles equals the Euler count E - V + 2

    Args:
        graph: Graph to check
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of (index, issue_description) tuples

    Raises:
        InvalidEmbeddingError: If strict=True and issues were found
    """
    issues: list[tuple[int, str]] = []
    embedding = graph.embedding

    if embedding.size % 2 != 0:
        issues.append((embedding.size, f"odd number of darts ({embedding.size})"))

    for v, orbit in enumerate(embedding.orbits):
        if not orbit:
            issues.append((v, f"vertex {v} has an empty rotation"))

    if not issues:
        traced = graph.dual().vertex_count
        if traced != graph.face_count:
            issues.append(
                (
                    traced,
                    f"embedding has {traced} face cycles, "
                    f"Euler's formula requires {graph.face_count}",
                )
            )

    if strict and issues:
        msg = "Invalid planar embedding:\n" + "\n".join(i[1] for i in issues)
        raise InvalidEmbeddingError(msg)

    return issues


__all__ = [
    "ValidationError",
    "InvalidPartitionError",
    "OutOfDomainError",
    "WorldMismatchError",
    "PayloadLengthError",
    "InvalidEmbeddingError",
    "check_index",
    "validate_partition",
    "validate_payload",
    "validate_embedding",
]
