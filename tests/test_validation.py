"""Tests for input validation module."""

import pytest

from planar_geometry import Dart, build, from_cycles, from_rotation_system
from planar_geometry.validation import (
    InvalidEmbeddingError,
    InvalidPartitionError,
    OutOfDomainError,
    PayloadLengthError,
    ValidationError,
    WorldMismatchError,
    check_index,
    validate_embedding,
    validate_partition,
    validate_payload,
)


class TestIndexValidation:
    """Tests for dense identity bounds checks."""

    def test_valid_index(self):
        """Valid index is returned unchanged."""
        assert check_index("dart", 3, 4) == 3

    def test_upper_bound_raises(self):
        """Index equal to size raises OutOfDomainError."""
        with pytest.raises(OutOfDomainError, match=r"dart index 4 out of bounds \[0, 4\)"):
            check_index("dart", 4, 4)

    def test_negative_raises(self):
        """Negative index raises OutOfDomainError."""
        with pytest.raises(OutOfDomainError):
            check_index("vertex", -1, 4)

    def test_error_carries_bounds(self):
        """The exception records the offending index and domain size."""
        with pytest.raises(OutOfDomainError) as info:
            check_index("face", 9, 2)
        assert info.value.index == 9
        assert info.value.size == 2


class TestPartitionValidation:
    """Tests for the cycle partition check."""

    def test_valid_partition(self):
        """A permutation of 0..n-1 returns no issues."""
        assert validate_partition([2, 0, 1, 3]) == []

    def test_empty_partition(self):
        """The empty domain is a valid partition."""
        assert validate_partition([]) == []

    def test_duplicate_raises(self):
        """Repeated identity raises InvalidPartitionError."""
        with pytest.raises(InvalidPartitionError, match="appears more than once"):
            validate_partition([0, 1, 1])

    def test_out_of_bounds_raises(self):
        """Identity beyond the domain raises InvalidPartitionError."""
        with pytest.raises(InvalidPartitionError, match="out of bounds"):
            validate_partition([0, 5])

    def test_non_strict_lists_issues(self):
        """Non-strict mode reports every issue instead of raising."""
        issues = validate_partition([0, 0, 3], strict=False)
        messages = [msg for _, msg in issues]
        assert any("appears more than once" in m for m in messages)
        assert any("out of bounds" in m for m in messages)
        assert any("identity 1 is missing" in m for m in messages)
        assert any("identity 2 is missing" in m for m in messages)


class TestPayloadValidation:
    """Tests for payload length validation."""

    def test_valid_payload(self):
        """Payload of the right length is returned as a tuple."""
        assert validate_payload("vertex_data", ["a", "b"], 2) == ("a", "b")

    def test_accepts_iterables(self):
        """Any finite sequence is accepted."""
        assert validate_payload("face_data", range(3), 3) == (0, 1, 2)

    def test_wrong_length_raises(self):
        """Wrong length raises PayloadLengthError."""
        with pytest.raises(PayloadLengthError, match="edge_data must have 6 entries, got 5"):
            validate_payload("edge_data", [0] * 5, 6)


class TestEmbeddingValidation:
    """Tests for the opt-in planar embedding check."""

    def test_triangle_is_valid(self):
        """A triangle embedding has no issues."""
        g = from_rotation_system({0: [1, 2], 1: [2, 0], 2: [0, 1]})
        assert validate_embedding(g) == []

    def test_torus_rotation_raises(self):
        """Two interleaved loops at one vertex trace a single face."""
        d = [Dart.parse(0, "+1"), Dart.parse(1, "+1"), Dart.parse(0, "-1"), Dart.parse(1, "-1")]
        g = build(from_cycles([d]))
        with pytest.raises(InvalidEmbeddingError, match="1 face cycles"):
            validate_embedding(g)

    def test_odd_dart_count(self):
        """An odd number of darts cannot pair into edges."""
        g = build(from_cycles([[Dart.from_index(i) for i in range(3)]]))
        issues = validate_embedding(g, strict=False)
        assert len(issues) == 1
        assert "odd number of darts" in issues[0][1]


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    def test_validation_error_is_value_error(self):
        """ValidationError inherits from ValueError."""
        assert issubclass(ValidationError, ValueError)

    @pytest.mark.parametrize(
        "exc",
        [
            InvalidPartitionError,
            OutOfDomainError,
            WorldMismatchError,
            PayloadLengthError,
            InvalidEmbeddingError,
        ],
    )
    def test_specific_errors_inherit(self, exc):
        """Specific errors inherit from ValidationError."""
        assert issubclass(exc, ValidationError)

    def test_out_of_domain_is_index_error(self):
        """OutOfDomainError can be caught as IndexError."""
        assert issubclass(OutOfDomainError, IndexError)

    def test_world_mismatch_is_type_error(self):
        """WorldMismatchError can be caught as TypeError."""
        assert issubclass(WorldMismatchError, TypeError)
