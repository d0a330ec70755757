"""Tests for converting neighbour-order rotation systems to planar graphs."""

from __future__ import annotations

import pytest

from planar_geometry.planar import (
    dart_between,
    dual,
    from_rotation_system,
    to_rotation_system,
)
from planar_geometry.types import Direction, VertexId
from planar_geometry.validation import InvalidEmbeddingError

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _triangle_rotation() -> dict[int, list[int]]:
    """Triangle (0,0), (1,0), (0,1), counterclockwise neighbour orders."""
    return {0: [1, 2], 1: [2, 0], 2: [0, 1]}


def _k4_rotation() -> dict[int, list[int]]:
    """K4 drawn with vertex 0 at (0,0) inside the triangle (0,2), (-2,-1), (2,-1)."""
    return {0: [1, 2, 3], 1: [2, 0, 3], 2: [3, 0, 1], 3: [1, 0, 2]}


def _path_rotation(n: int) -> dict[int, list[int]]:
    rotation: dict[int, list[int]] = {v: [] for v in range(n)}
    for v in range(n - 1):
        rotation[v].append(v + 1)
        rotation[v + 1].append(v)
    return rotation


# ---------------------------------------------------------------------------
# from_rotation_system
# ---------------------------------------------------------------------------


class TestFromRotationSystem:
    def test_triangle_counts(self) -> None:
        g = from_rotation_system(_triangle_rotation())
        assert (g.vertex_count, g.edge_count, g.face_count) == (3, 3, 2)
        assert g.verify()

    def test_vertex_i_is_key_i(self) -> None:
        g = from_rotation_system(_k4_rotation())
        for v in g.vertices():
            heads = [g.head_of(d).index for d in g.incident_darts(v)]
            assert heads == _k4_rotation()[v.index]

    def test_k4(self) -> None:
        g = from_rotation_system(_k4_rotation())
        assert (g.vertex_count, g.edge_count, g.face_count) == (4, 6, 4)
        assert g.verify()
        assert all(len(g.boundary(f)) == 3 for f in g.faces())

    def test_tree_has_one_face(self) -> None:
        g = from_rotation_system(_path_rotation(4))
        assert g.face_count == 1
        assert g.verify()
        assert len(g.boundary(g.faces()[0])) == 6

    def test_forward_dart_leaves_lower_vertex(self) -> None:
        g = from_rotation_system(_k4_rotation())
        for d in g.darts():
            tail, head = g.tail_of(d).index, g.head_of(d).index
            assert (d.direction is Direction.FORWARD) == (tail < head)

    def test_edge_payload_is_tail_head(self) -> None:
        g = from_rotation_system(_triangle_rotation())
        for d in g.darts():
            assert g.edge_data_of(d) == (g.tail_of(d).index, g.head_of(d).index)

    def test_arcs_numbered_in_discovery_order(self) -> None:
        g = from_rotation_system(_triangle_rotation())
        assert [g.edge_data_of(e) for e in sorted(g.edges())] == [(0, 1), (0, 2), (1, 2)]

    def test_vertex_data(self) -> None:
        g = from_rotation_system(_triangle_rotation(), vertex_data=["a", "b", "c"])
        assert g.vertex_data_of(VertexId(1)) == "b"

    def test_clockwise_input(self) -> None:
        cw = {v: list(reversed(nbrs)) for v, nbrs in _k4_rotation().items()}
        g = from_rotation_system(cw, clockwise=True)
        assert to_rotation_system(g) == _k4_rotation()

    def test_parallel_edges(self) -> None:
        g = from_rotation_system({0: [1, 1], 1: [0, 0]})
        assert (g.vertex_count, g.edge_count, g.face_count) == (2, 2, 2)
        assert g.verify()

    def test_three_parallel_edges(self) -> None:
        g = from_rotation_system({0: [1, 1, 1], 1: [0, 0, 0]})
        assert (g.vertex_count, g.edge_count, g.face_count) == (2, 3, 3)
        assert g.verify()
        assert all(len(g.boundary(f)) == 2 for f in g.faces())

    def test_parallel_edges_run_opposite_ways(self) -> None:
        g = from_rotation_system({0: [1, 1, 1], 1: [0, 0, 0]})
        arcs_at_0 = [d.arc.index for d in g.incident_darts(VertexId(0))]
        arcs_at_1 = [d.arc.index for d in g.incident_darts(VertexId(1))]
        assert arcs_at_1 == list(reversed(arcs_at_0))

    def test_parallel_edges_with_clockwise_input(self) -> None:
        g = from_rotation_system({0: [1, 1, 1, 1], 1: [0, 0, 0, 0]}, clockwise=True)
        assert g.face_count == 4
        assert g.verify()

    def test_dual_of_k4_is_k4(self) -> None:
        h = dual(from_rotation_system(_k4_rotation()))
        assert h.vertex_count == 4
        assert all(len(o) == 3 for o in h.embedding.orbits)


# ---------------------------------------------------------------------------
# Malformed input
# ---------------------------------------------------------------------------


class TestMalformedRotation:
    def test_non_dense_vertices(self) -> None:
        with pytest.raises(InvalidEmbeddingError, match="must be 0..1"):
            from_rotation_system({0: [2], 2: [0]})

    def test_self_loop(self) -> None:
        with pytest.raises(InvalidEmbeddingError, match="Self-loop"):
            from_rotation_system({0: [0, 1], 1: [0]})

    def test_unknown_neighbour(self) -> None:
        with pytest.raises(InvalidEmbeddingError, match="unknown neighbour"):
            from_rotation_system({0: [5]})

    def test_isolated_vertex(self) -> None:
        with pytest.raises(InvalidEmbeddingError, match="empty rotation"):
            from_rotation_system({0: [1], 1: [0], 2: []})

    def test_missing_reverse(self) -> None:
        with pytest.raises(InvalidEmbeddingError, match="no matching reverse edge"):
            from_rotation_system({0: [1, 2], 1: [0], 2: [1]})

    def test_unbalanced_parallel_edges(self) -> None:
        with pytest.raises(InvalidEmbeddingError, match="occurs 2 times"):
            from_rotation_system({0: [1, 1], 1: [0]})

    def test_interleaved_parallel_edges(self) -> None:
        # Digons to 1 and to 2 alternate around 0: no planar pairing exists
        with pytest.raises(InvalidEmbeddingError, match="1 face cycles"):
            from_rotation_system({0: [1, 2, 1, 2], 1: [0, 0], 2: [0, 0]})

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            from_rotation_system({1: []})


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


class TestRotationQueries:
    def test_roundtrip(self) -> None:
        rotation = _k4_rotation()
        assert to_rotation_system(from_rotation_system(rotation)) == rotation

    def test_dart_between(self) -> None:
        g = from_rotation_system(_triangle_rotation())
        d = dart_between(g, 2, 0)
        assert d is not None
        assert g.tail_of(d) == VertexId(2)
        assert g.head_of(d) == VertexId(0)

    def test_dart_between_missing(self) -> None:
        g = from_rotation_system(_path_rotation(3))
        assert dart_between(g, 0, 2) is None
