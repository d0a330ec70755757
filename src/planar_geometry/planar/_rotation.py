"""Conversion between adjacency-list rotation systems and dart permutations."""

from __future__ import annotations

import operator
from collections import defaultdict
from typing import Any, Mapping, Optional, Sequence

from ..permutation import Permutation
from ..types import Arc, Dart, Direction, VertexId
from ..validation import InvalidEmbeddingError, validate_embedding
from ._graph import PlanarGraph


def from_rotation_system(
    rotation: Mapping[int, Sequence[int]],
    *,
    clockwise: bool = False,
    vertex_data: Optional[Sequence[Any]] = None,
) -> PlanarGraph[Any, tuple[int, int], None]:
    """
    Build a planar graph from per-vertex neighbour orders.

    A rotation system assigns to each vertex the cyclic order of its
    neighbours. Vertex i of the result is rotation key i. Arcs are numbered
    in the order they are first met when scanning vertices in increasing
    order; the FORWARD dart of an arc leaves its lower-numbered endpoint.
    Parallel edges are paired in opposite orders at their two endpoints, as
    in a planar drawing: the k-th of m copies met at the lower endpoint is
    the (m - k)-th met at the higher one. When parallel edges are present
    the resulting embedding is checked, since the pairing could still be
    non-planar. Every dart's payload is its (tail, head) pair.

    Args:
        rotation: Mapping from vertex (0..n-1) to its neighbour order
        clockwise: If True, the orders are clockwise and get reversed
        vertex_data: Optional vertex payloads, one per vertex

    Returns:
        The planar graph of the rotation system

    Raises:
        InvalidEmbeddingError: If the vertices are not 0..n-1, a vertex has
            no neighbours, a self-loop is present, or an edge is missing
            its reverse, or if parallel edges cannot be paired into a
            planar embedding.
    """
    n = len(rotation)
    if sorted(rotation) != list(range(n)):
        raise InvalidEmbeddingError(f"Rotation system vertices must be 0..{n - 1}")

    # arcs[(u, w)] lists the arcs between u < w in order of occurrence at u
    arcs: dict[tuple[int, int], list[int]] = defaultdict(list)
    arc_count = 0
    for v in range(n):
        for w in rotation[v]:
            if w == v:
                raise InvalidEmbeddingError(f"Self-loop at vertex {v}")
            if w not in rotation:
                raise InvalidEmbeddingError(f"Vertex {v} has unknown neighbour {w}")
            if v < w:
                arcs[(v, w)].append(arc_count)
                arc_count += 1

    orbits: list[list[Dart]] = []
    for v in range(n):
        neighbors = list(rotation[v])
        if not neighbors:
            raise InvalidEmbeddingError(f"Vertex {v} has an empty rotation")
        if clockwise:
            neighbors.reverse()

        seen: dict[int, int] = defaultdict(int)
        orbit: list[Dart] = []
        for w in neighbors:
            key = (min(v, w), max(v, w))
            k = seen[w]
            seen[w] += 1
            if k >= len(arcs[key]):
                raise InvalidEmbeddingError(
                    f"Edge ({v}, {w}) has no matching reverse edge ({w}, {v})"
                )
            if v < w:
                orbit.append(Dart(Arc(arcs[key][k]), Direction.FORWARD))
            else:
                # Copies run the other way round the higher endpoint
                orbit.append(Dart(Arc(arcs[key][-1 - k]), Direction.BACKWARD))
        orbits.append(orbit)

    # Every arc must have been used from both ends
    for (u, w), ids in arcs.items():
        back = sum(1 for x in rotation[w] if x == u)
        if back != len(ids):
            raise InvalidEmbeddingError(
                f"Edge ({u}, {w}) occurs {len(ids)} times at {u} but {back} times at {w}"
            )

    graph = PlanarGraph.build(Permutation.from_cycles(orbits))
    ends: list[tuple[int, int]] = [(0, 0)] * graph.dart_count
    for v, orbit in enumerate(orbits):
        for d in orbit:
            ends[operator.index(d)] = (v, graph.head_of(d).index)

    if any(len(ids) > 1 for ids in arcs.values()):
        validate_embedding(graph)

    if vertex_data is None:
        return graph.with_edge_data(ends)
    return graph.with_data(vertex_data=vertex_data, edge_data=ends)


def to_rotation_system(graph: PlanarGraph[Any, Any, Any]) -> dict[int, list[int]]:
    """
    Read a graph back as per-vertex neighbour orders (counterclockwise).

    Returns:
        Mapping from vertex index to the heads of its darts in rotation order
    """
    return {
        v.index: [graph.head_of(d).index for d in graph.incident_darts(v)]
        for v in graph.vertices()
    }


def dart_between(graph: PlanarGraph[Any, Any, Any], u: int, w: int) -> Optional[Dart]:
    """
    Find a dart from vertex u to vertex w.

    Returns:
        The first such dart in u's rotation, or None if u and w are not adjacent
    """
    world = graph.world
    for d in graph.incident_darts(VertexId(u, world)):
        if graph.head_of(d).index == w:
            return d
    return None
