"""
Naive O(n^4) Delaunay triangulation.

Every triple of points is tested: (p, q, r) is a Delaunay triangle if the
disk through p, q and r contains no other input point in its interior.
Collinear triples are never triangles. The result is turned into a
counterclockwise rotation system and can be handed to the planar graph
layer.

Requires the points to be in general position (no four points on a common
circle); otherwise crossing triangles may be reported.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any, Sequence

from ..geometry.ball import disk, inside_ball
from ..geometry.types import Point, cross, sub
from ..planar import PlanarGraph, from_rotation_system


def _half(v: Point) -> int:
    """0 for directions in [0, pi), 1 for [pi, 2 pi)."""
    x, y = v
    return 0 if (y > 0 or (y == 0 and x > 0)) else 1


def sort_around(center: Point, points: Sequence[Point], ids: Sequence[int]) -> list[int]:
    """
    Sort point ids counterclockwise around ``center``, starting from the
    positive x-axis. Uses exact orientation tests, no angles.
    """

    def compare(i: int, j: int) -> int:
        u = sub(points[i], center)
        w = sub(points[j], center)
        hu, hw = _half(u), _half(w)
        if hu != hw:
            return hu - hw
        c = cross(u, w)
        if c > 0:
            return -1
        if c < 0:
            return 1
        return 0

    return sorted(ids, key=cmp_to_key(compare))


@dataclass
class Triangulation:
    """
    A triangulation of a point set.

    Attributes:
        points: The distinct input points; a point's position is its id
        point_ids: Mapping from point to id
        adjacency: For every point id, its neighbours in counterclockwise order
        triangles: The triangles as sorted id triples
    """

    points: list[Point]
    point_ids: dict[Point, int]
    adjacency: list[list[int]]
    triangles: list[tuple[int, int, int]] = field(default_factory=list)

    def edges(self) -> list[tuple[int, int]]:
        """The edges as (i, j) pairs with i < j, sorted."""
        return sorted((i, j) for i, nbrs in enumerate(self.adjacency) for j in nbrs if i < j)

    def to_planar_graph(self) -> PlanarGraph[Point, tuple[int, int], None]:
        """
        The triangulation as a planar graph.

        Vertex i carries points[i]; every dart carries its (tail, head) ids.
        """
        rotation = {i: nbrs for i, nbrs in enumerate(self.adjacency)}
        return from_rotation_system(rotation, vertex_data=self.points)


def is_delaunay(points: Sequence[Point], p: int, q: int, r: int) -> bool:
    """
    Test if (p, q, r) is a triangle of the Delaunay triangulation.

    Running time: O(n)
    """
    d = disk(points[p], points[q], points[r])
    if d is None:
        return False
    return not any(
        inside_ball(points[i], d) for i in range(len(points)) if i not in (p, q, r)
    )


def delaunay_triangulation(points: Sequence[Any]) -> Triangulation:
    """
    Compute the Delaunay triangulation by brute force.

    Duplicate points are dropped with a warning; the first occurrence keeps
    its position.

    Args:
        points: Input points as (x, y) pairs

    Returns:
        Triangulation whose adjacency lists are sorted counterclockwise
    """
    unique: list[Point] = []
    point_ids: dict[Point, int] = {}
    for p in points:
        key = tuple(p)
        if key in point_ids:
            continue
        point_ids[key] = len(unique)
        unique.append(key)

    dropped = len(points) - len(unique)
    if dropped:
        warnings.warn(
            f"delaunay_triangulation: ignoring {dropped} duplicate point(s)",
            stacklevel=2,
        )

    n = len(unique)
    triangles = [
        (p, q, r)
        for p in range(n)
        for q in range(p + 1, n)
        for r in range(q + 1, n)
        if is_delaunay(unique, p, q, r)
    ]

    neighbor_sets: list[set[int]] = [set() for _ in range(n)]
    for p, q, r in triangles:
        for i, j in ((p, q), (q, r), (p, r)):
            neighbor_sets[i].add(j)
            neighbor_sets[j].add(i)

    adjacency = [
        sort_around(unique[u], unique, list(nbrs)) for u, nbrs in enumerate(neighbor_sets)
    ]
    return Triangulation(unique, point_ids, adjacency, triangles)


__all__ = [
    "Triangulation",
    "delaunay_triangulation",
    "is_delaunay",
    "sort_around",
]
