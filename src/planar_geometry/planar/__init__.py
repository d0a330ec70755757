"""Planar graphs represented by their rotation system, and their duals.

A connected planar graph is stored as one cyclic permutation over darts
(directed half-edges): each orbit is the counterclockwise order of the darts
leaving one vertex. Vertices, edges, faces, adjacency and the dual graph are
all derived from that permutation.

Public API:
    build(embedding) -> PlanarGraph
    dual(graph) -> PlanarGraph
    from_rotation_system(rotation) -> PlanarGraph
"""

from __future__ import annotations

from ..types import twin
from ..validation import validate_embedding
from ._graph import (
    PlanarGraph,
    boundary,
    build,
    darts,
    dual,
    edge_data_of,
    edges,
    face_data_of,
    face_vertices,
    faces,
    head_of,
    incident_darts,
    incoming_darts,
    left_face,
    outgoing_darts,
    right_face,
    tail_of,
    vertex_data_of,
    vertices,
)
from ._rotation import dart_between, from_rotation_system, to_rotation_system

__all__ = [
    "PlanarGraph",
    "build",
    "dual",
    "twin",
    "tail_of",
    "head_of",
    "incident_darts",
    "incoming_darts",
    "outgoing_darts",
    "vertices",
    "darts",
    "edges",
    "faces",
    "left_face",
    "right_face",
    "boundary",
    "face_vertices",
    "vertex_data_of",
    "edge_data_of",
    "face_data_of",
    "validate_embedding",
    "from_rotation_system",
    "to_rotation_system",
    "dart_between",
]
