"""
planar-geometry: Computational geometry primitives in Python.

This package represents connected planar graphs by their rotation system
and computes dual graphs, together with the geometric predicates and the
triangulation code that produce and consume such graphs.

Available modules:
- permutation: Cyclic representation of permutations
- planar: Planar graphs over darts, faces and duals
- geometry: Ranges, boxes, balls, segments and polygons
- delaunay: Brute-force Delaunay triangulation
"""

__version__ = "0.1.0"

# Delaunay triangulation
from .delaunay import Triangulation, delaunay_triangulation

# Geometric predicates
from .geometry import (
    Ball,
    Box,
    EndPoint,
    Line,
    LineSegment,
    MultiPolygon,
    PointLocation,
    Range,
    SimplePolygon,
    disk,
)

# Permutations
from .permutation import Permutation, from_cycles, from_function

# Planar graphs
from .planar import (
    PlanarGraph,
    build,
    dual,
    from_rotation_system,
    to_rotation_system,
)

# Shared types
from .types import Arc, Dart, Direction, Dual, FaceId, Primal, VertexId, World, twin

# Validation utilities
from .validation import (
    InvalidEmbeddingError,
    InvalidPartitionError,
    OutOfDomainError,
    PayloadLengthError,
    ValidationError,
    WorldMismatchError,
    validate_embedding,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Arc",
    "Dart",
    "Direction",
    "World",
    "Primal",
    "Dual",
    "VertexId",
    "FaceId",
    "twin",
    # Permutations
    "Permutation",
    "from_cycles",
    "from_function",
    # Planar graphs
    "PlanarGraph",
    "build",
    "dual",
    "from_rotation_system",
    "to_rotation_system",
    # Geometry
    "PointLocation",
    "EndPoint",
    "Range",
    "Box",
    "Ball",
    "disk",
    "Line",
    "LineSegment",
    "SimplePolygon",
    "MultiPolygon",
    # Delaunay
    "Triangulation",
    "delaunay_triangulation",
    # Validation
    "ValidationError",
    "InvalidPartitionError",
    "OutOfDomainError",
    "WorldMismatchError",
    "PayloadLengthError",
    "InvalidEmbeddingError",
    "validate_embedding",
]
