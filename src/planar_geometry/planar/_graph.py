"""Connected planar graphs stored as a rotation system over darts."""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any, Generic, Optional, Sequence, TypeVar

from ..permutation import Permutation
from ..types import Dart, Direction, FaceId, VertexId, World
from ..validation import (
    WorldMismatchError,
    check_index,
    validate_embedding,
    validate_payload,
)

if TYPE_CHECKING:
    from typing_extensions import Self

V = TypeVar("V")
E = TypeVar("E")
F = TypeVar("F")


class PlanarGraph(Generic[V, E, F]):
    """
    A connected planar graph given by its rotation system.

    Every orbit of ``embedding`` is the counterclockwise order of the darts
    leaving one vertex; orbit i is vertex i. Payloads are plain tuples:
    ``vertex_data`` per vertex, ``edge_data`` per dart identity (two entries
    per arc) and ``face_data`` per face.

    The value is immutable. Operations that change data return a new graph.
    The embedding is assumed to be realizable in the plane; ``verify()``
    checks the combinatorial part of that on request.

    Attributes:
        embedding: Rotation system as a permutation of darts
        vertex_data: Vertex payloads, length vertex_count
        edge_data: Dart payloads, length 2 * edge_count
        face_data: Face payloads, length face_count
        world: The space (primal or dual) this graph lives in
    """

    __slots__ = ("embedding", "vertex_data", "edge_data", "face_data", "world", "_dual")

    def __init__(
        self,
        embedding: Permutation[Dart],
        vertex_data: tuple[V, ...],
        edge_data: tuple[E, ...],
        face_data: tuple[F, ...],
        world: World = World.PRIMAL,
    ) -> None:
        self.embedding = embedding
        self.vertex_data = vertex_data
        self.edge_data = edge_data
        self.face_data = face_data
        self.world = world
        self._dual: Optional[PlanarGraph[F, E, V]] = None

    @classmethod
    def build(cls, embedding: Permutation[Dart]) -> PlanarGraph[None, None, None]:
        """
        Create a primal graph from a rotation system, with empty payloads.

        The counts follow from the permutation alone: E = size / 2,
        V = number of orbits and F = E - V + 2.
        """
        e = embedding.size // 2
        v = embedding.orbit_count
        f = e - v + 2
        return cls(embedding, (None,) * v, (None,) * (2 * e), (None,) * f)

    # -------------------------------------------------------------------------
    # Counts
    # -------------------------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        return self.embedding.orbit_count

    @property
    def dart_count(self) -> int:
        return self.embedding.size

    @property
    def edge_count(self) -> int:
        return self.embedding.size // 2

    @property
    def face_count(self) -> int:
        """Number of faces, by Euler's formula V - E + F = 2."""
        return self.edge_count - self.vertex_count + 2

    # -------------------------------------------------------------------------
    # Enumeration
    # -------------------------------------------------------------------------

    def vertices(self) -> list[VertexId[Any]]:
        return [VertexId(i, self.world) for i in range(self.vertex_count)]

    def darts(self) -> list[Dart]:
        """All darts, vertex by vertex, in rotation order."""
        return self.embedding.elems()

    def edges(self) -> list[Dart]:
        """One dart per arc: the FORWARD one."""
        return [d for d in self.darts() if d.is_forward]

    def faces(self) -> list[FaceId[Any]]:
        return [FaceId(v) for v in self.dual().vertices()]

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def tail_of(self, dart: Dart) -> VertexId[Any]:
        """The vertex this dart leaves from."""
        orbit_id, _ = self.embedding.lookup_index(dart)
        return VertexId(orbit_id, self.world)

    def head_of(self, dart: Dart) -> VertexId[Any]:
        """The vertex this dart points to."""
        return self.tail_of(dart.twin())

    def incident_darts(self, v: VertexId[Any]) -> tuple[Dart, ...]:
        """All darts leaving v, in counterclockwise order around v."""
        return self.embedding.orbits[self._vertex_index(v)]

    def incoming_darts(self, v: VertexId[Any]) -> tuple[Dart, ...]:
        return tuple(d for d in self.incident_darts(v) if d.direction is Direction.BACKWARD)

    def outgoing_darts(self, v: VertexId[Any]) -> tuple[Dart, ...]:
        return tuple(d for d in self.incident_darts(v) if d.direction is Direction.FORWARD)

    def next_around(self, dart: Dart) -> Dart:
        """The dart following ``dart`` counterclockwise around its tail."""
        return self.embedding.apply(dart)

    def next_in_face(self, dart: Dart) -> Dart:
        """The dart following ``dart`` along the boundary of its face."""
        return self.embedding.apply(dart.twin())

    # -------------------------------------------------------------------------
    # Faces
    # -------------------------------------------------------------------------

    def dual(self) -> PlanarGraph[F, E, V]:
        """
        The dual graph.

        Its rotation system is the permutation d -> next_in_face(d): each
        orbit is the boundary of one face of this graph and becomes one
        vertex of the dual. Dart identities are kept, so edge payloads carry
        over unchanged while vertex and face payloads swap roles. The result
        is computed once and reused.
        """
        if self._dual is None:
            perm = self.embedding
            embedding = Permutation.from_function(
                perm.elems(), lambda d: perm.apply(d.twin())
            )
            self._dual = PlanarGraph(
                embedding,
                self.face_data,
                self.edge_data,
                self.vertex_data,
                self.world.dual(),
            )
        return self._dual

    def left_face(self, dart: Dart) -> FaceId[Any]:
        return FaceId(self.dual().head_of(dart))

    def right_face(self, dart: Dart) -> FaceId[Any]:
        return FaceId(self.dual().tail_of(dart))

    def boundary(self, face: FaceId[Any]) -> tuple[Dart, ...]:
        """
        The darts bounding a face, in the order the face is traversed.

        Every dart d in the result satisfies right_face(d) == face.
        """
        self._check_face(face)
        return self.dual().incident_darts(face.vertex)

    def face_vertices(self, face: FaceId[Any]) -> list[VertexId[Any]]:
        """The vertices met while walking around a face."""
        return [self.tail_of(d) for d in self.boundary(face)]

    # -------------------------------------------------------------------------
    # Payloads
    # -------------------------------------------------------------------------

    def vertex_data_of(self, v: VertexId[Any]) -> V:
        return self.vertex_data[self._vertex_index(v)]

    def edge_data_of(self, dart: Dart) -> E:
        return self.edge_data[check_index("dart", operator.index(dart), len(self.edge_data))]

    def face_data_of(self, face: FaceId[Any]) -> F:
        self._check_face(face)
        return self.face_data[check_index("face", face.index, len(self.face_data))]

    def with_vertex_data(self, data: Sequence[Any]) -> PlanarGraph[Any, E, F]:
        """Return a copy with new vertex payloads (one per vertex)."""
        values = validate_payload("vertex_data", data, self.vertex_count)
        return PlanarGraph(self.embedding, values, self.edge_data, self.face_data, self.world)

    def with_edge_data(self, data: Sequence[Any]) -> PlanarGraph[V, Any, F]:
        """Return a copy with new dart payloads (indexed by dart identity)."""
        values = validate_payload("edge_data", data, self.dart_count)
        return PlanarGraph(self.embedding, self.vertex_data, values, self.face_data, self.world)

    def with_face_data(self, data: Sequence[Any]) -> PlanarGraph[V, E, Any]:
        """Return a copy with new face payloads (one per face)."""
        values = validate_payload("face_data", data, self.face_count)
        return PlanarGraph(self.embedding, self.vertex_data, self.edge_data, values, self.world)

    def with_data(
        self,
        *,
        vertex_data: Optional[Sequence[Any]] = None,
        edge_data: Optional[Sequence[Any]] = None,
        face_data: Optional[Sequence[Any]] = None,
    ) -> PlanarGraph[Any, Any, Any]:
        """
        Return a copy with any of the payload arrays replaced.

        Args:
            vertex_data: One entry per vertex
            edge_data: One entry per dart, indexed by dart identity
            face_data: One entry per face

        Raises:
            PayloadLengthError: If an array has the wrong length
        """
        graph: PlanarGraph[Any, Any, Any] = self
        if vertex_data is not None:
            graph = graph.with_vertex_data(vertex_data)
        if edge_data is not None:
            graph = graph.with_edge_data(edge_data)
        if face_data is not None:
            graph = graph.with_face_data(face_data)
        return graph

    def with_edge_value(self, dart: Dart, value: E) -> Self:
        """Return a copy where only ``dart`` carries a new payload."""
        ident = check_index("dart", operator.index(dart), len(self.edge_data))
        data = list(self.edge_data)
        data[ident] = value
        return self.with_edge_data(data)  # type: ignore[return-value]

    # -------------------------------------------------------------------------
    # Checks
    # -------------------------------------------------------------------------

    def verify(self) -> bool:
        """
        Check that the rotation system is a connected planar embedding.

        Returns:
            True if the embedding passes validate_embedding.
        """
        return not validate_embedding(self, strict=False)

    def _vertex_index(self, v: VertexId[Any]) -> int:
        if v.world is not self.world:
            raise WorldMismatchError(
                f"{v!r} belongs to the {v.world.value} space, graph is {self.world.value}"
            )
        return check_index("vertex", v.index, self.vertex_count)

    def _check_face(self, face: FaceId[Any]) -> None:
        if face.world is not self.world:
            raise WorldMismatchError(
                f"{face!r} belongs to the {face.world.value} space, graph is {self.world.value}"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlanarGraph):
            return NotImplemented
        return (
            self.world is other.world
            and self.embedding == other.embedding
            and self.vertex_data == other.vertex_data
            and self.edge_data == other.edge_data
            and self.face_data == other.face_data
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"PlanarGraph({self.world.value}, V={self.vertex_count}, "
            f"E={self.edge_count}, F={self.face_count})"
        )


# -----------------------------------------------------------------------------
# Function forms
# -----------------------------------------------------------------------------


def build(embedding: Permutation[Dart]) -> PlanarGraph[None, None, None]:
    """Create a planar graph from a rotation system. See PlanarGraph.build."""
    return PlanarGraph.build(embedding)


def dual(g: PlanarGraph[V, E, F]) -> PlanarGraph[F, E, V]:
    return g.dual()


def tail_of(dart: Dart, g: PlanarGraph[Any, Any, Any]) -> VertexId[Any]:
    return g.tail_of(dart)


def head_of(dart: Dart, g: PlanarGraph[Any, Any, Any]) -> VertexId[Any]:
    return g.head_of(dart)


def incident_darts(v: VertexId[Any], g: PlanarGraph[Any, Any, Any]) -> tuple[Dart, ...]:
    return g.incident_darts(v)


def incoming_darts(v: VertexId[Any], g: PlanarGraph[Any, Any, Any]) -> tuple[Dart, ...]:
    return g.incoming_darts(v)


def outgoing_darts(v: VertexId[Any], g: PlanarGraph[Any, Any, Any]) -> tuple[Dart, ...]:
    return g.outgoing_darts(v)


def vertices(g: PlanarGraph[Any, Any, Any]) -> list[VertexId[Any]]:
    return g.vertices()


def darts(g: PlanarGraph[Any, Any, Any]) -> list[Dart]:
    return g.darts()


def edges(g: PlanarGraph[Any, Any, Any]) -> list[Dart]:
    return g.edges()


def faces(g: PlanarGraph[Any, Any, Any]) -> list[FaceId[Any]]:
    return g.faces()


def left_face(dart: Dart, g: PlanarGraph[Any, Any, Any]) -> FaceId[Any]:
    """The face to the left of a dart."""
    return g.left_face(dart)


def right_face(dart: Dart, g: PlanarGraph[Any, Any, Any]) -> FaceId[Any]:
    """The face to the right of a dart."""
    return g.right_face(dart)


def boundary(face: FaceId[Any], g: PlanarGraph[Any, Any, Any]) -> tuple[Dart, ...]:
    return g.boundary(face)


def face_vertices(face: FaceId[Any], g: PlanarGraph[Any, Any, Any]) -> list[VertexId[Any]]:
    return g.face_vertices(face)


def vertex_data_of(v: VertexId[Any], g: PlanarGraph[V, Any, Any]) -> V:
    return g.vertex_data_of(v)


def edge_data_of(dart: Dart, g: PlanarGraph[Any, E, Any]) -> E:
    return g.edge_data_of(dart)


def face_data_of(face: FaceId[Any], g: PlanarGraph[Any, Any, F]) -> F:
    return g.face_data_of(face)
