"""
Core mesh data model for the planet generator.

A ``Mesh`` is the triple of vertices, faces and edges describing a
closed polyhedral surface.  All types in this module are immutable
dataclasses holding tuples so a generated mesh can be handed to the
API layer without any risk of it being modified afterwards.  The
errors defined here form the whole error taxonomy of the geometry
services; they subclass ``ValueError`` because every one of them is a
precondition violation on caller input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


class MeshError(ValueError):
    """Base class for errors raised while building a mesh."""


class InvalidFace(MeshError):
    """A face has fewer than three vertices or repeats a vertex."""


class InvalidRadius(MeshError):
    """The requested radius is not a finite, strictly positive number."""


class InvalidTopology(MeshError):
    """The face table does not describe a closed, consistent surface."""


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex.

    Attributes:
        id: Position of the vertex in the generated table.
        x: X coordinate.
        y: Y coordinate.
        z: Z coordinate.
    """

    id: int
    x: float
    y: float
    z: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Face:
    """A polygonal face given by its boundary cycle of vertex indices.

    The last vertex implicitly connects back to the first.  ``type`` is
    ``"triangle"`` or ``"pentagon"`` for the generated planet mesh.
    """

    id: int
    vertices: Tuple[int, ...]
    type: str


@dataclass(frozen=True)
class Edge:
    """An undirected edge stored with the lower vertex index first."""

    id: int
    vertices: Tuple[int, int]


@dataclass(frozen=True)
class Mesh:
    """Vertices, faces and edges of one generated polyhedron."""

    vertices: Tuple[Vertex, ...]
    faces: Tuple[Face, ...]
    edges: Tuple[Edge, ...]
