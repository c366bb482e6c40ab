"""
Pydantic data models for the drifter planet API.

These models define the JSON shapes returned by the backend.  Field
names use camelCase to match what the frontend consumes.  The core
geometry services work with immutable dataclasses; the helpers at the
bottom of this module convert those into response models.
"""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

from ..services.edges import compute_genus
from ..services.mesh import Mesh


class StatusResponse(BaseModel):
    """Simple status payload used by the health and environment endpoints."""

    status: str = Field(..., description="Outcome of the request")


class VertexModel(BaseModel):
    """Single mesh vertex."""

    id: int
    x: float
    y: float
    z: float


class FaceModel(BaseModel):
    """Polygonal face described by its boundary cycle."""

    id: int
    vertices: List[int] = Field(..., description="Vertex indices in boundary order")
    type: Literal["triangle", "pentagon", "polygon"] = Field(
        ..., description="Face kind derived from the number of vertices"
    )


class EdgeModel(BaseModel):
    """Undirected edge with the lower vertex index first."""

    id: int
    vertices: List[int] = Field(..., min_length=2, max_length=2)


class MeshModel(BaseModel):
    vertices: List[VertexModel]
    faces: List[FaceModel]
    edges: List[EdgeModel]


class MeshMetadata(BaseModel):
    """Counts and topology derived from a generated mesh."""

    vertexCount: int
    faceCount: int
    edgeCount: int
    genus: int = Field(..., description="0 for a sphere-equivalent mesh")


class PlanetResponse(BaseModel):
    """Response returned by the planet generator."""

    planetId: str = Field(..., description="Unique identifier for the generated planet")
    mesh: MeshModel
    metadata: MeshMetadata


def mesh_to_model(mesh: Mesh) -> MeshModel:
    return MeshModel(
        vertices=[VertexModel(id=v.id, x=v.x, y=v.y, z=v.z) for v in mesh.vertices],
        faces=[
            FaceModel(id=f.id, vertices=list(f.vertices), type=f.type)
            for f in mesh.faces
        ],
        edges=[EdgeModel(id=e.id, vertices=list(e.vertices)) for e in mesh.edges],
    )


def mesh_metadata(mesh: Mesh) -> MeshMetadata:
    return MeshMetadata(
        vertexCount=len(mesh.vertices),
        faceCount=len(mesh.faces),
        edgeCount=len(mesh.edges),
        genus=compute_genus(mesh),
    )
