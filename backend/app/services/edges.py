"""
Edge derivation and topology checks for polygon meshes.

``derive_edges`` turns a list of faces into the set of undirected edges
implied by their boundary cycles.  Each face contributes the pairs of
consecutive vertices, including the wrap-around pair from the last
vertex back to the first.  Pairs are canonicalised with the lower index
first and deduplicated with a set of integer tuples, so the work is
linear in the total boundary length.  Edge identifiers follow the order
in which pairs are first encountered: faces in input order, then pairs
in boundary order.  That order is only a stable tie-break for
reproducible output; it carries no geometric meaning.

The remaining helpers check that a face table closes up into a surface
and compute the Euler characteristic and genus reported by the API.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, List, Sequence, Tuple, Union

from .mesh import Edge, Face, InvalidFace, InvalidTopology, Mesh

logger = logging.getLogger(__name__)

FaceLike = Union[Face, Sequence[int]]

FACE_KINDS = {3: "triangle", 5: "pentagon"}


def face_kind(size: int) -> str:
    """Return the face tag for a boundary cycle of ``size`` vertices."""
    return FACE_KINDS.get(size, "polygon")


def _face_indices(face: FaceLike) -> Tuple[int, ...]:
    if isinstance(face, Face):
        return tuple(face.vertices)
    return tuple(face)


def _validate_face(indices: Tuple[int, ...], position: int) -> None:
    if len(indices) < 3:
        raise InvalidFace(
            f"face {position} has {len(indices)} vertices; at least 3 are required"
        )
    if any(i < 0 for i in indices):
        raise InvalidFace(f"face {position} references a negative vertex index")
    if len(set(indices)) != len(indices):
        # Covers self-referential adjacent pairs such as [0, 0, 1].
        raise InvalidFace(f"face {position} repeats a vertex: {list(indices)}")


def _boundary_pairs(indices: Tuple[int, ...]) -> Iterable[Tuple[int, int]]:
    """Yield canonical (low, high) pairs around a face boundary."""
    n = len(indices)
    for i in range(n):
        a = indices[i]
        b = indices[(i + 1) % n]
        if a > b:
            a, b = b, a
        yield (a, b)


def derive_edges(faces: Sequence[FaceLike]) -> List[Edge]:
    """Return the unique undirected edges bounding ``faces``.

    Args:
        faces: Faces in scan order.  Each item is either a :class:`Face`
            or a plain sequence of vertex indices describing the
            boundary cycle.

    Returns:
        Edges numbered from zero in first-discovery order, each stored
        with the lower vertex index first.

    Raises:
        InvalidFace: If a face has fewer than three vertices, repeats a
            vertex or uses a negative index.
    """
    seen: set[Tuple[int, int]] = set()
    edges: List[Edge] = []
    for position, face in enumerate(faces):
        indices = _face_indices(face)
        _validate_face(indices, position)
        for pair in _boundary_pairs(indices):
            if pair in seen:
                continue
            seen.add(pair)
            edges.append(Edge(id=len(edges), vertices=pair))
    return edges


def check_closed_surface(
    faces: Sequence[FaceLike],
    edges: Sequence[Edge],
    vertex_count: int,
) -> None:
    """Raise :class:`InvalidTopology` unless the faces form a closed surface.

    A closed surface needs every face index to name an existing vertex,
    every vertex to be used by some face and every edge to be shared by
    exactly two faces.
    """
    usage: Counter[Tuple[int, int]] = Counter()
    used_vertices: set[int] = set()
    for position, face in enumerate(faces):
        indices = _face_indices(face)
        out_of_range = [i for i in indices if i >= vertex_count]
        if out_of_range:
            raise InvalidTopology(
                f"face {position} references missing vertices {out_of_range}"
            )
        used_vertices.update(indices)
        usage.update(_boundary_pairs(indices))

    if len(used_vertices) != vertex_count:
        unused = sorted(set(range(vertex_count)) - used_vertices)
        raise InvalidTopology(f"vertices not used by any face: {unused}")

    for edge in edges:
        count = usage.get(edge.vertices, 0)
        if count != 2:
            raise InvalidTopology(
                f"edge {edge.vertices} borders {count} faces; a closed surface needs 2"
            )
    if len(usage) != len(edges):
        raise InvalidTopology("edge list does not match the face boundaries")


def euler_characteristic(mesh: Mesh) -> int:
    """Return V - E + F for ``mesh``."""
    return len(mesh.vertices) - len(mesh.edges) + len(mesh.faces)


def compute_genus(mesh: Mesh) -> int:
    """Return the genus of a closed orientable mesh from its Euler characteristic."""
    chi = euler_characteristic(mesh)
    if chi > 2 or (2 - chi) % 2:
        raise InvalidTopology(
            f"Euler characteristic {chi} does not match a closed orientable surface"
        )
    genus = (2 - chi) // 2
    logger.debug("Euler characteristic %d gives genus %d", chi, genus)
    return genus
