"""
Icosidodecahedron generator for the planet endpoint.

The planet mesh is a regular icosidodecahedron centred at the origin:
30 vertices, 20 triangles and 12 pentagons.  Both the vertex positions
and the face incidence are fixed tables.  The vertex table uses the
six axis points ``(0, 0, ±2)``, ``(0, ±2, 0)`` and ``(±2, 0, 0)`` plus
every sign combination of the cyclic permutations of
``(1, φ, 1/φ)``, all of which lie on a sphere of radius 2.  Generation
rescales each row onto a sphere of the requested radius and derives
the edge list from the faces.

The face table is wound counter-clockwise when viewed from outside the
solid.  Every edge borders exactly one triangle and one pentagon and
every vertex has degree four.

Public API:

- ``generate_icosidodecahedron(radius)`` – build a :class:`Mesh`.
- ``generate_mesh(radius)`` – alias used by the API layer.
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import List, Tuple

import numpy as np

from .edges import check_closed_surface, derive_edges, face_kind
from .mesh import Face, InvalidRadius, Mesh, Vertex

logger = logging.getLogger(__name__)

PHI: float = (1.0 + math.sqrt(5.0)) / 2.0
INV_PHI: float = 1.0 / PHI

# Relative tolerance on each scaled vertex norm against the requested radius.
RADIUS_RTOL: float = 1e-9

# Rows are grouped by sign pattern (+++, ++-, +-+, +--, -++, -+-, --+, ---)
# within each permutation family so that rows 6, 14 and 22 share signs, and so on.
_BASE_COORDINATES: Tuple[Tuple[float, float, float], ...] = (
    (0.0, 0.0, 2.0), (0.0, 0.0, -2.0),
    (0.0, 2.0, 0.0), (0.0, -2.0, 0.0),
    (2.0, 0.0, 0.0), (-2.0, 0.0, 0.0),
    (1.0, PHI, INV_PHI), (1.0, PHI, -INV_PHI),
    (1.0, -PHI, INV_PHI), (1.0, -PHI, -INV_PHI),
    (-1.0, PHI, INV_PHI), (-1.0, PHI, -INV_PHI),
    (-1.0, -PHI, INV_PHI), (-1.0, -PHI, -INV_PHI),
    (INV_PHI, 1.0, PHI), (INV_PHI, 1.0, -PHI),
    (INV_PHI, -1.0, PHI), (INV_PHI, -1.0, -PHI),
    (-INV_PHI, 1.0, PHI), (-INV_PHI, 1.0, -PHI),
    (-INV_PHI, -1.0, PHI), (-INV_PHI, -1.0, -PHI),
    (PHI, INV_PHI, 1.0), (PHI, INV_PHI, -1.0),
    (PHI, -INV_PHI, 1.0), (PHI, -INV_PHI, -1.0),
    (-PHI, INV_PHI, 1.0), (-PHI, INV_PHI, -1.0),
    (-PHI, -INV_PHI, 1.0), (-PHI, -INV_PHI, -1.0),
)

_FACE_TABLE: Tuple[Tuple[int, ...], ...] = (
    # Triangles around the six axis vertices
    (0, 14, 18), (0, 20, 16),
    (1, 19, 15), (1, 17, 21),
    (2, 6, 7), (2, 11, 10),
    (3, 9, 8), (3, 12, 13),
    (4, 22, 24), (4, 25, 23),
    (5, 28, 26), (5, 27, 29),
    # One triangle per octant
    (6, 14, 22), (7, 23, 15),
    (8, 24, 16), (9, 17, 25),
    (10, 26, 18), (11, 19, 27),
    (12, 20, 28), (13, 29, 21),
    # Pentagons
    (0, 16, 24, 22, 14), (0, 18, 26, 28, 20),
    (1, 15, 23, 25, 17), (1, 21, 29, 27, 19),
    (2, 10, 18, 14, 6), (2, 7, 15, 19, 11),
    (3, 8, 16, 20, 12), (3, 13, 21, 17, 9),
    (4, 23, 7, 6, 22), (4, 24, 8, 9, 25),
    (5, 26, 10, 11, 27), (5, 29, 13, 12, 28),
)


def _validate_radius(radius: float) -> float:
    if isinstance(radius, bool) or not isinstance(radius, numbers.Real):
        raise InvalidRadius(f"radius must be a real number, got {radius!r}")
    value = float(radius)
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidRadius(f"radius must be finite and positive, got {value!r}")
    return value


def _scaled_vertices(radius: float) -> List[Vertex]:
    """Project the base coordinates onto a sphere of ``radius``.

    Raises:
        InvalidRadius: If ``radius`` is too small (or too large) for the
            scaled coordinates to keep their norm in float64.
    """
    coords = np.array(_BASE_COORDINATES, dtype=np.float64)
    norms = np.linalg.norm(coords, axis=1)
    nonzero = norms > 0.0
    scaled = coords.copy()
    scaled[nonzero] = coords[nonzero] * (radius / norms[nonzero])[:, np.newaxis]
    scaled_norms = np.linalg.norm(scaled[nonzero], axis=1)
    if not np.allclose(scaled_norms, radius, rtol=RADIUS_RTOL, atol=0.0):
        raise InvalidRadius(f"radius {radius!r} cannot be represented accurately")
    return [
        Vertex(id=i, x=x, y=y, z=z) for i, (x, y, z) in enumerate(scaled.tolist())
    ]


def _faces() -> List[Face]:
    return [
        Face(id=i, vertices=indices, type=face_kind(len(indices)))
        for i, indices in enumerate(_FACE_TABLE)
    ]


def generate_icosidodecahedron(radius: float) -> Mesh:
    """Build an icosidodecahedron whose vertices lie on a sphere of ``radius``.

    Args:
        radius: Circumradius of the generated solid.

    Returns:
        Mesh: 30 vertices, 32 faces and the 60 edges derived from them.

    Raises:
        InvalidRadius: If ``radius`` is not a finite positive number.
    """
    radius = _validate_radius(radius)
    vertices = _scaled_vertices(radius)
    faces = _faces()
    edges = derive_edges(faces)
    check_closed_surface(faces, edges, len(vertices))
    logger.debug(
        "Generated icosidodecahedron radius=%s: %d vertices, %d faces, %d edges",
        radius,
        len(vertices),
        len(faces),
        len(edges),
    )
    return Mesh(vertices=tuple(vertices), faces=tuple(faces), edges=tuple(edges))


generate_mesh = generate_icosidodecahedron
