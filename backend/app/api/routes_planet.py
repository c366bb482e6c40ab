"""
Routes for procedural planet generation.

The generator currently produces a fixed icosidodecahedron.  Only the
radius can vary: it is taken from the optional ``radius`` query
parameter and otherwise falls back to ``PLANET_DEFAULT_RADIUS``.  Any
request body is ignored.
"""

from __future__ import annotations

import logging
import uuid
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from .models import PlanetResponse, mesh_metadata, mesh_to_model
from ..config import get_settings
from ..services.icosidodecahedron import generate_mesh
from ..services.mesh import InvalidRadius, MeshError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/planet/generate", response_model=PlanetResponse)
async def generate_planet(
    radius: Optional[float] = Query(default=None, description="Circumradius of the planet"),
) -> PlanetResponse:
    """Generate a planet mesh and return it with derived metadata.

    Raises:
        HTTPException: 422 for an invalid radius, 500 if the mesh could
            not be built.
    """
    if radius is None:
        radius = get_settings().planet_default_radius
    try:
        mesh = generate_mesh(radius)
        metadata = mesh_metadata(mesh)
    except InvalidRadius as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except MeshError as exc:
        logger.exception("Planet generation failed")
        raise HTTPException(status_code=500, detail=str(exc))

    planet_id = str(uuid.uuid4())
    logger.info("Generated planet %s with radius %s", planet_id, radius)
    return PlanetResponse(planetId=planet_id, mesh=mesh_to_model(mesh), metadata=metadata)
