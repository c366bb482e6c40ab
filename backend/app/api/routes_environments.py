"""
Route for recording planet environments.

Clients post an arbitrary JSON object describing an environment.  The
body is validated here and handed to the environment log service,
which appends it with a timestamp.
"""

from __future__ import annotations

import json

from fastapi import APIRouter, HTTPException, Request

from .models import StatusResponse
from ..services.environment_log import append_environment

router = APIRouter()


def _reject_constant(name: str) -> None:
    # NaN and the infinities are Python extensions, not JSON.
    raise ValueError(f"unsupported constant {name}")


@router.post("/environments", response_model=StatusResponse, status_code=201)
async def save_environment(request: Request) -> StatusResponse:
    """Validate and persist a submitted environment.

    Raises:
        HTTPException: 415 for a non-JSON content type, 400 for an empty
            body or anything other than a JSON object, 500 if the log
            could not be written.
    """
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type and media_type != "application/json":
        raise HTTPException(
            status_code=415, detail="Content-Type must be application/json"
        )

    body = await request.body()
    if not body:
        raise HTTPException(status_code=400, detail="empty request body")

    try:
        environment = json.loads(body, parse_constant=_reject_constant)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"invalid JSON: {exc}")
    if not isinstance(environment, dict):
        raise HTTPException(
            status_code=400, detail="invalid JSON: expected an object"
        )

    append_environment(environment)
    return StatusResponse(status="saved")
