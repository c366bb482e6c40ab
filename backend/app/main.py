"""
Main application module for the drifter backend.

This file sets up the FastAPI application, configures CORS so the
frontend can make credentialed cross-origin requests, and exposes a
simple health check endpoint.

The environment logger is served at ``/environments`` and the planet
generator under the ``/api`` namespace.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.models import StatusResponse
from .api.routes_environments import router as environments_router
from .api.routes_planet import router as planet_router

# Browsers cache preflight responses for this many seconds.
PREFLIGHT_MAX_AGE = 86400


def create_app() -> FastAPI:
    """Factory to create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application instance.
    """
    app = FastAPI(title="drifter")

    # Echo the request origin back rather than using "*" so that
    # credentialed requests are accepted.
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=".*",
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=PREFLIGHT_MAX_AGE,
    )

    # Health check endpoint for monitoring and deployment probes.
    @app.get("/health", response_model=StatusResponse)
    async def health() -> StatusResponse:
        return StatusResponse(status="ok")

    app.include_router(environments_router, tags=["environments"])
    app.include_router(planet_router, prefix="/api", tags=["planet"])

    return app


# Create the application instance.  Uvicorn will import this when
# running `uvicorn backend.app.main:app` from the repository root.
app = create_app()
