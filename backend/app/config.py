"""
Runtime configuration for the drifter backend.

Settings come from environment variables and are read each time
``get_settings`` is called, so tests can point the service at a
temporary log file with ``monkeypatch.setenv``.

Recognised variables:

- ``HOST`` / ``PORT`` – bind address used by ``run.py`` (default
  ``0.0.0.0:8080``).
- ``ENV_LOG_FILE`` – path of the environment log
  (default ``logs/environments.log``).
- ``PLANET_DEFAULT_RADIUS`` – radius used when a planet request does
  not supply one (default ``1.0``).
- ``LOG_LEVEL`` – root logging level (default ``INFO``).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PORT = 8080
DEFAULT_ENV_LOG_FILE = "logs/environments.log"
DEFAULT_PLANET_RADIUS = 1.0


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    env_log_file: Path
    planet_default_radius: float
    log_level: str


def get_settings() -> Settings:
    """Return settings built from the current environment."""
    return Settings(
        host=os.getenv("HOST") or "0.0.0.0",
        port=int(os.getenv("PORT") or DEFAULT_PORT),
        env_log_file=Path(os.getenv("ENV_LOG_FILE") or DEFAULT_ENV_LOG_FILE),
        planet_default_radius=float(
            os.getenv("PLANET_DEFAULT_RADIUS") or DEFAULT_PLANET_RADIUS
        ),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
