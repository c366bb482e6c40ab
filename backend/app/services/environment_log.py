"""
Append-only log of submitted planet environments.

Each accepted environment is written as one JSON object per line with
a UTC timestamp.  The log path comes from ``ENV_LOG_FILE`` and its
parent directory is created on demand.  Records are serialised up
front and written with a single call so a failed request never leaves
a partial line behind.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import HTTPException

from ..config import get_settings

logger = logging.getLogger(__name__)


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """Return an RFC 3339 timestamp in UTC with second precision."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def append_environment(
    environment: Dict[str, Any], log_path: Optional[Path] = None
) -> Dict[str, Any]:
    """Append ``environment`` to the environment log.

    Args:
        environment: Decoded JSON object supplied by the client.
        log_path: Override for the configured log file.

    Returns:
        The record that was written.

    Raises:
        HTTPException: 400 if the record holds values JSON cannot
            represent (NaN, infinities), 500 if the directory cannot
            be created or the file cannot be opened or written.
    """
    path = log_path or get_settings().env_log_file
    record = {"timestamp": utc_timestamp(), "environment": environment}
    try:
        line = json.dumps(record, separators=(",", ":"), allow_nan=False) + "\n"
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"invalid JSON: {exc}")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        logger.exception("Could not create log directory %s", path.parent)
        raise HTTPException(status_code=500, detail="failed to prepare log directory")

    try:
        handle = path.open("a", encoding="utf-8")
    except OSError:
        logger.exception("Could not open environment log %s", path)
        raise HTTPException(status_code=500, detail="failed to open log")

    try:
        with handle:
            handle.write(line)
            handle.flush()
    except OSError:
        logger.exception("Could not write environment log %s", path)
        raise HTTPException(status_code=500, detail="failed to write log")

    logger.info("Saved environment record to %s", path)
    return record
