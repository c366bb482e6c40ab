"""
Entry point for the drifter backend.

Running this script with ``python run.py`` will start the FastAPI
server that hosts the health, environment and planet APIs.  The
application defined in ``backend/app/main.py`` is imported after
adjusting the Python path to include the repository root.  The bind
address comes from the ``HOST`` and ``PORT`` environment variables.
"""

from __future__ import annotations

import sys
from pathlib import Path

import logging
import uvicorn


def main() -> None:
    """Run the Uvicorn server hosting the drifter backend."""
    # Determine the repository root relative to this file and ensure it is on
    # sys.path so that ``backend`` can be imported as a package.
    repo_root = Path(__file__).resolve().parent
    if str(repo_root) not in sys.path:
        sys.path.append(str(repo_root))

    from backend.app.config import get_settings  # type: ignore

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # Import the FastAPI application.  We import inside main() to avoid
    # modifying sys.path at module import time.
    from backend.app.main import app  # type: ignore

    logging.getLogger(__name__).info(
        "Server starting on %s:%d", settings.host, settings.port
    )
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
