from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI

from .api import create_api_app
from .config import Settings
from .core.registry import REGISTRY, InMemoryRegistry
from .web import mount_frontend

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, registry: InMemoryRegistry = REGISTRY) -> FastAPI:
    """Create the full app: API + (optional) built frontend.

    Logging is left to the caller (`run()`, the CLI, or uvicorn itself).
    """

    settings = settings or Settings.from_env()

    app = create_api_app(settings, registry)

    if settings.frontend_dist:
        # A configured but missing dist is a deployment mistake; fail loudly.
        mount_frontend(app, Path(settings.frontend_dist))
        logger.info("Serving frontend from %s", settings.frontend_dist)

    return app


# Convenience for uvicorn: `uvicorn taxreg.server:app`
app = create_app()
