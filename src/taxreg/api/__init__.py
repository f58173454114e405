from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import Settings
from ..core.registry import REGISTRY, InMemoryRegistry
from .routes import mount_taxpayers_api


def create_api_app(settings: Settings | None = None, registry: InMemoryRegistry = REGISTRY) -> FastAPI:
    settings = settings or Settings.from_env()
    app = FastAPI(title="taxreg", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    mount_taxpayers_api(app, registry)

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/api/events")
    def events() -> dict[str, int]:
        # Minimal polling endpoint.
        return {"globalRevision": registry.global_revision(), "count": len(registry)}

    return app


__all__ = ["create_api_app", "mount_taxpayers_api"]
