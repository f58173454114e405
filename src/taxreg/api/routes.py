from __future__ import annotations

from typing import Any

from fastapi import Body, FastAPI, HTTPException
from fastapi.responses import JSONResponse

from ..core.registry import REGISTRY, InMemoryRegistry
from ..core.results import Err
from .parsing import parse_taxpayer_body, parse_tid
from .serializers import taxpayer_to_item


def mount_taxpayers_api(app: FastAPI, registry: InMemoryRegistry = REGISTRY) -> None:
    """Mount the taxpayer endpoints.

    - POST /api/taxpayers        addTaxPayer
    - GET  /api/taxpayers        getTaxPayers
    - GET  /api/taxpayers/{tid}  searchTaxPayer
    """

    @app.post("/api/taxpayers")
    def add_taxpayer(body: Any = Body(None)) -> dict[str, Any]:
        # Any JSON is accepted here so shape errors surface as 400, not 422.
        try:
            tid, first_name, last_name, address = parse_taxpayer_body(body)
        except (TypeError, ValueError) as e:
            raise HTTPException(status_code=400, detail=str(e))

        result = registry.insert(tid, first_name, last_name, address)
        if isinstance(result, Err):
            return JSONResponse(status_code=409, content={"err": result.message, "kind": result.kind.value})
        return {"ok": None}

    @app.get("/api/taxpayers")
    def get_taxpayers() -> list[dict[str, Any]]:
        return [taxpayer_to_item(tp) for tp in registry.list_all()]

    @app.get("/api/taxpayers/{tid}")
    def search_taxpayer(tid: str) -> dict[str, Any] | None:
        try:
            key = parse_tid(tid)
        except (TypeError, ValueError) as e:
            raise HTTPException(status_code=400, detail=str(e))

        tp = registry.search(key)
        if tp is None:
            return None
        return taxpayer_to_item(tp)
