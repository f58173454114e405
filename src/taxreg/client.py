from __future__ import annotations

from typing import Any

import httpx

from .api.serializers import taxpayer_from_item
from .core.records import TaxPayer, normalize_text, normalize_tid
from .core.results import Err, ErrorKind, InsertResult, Ok


class TaxRegistryClient:
    """HTTP client for a running taxreg server.

    Contract (current):
    - POST /api/taxpayers        (JSON: tid, firstName, lastName, address)
    - GET  /api/taxpayers
    - GET  /api/taxpayers/{tid}  (JSON record or null)
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        *,
        timeout_s: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_s = float(timeout_s)
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(base_url=self.base_url, timeout=self.timeout_s, transport=self._transport)

    @staticmethod
    def _raise_for_status(res: httpx.Response, what: str) -> None:
        if res.status_code >= 400:
            raise RuntimeError(f"{what} failed: {res.status_code} {res.text}")

    def add_taxpayer(self, tid: int, first_name: str, last_name: str, address: str) -> InsertResult:
        """Insert a record. Returns `Ok()` or `Err` when the TID is already taken."""

        body = {
            "tid": normalize_tid(tid),
            "firstName": normalize_text(first_name, name="first_name"),
            "lastName": normalize_text(last_name, name="last_name"),
            "address": normalize_text(address, name="address"),
        }
        with self._client() as client:
            res = client.post("/api/taxpayers", json=body)

        if res.status_code == 409:
            try:
                data: dict[str, Any] = res.json()
                return Err(
                    message=str(data["err"]),
                    kind=ErrorKind(data.get("kind", ErrorKind.DUPLICATE_KEY.value)),
                )
            except (ValueError, KeyError, TypeError, AttributeError):
                # Not a duplicate-key payload we understand.
                pass
        self._raise_for_status(res, "Add taxpayer")
        return Ok()

    def get_taxpayers(self) -> list[TaxPayer]:
        with self._client() as client:
            res = client.get("/api/taxpayers")
        self._raise_for_status(res, "List taxpayers")
        return [taxpayer_from_item(item) for item in res.json()]

    def search_taxpayer(self, tid: int) -> TaxPayer | None:
        tid = normalize_tid(tid)
        with self._client() as client:
            res = client.get(f"/api/taxpayers/{tid}")
        self._raise_for_status(res, "Search taxpayer")
        data = res.json()
        if data is None:
            return None
        return taxpayer_from_item(data)

    def is_alive(self, *, timeout_s: float = 0.2) -> bool:
        """Best-effort probe of `/healthz`."""

        try:
            with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
                r = client.get("/healthz")
                if r.status_code != 200:
                    return False
                return bool(r.json().get("ok"))
        except (httpx.HTTPError, ValueError):
            return False
