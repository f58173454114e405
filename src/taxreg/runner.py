from __future__ import annotations

import contextlib
import logging
import socket
import threading
import time
import webbrowser
from dataclasses import dataclass

import uvicorn

from .client import TaxRegistryClient
from .config import Settings
from .core.records import TaxPayer
from .core.registry import REGISTRY
from .core.results import InsertResult
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaxRegistryServer:
    host: str
    port: int
    url: str

    def add_taxpayer(self, tid: int, first_name: str, last_name: str, address: str) -> InsertResult:
        """Insert directly into the in-process registry."""
        return REGISTRY.insert(tid, first_name, last_name, address)

    def get_taxpayers(self) -> list[TaxPayer]:
        return REGISTRY.list_all()

    def search_taxpayer(self, tid: int) -> TaxPayer | None:
        return REGISTRY.search(tid)

    def as_client(self) -> TaxRegistryClient:
        return TaxRegistryClient(self.url.rstrip("/"))


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def _normalize_base_url(url: str) -> str:
    url = url.strip()
    if not url:
        return ""
    # Allow passing just host:port.
    if "://" not in url:
        url = "http://" + url
    return url.rstrip("/")


def _wait_until_alive(client: TaxRegistryClient, *, timeout_s: float) -> bool:
    deadline = time.monotonic() + timeout_s
    while time.monotonic() < deadline:
        if client.is_alive():
            return True
        time.sleep(0.05)
    return False


def run(
    *,
    host: str | None = None,
    port: int = 0,
    open_browser: bool = False,
    log_level: str | None = None,
    access_log: bool = False,
    new_server: bool = False,
    connect_timeout_s: float = 0.2,
    startup_timeout_s: float = 10.0,
) -> TaxRegistryServer | TaxRegistryClient:
    """Start taxreg with a single Python call, or attach to one already running.

    Behavior:
    - If TAXREG_URL is set and reachable, return a client attached to it unless
      `new_server=True`.
    - Otherwise, if `port != 0` and a server already answers at http://{host}:{port},
      attach to it unless `new_server=True`.
    - Otherwise start uvicorn in a daemon thread and return a `TaxRegistryServer`.

    Notes:
    - `port=0` means "pick a free port", so there's nothing to attach to.
    - Uvicorn's access log is off by default because UIs poll `/api/events`.
    """

    settings = Settings.from_env()
    host = host or settings.host
    log_level = log_level or settings.log_level

    env_url = _normalize_base_url(settings.url)

    # 1) Try attaching to an explicitly provided server.
    if env_url and not new_server:
        client = TaxRegistryClient(env_url)
        if client.is_alive(timeout_s=connect_timeout_s):
            logger.info("Attached to existing server at %s", env_url)
            if open_browser:
                webbrowser.open(env_url + "/")
            return client

    # 2) Try attaching to host/port if they are explicitly chosen.
    if port != 0 and not new_server:
        default_url = _normalize_base_url(f"http://{host}:{port}")
        client = TaxRegistryClient(default_url)
        if client.is_alive(timeout_s=connect_timeout_s):
            logger.info("Attached to existing server at %s", default_url)
            if open_browser:
                webbrowser.open(default_url + "/")
            return client

    # 3) Start a fresh server.
    setup_logging(log_level)

    if port == 0:
        port = _find_free_port(host)

    # Imported here so `import taxreg` does not build an app (or read frontend settings).
    from .server import create_app

    app = create_app(settings)

    config = uvicorn.Config(app, host=host, port=port, log_level=log_level, access_log=access_log)
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    url = f"http://{host}:{port}/"
    if not _wait_until_alive(TaxRegistryClient(url), timeout_s=startup_timeout_s):
        raise RuntimeError(f"taxreg server did not become ready at {url} within {startup_timeout_s}s")
    logger.info("taxreg server listening on %s", url)

    if open_browser:
        webbrowser.open(url)

    return TaxRegistryServer(host=host, port=port, url=url)
