from __future__ import annotations

import logging

import pytest

from taxreg.config import Settings
from taxreg.logging_config import setup_logging


def test_settings_defaults(monkeypatch) -> None:
    for name in (
        "TAXREG_HOST",
        "TAXREG_PORT",
        "TAXREG_LOG_LEVEL",
        "TAXREG_URL",
        "TAXREG_CORS_ORIGINS",
        "TAXREG_FRONTEND_DIST",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s == Settings()
    assert s.port == 8000
    assert "http://localhost:5173" in s.cors_origins


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("TAXREG_HOST", "0.0.0.0")
    monkeypatch.setenv("TAXREG_PORT", "9001")
    monkeypatch.setenv("TAXREG_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("TAXREG_URL", "http://example.invalid:1234")
    monkeypatch.setenv("TAXREG_CORS_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("TAXREG_FRONTEND_DIST", "/srv/dist")

    s = Settings.from_env()

    assert s.host == "0.0.0.0"
    assert s.port == 9001
    assert s.log_level == "debug"
    assert s.url == "http://example.invalid:1234"
    assert s.cors_origins == ("https://a.example", "https://b.example")
    assert s.frontend_dist == "/srv/dist"


def test_settings_reject_bad_port(monkeypatch) -> None:
    monkeypatch.setenv("TAXREG_PORT", "eighty")

    with pytest.raises(ValueError, match="TAXREG_PORT"):
        Settings.from_env()


def test_setup_logging_leaves_configured_root_alone() -> None:
    root = logging.getLogger()
    before = list(root.handlers)
    sentinel = logging.NullHandler()
    root.addHandler(sentinel)
    try:
        setup_logging("debug")
        assert root.handlers == before + [sentinel]
    finally:
        root.removeHandler(sentinel)


def test_setup_logging_applies_level_to_unconfigured_root(monkeypatch) -> None:
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("warning")

    assert root.level == logging.WARNING
    assert len(root.handlers) == 1


def _run_python(code: str, **env: str):
    import os
    import subprocess
    import sys

    return subprocess.run(
        [sys.executable, "-c", code],
        env={**os.environ, **env},
        capture_output=True,
        text=True,
        timeout=60,
    )


def test_import_does_not_configure_logging_or_read_frontend_settings() -> None:
    proc = _run_python(
        "import logging, taxreg; print(len(logging.getLogger().handlers))",
        TAXREG_FRONTEND_DIST="/nonexistent/dist",
        TAXREG_PORT="not-a-port",
    )

    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.strip() == "0"
