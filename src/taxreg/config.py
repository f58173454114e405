from __future__ import annotations

import os
from dataclasses import dataclass, field

_DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


def _split_csv(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from `TAXREG_*` environment variables."""

    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "info"
    url: str = ""
    cors_origins: tuple[str, ...] = field(default=_DEFAULT_CORS_ORIGINS)
    frontend_dist: str = ""

    @classmethod
    def from_env(cls) -> "Settings":
        raw_port = os.getenv("TAXREG_PORT", "8000").strip()
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"TAXREG_PORT must be an integer, got {raw_port!r}") from None

        raw_origins = os.getenv("TAXREG_CORS_ORIGINS")
        origins = _split_csv(raw_origins) if raw_origins is not None else _DEFAULT_CORS_ORIGINS

        return cls(
            host=os.getenv("TAXREG_HOST", "127.0.0.1").strip() or "127.0.0.1",
            port=port,
            log_level=os.getenv("TAXREG_LOG_LEVEL", "info").strip().lower() or "info",
            url=os.getenv("TAXREG_URL", "").strip(),
            cors_origins=origins,
            frontend_dist=os.getenv("TAXREG_FRONTEND_DIST", "").strip(),
        )
