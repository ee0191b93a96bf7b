from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_ADMIN = "0x00000000000000000000000000000000000000a1"


@dataclass(frozen=True)
class Settings:
    url: str
    host: str
    port: int
    admin: str
    log_level: str


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def load_settings() -> Settings:
    raw_port = _getenv("DOCLEDGER_PORT", "8000")
    try:
        port = int(raw_port)
    except ValueError as ex:
        raise ValueError(f"DOCLEDGER_PORT must be an integer, got {raw_port!r}") from ex
    if port < 0 or port > 65535:
        raise ValueError(f"DOCLEDGER_PORT out of range: {port}")

    return Settings(
        url=_getenv("DOCLEDGER_URL", ""),
        host=_getenv("DOCLEDGER_HOST", "127.0.0.1"),
        port=port,
        admin=_getenv("DOCLEDGER_ADMIN", DEFAULT_ADMIN),
        log_level=_getenv("DOCLEDGER_LOG_LEVEL", "info").lower(),
    )
