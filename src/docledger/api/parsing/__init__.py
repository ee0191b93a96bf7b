from __future__ import annotations

from typing import Any

from fastapi import HTTPException, Request

from ...core.identity import normalize_identity

CALLER_HEADER = "X-Caller"


def parse_bool(value: Any, *, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        raise ValueError(f"Missing {field}")
    s = str(value).strip().lower()
    if s in {"1", "true", "yes", "on"}:
        return True
    if s in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"Invalid {field}")


def parse_cursor(value: Any) -> int:
    if value is None:
        return 0
    try:
        v = int(value)
    except Exception as ex:
        raise ValueError("Invalid after") from ex
    if v < 0:
        raise ValueError("after must be >= 0")
    return v


def require_caller(request: Request) -> str:
    """Return the authenticated caller for a mutating call.

    The hosting layer in front of the node is trusted to authenticate the caller and
    forward the identity in the `X-Caller` header.
    """

    try:
        return normalize_identity(request.headers.get(CALLER_HEADER), field=f"{CALLER_HEADER} header")
    except ValueError as e:
        raise HTTPException(status_code=401, detail={"error": "MissingCaller", "reason": str(e)})


__all__ = ["CALLER_HEADER", "parse_bool", "parse_cursor", "require_caller"]
