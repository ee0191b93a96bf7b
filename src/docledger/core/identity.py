from __future__ import annotations

from typing import Any

NULL_IDENTITY = "0x" + "0" * 40


def is_null_identity(value: Any) -> bool:
    """Return True for the registry's "nobody" identity.

    Accepted spellings: the empty/blank string, `None`, and any `0x`-prefixed string made only of zeros.
    """

    if value is None:
        return True
    s = str(value).strip()
    if not s:
        return True
    if s[:2].lower() == "0x":
        digits = s[2:]
        return digits == "" or set(digits) == {"0"}
    return False


def normalize_identity(value: Any, *, field: str = "identity") -> str:
    if value is None:
        raise ValueError(f"Missing {field}")
    s = str(value).strip()
    if not s:
        raise ValueError(f"Missing {field}")
    return s
