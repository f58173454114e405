from __future__ import annotations

from typing import Any

from ..core.records import normalize_text, normalize_tid


def parse_tid(value: Any) -> int:
    """Coerce a TID from JSON or a path segment.

    Accepts a non-negative int or a string of decimal digits (big integers
    are often sent as strings by JS clients).
    """

    if value is None:
        raise ValueError("tid is required")
    if isinstance(value, str):
        v = value.strip()
        if not (v.isascii() and v.isdigit()):
            raise ValueError(f"tid must be a non-negative integer, got {value!r}")
        return int(v)
    if isinstance(value, float):
        raise TypeError("tid must be an integer, not a float")
    return normalize_tid(value)


def parse_text_field(body: dict[str, Any], key: str) -> str:
    if key not in body:
        raise ValueError(f"Missing field: {key}")
    return normalize_text(body.get(key), name=key)


def parse_taxpayer_body(body: Any) -> tuple[int, str, str, str]:
    if not isinstance(body, dict):
        raise TypeError("Request body must be a JSON object")
    return (
        parse_tid(body.get("tid")),
        parse_text_field(body, "firstName"),
        parse_text_field(body, "lastName"),
        parse_text_field(body, "address"),
    )
