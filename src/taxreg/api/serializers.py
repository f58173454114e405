from __future__ import annotations

from typing import Any

from ..core.records import TaxPayer, normalize_text


def taxpayer_to_item(tp: TaxPayer) -> dict[str, Any]:
    return {
        "tid": int(tp.id),
        "firstName": tp.first_name,
        "lastName": tp.last_name,
        "address": tp.address,
    }


def taxpayer_from_item(item: dict[str, Any]) -> TaxPayer:
    tid = item.get("tid")
    # Mirrors api.parsing.parse_tid; kept local so the client has no server imports.
    if isinstance(tid, str) and tid.strip().isascii() and tid.strip().isdigit():
        tid = int(tid.strip())
    if isinstance(tid, bool) or not isinstance(tid, int) or tid < 0:
        raise ValueError(f"Invalid taxpayer item: {item!r}")
    return TaxPayer(
        id=tid,
        first_name=normalize_text(item.get("firstName"), name="firstName"),
        last_name=normalize_text(item.get("lastName"), name="lastName"),
        address=normalize_text(item.get("address"), name="address"),
    )
