from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, kw_only=True)
class TaxPayer:
    """A single taxpayer entry.

    Notes:
    - `id` is the primary key (TID) and is chosen by the caller.
    - Records are immutable; the registry never updates or deletes them.
    """

    id: int
    first_name: str
    last_name: str
    address: str


def normalize_tid(value: Any, *, name: str = "tid") -> int:
    # bool is an int subclass but never a valid TID.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be >= 0")
    return int(value)


def normalize_text(value: Any, *, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value
