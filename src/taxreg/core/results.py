from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class ErrorKind(str, Enum):
    DUPLICATE_KEY = "duplicate_key"


@dataclass(frozen=True)
class Ok:
    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed insert. `message` is meant to be shown to a human as-is."""

    message: str
    kind: ErrorKind = ErrorKind.DUPLICATE_KEY

    @property
    def ok(self) -> bool:
        return False


InsertResult = Union[Ok, Err]
