from __future__ import annotations

from .records import TaxPayer, normalize_text, normalize_tid
from .registry import REGISTRY, InMemoryRegistry
from .results import Err, ErrorKind, InsertResult, Ok

__all__ = [
    "TaxPayer",
    "normalize_tid",
    "normalize_text",
    "InMemoryRegistry",
    "REGISTRY",
    "Ok",
    "Err",
    "ErrorKind",
    "InsertResult",
]
