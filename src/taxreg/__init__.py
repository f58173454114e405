from __future__ import annotations

from .client import TaxRegistryClient
from .core import REGISTRY, Err, ErrorKind, InMemoryRegistry, InsertResult, Ok, TaxPayer
from .runner import TaxRegistryServer, run

__all__ = [
    "run",
    "TaxRegistryServer",
    "TaxRegistryClient",
    "TaxPayer",
    "InMemoryRegistry",
    "REGISTRY",
    "Ok",
    "Err",
    "ErrorKind",
    "InsertResult",
]
