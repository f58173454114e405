from __future__ import annotations

import logging
import threading

from .records import TaxPayer, normalize_text, normalize_tid
from .results import Err, ErrorKind, InsertResult, Ok

logger = logging.getLogger(__name__)


class InMemoryRegistry:
    """Process-local store of taxpayer records keyed by TID.

    Every operation runs under one lock, so the duplicate check and the write
    in `insert` are a single atomic step and readers never see a half-written
    record.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        # dict keeps insertion order, which is also the listing order.
        self._records: dict[int, TaxPayer] = {}
        self._global_revision = 0

    def insert(self, tid: int, first_name: str, last_name: str, address: str) -> InsertResult:
        """Add a record unless `tid` is already taken.

        Returns `Ok()` on creation, or `Err` naming the conflicting TID. The
        existing record is left untouched on conflict.
        """

        tid = normalize_tid(tid)
        record = TaxPayer(
            id=tid,
            first_name=normalize_text(first_name, name="first_name"),
            last_name=normalize_text(last_name, name="last_name"),
            address=normalize_text(address, name="address"),
        )

        with self._lock:
            if tid in self._records:
                logger.warning("Rejected duplicate taxpayer TID %d", tid)
                return Err(
                    kind=ErrorKind.DUPLICATE_KEY,
                    message=f"TaxPayer with TID {tid} already exists",
                )
            self._records[tid] = record
            self._global_revision += 1
            logger.info("Added taxpayer TID %d", tid)
            return Ok()

    def list_all(self) -> list[TaxPayer]:
        with self._lock:
            return list(self._records.values())

    def search(self, tid: int) -> TaxPayer | None:
        tid = normalize_tid(tid)
        with self._lock:
            return self._records.get(tid)

    def global_revision(self) -> int:
        with self._lock:
            return self._global_revision

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


REGISTRY = InMemoryRegistry()
