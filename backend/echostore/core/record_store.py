"""Record Store — process-lifetime, in-memory mapping of identifiers to records.

Invariants:
    - One store per application instance (app.state.store), never module-level
    - Every read and write happens under the store lock
    - insert() never overwrites: an existing key raises IdentifierCollisionError
    - snapshot() returns a copy; callers cannot mutate the store through it

Design Decisions:
    - threading.Lock over asyncio.Lock: critical sections never await, and the
      lock also covers handlers FastAPI runs in its threadpool
    - No eviction, no persistence: records live as long as the process
"""

import threading
from typing import Iterator

from echostore.core.domain_types import Record, RecordId
from echostore.core.errors import IdentifierCollisionError
from echostore.core.identifiers import IdentifierFactory


class RecordStore:
    """Thread-safe mapping of record identifiers to JSON object payloads."""

    def __init__(self, id_factory: IdentifierFactory | None = None):
        self._records: dict[RecordId, Record] = {}
        self._lock = threading.Lock()
        self._id_factory = id_factory or IdentifierFactory()

    def create(self, payload: Record) -> tuple[RecordId, Record]:
        """Store payload under a freshly generated identifier."""
        record_id = RecordId(self._id_factory())
        self.insert(record_id, payload)
        return record_id, payload

    def insert(self, record_id: RecordId, payload: Record) -> None:
        with self._lock:
            if record_id in self._records:
                raise IdentifierCollisionError(record_id)
            self._records[record_id] = payload

    def get(self, record_id: RecordId) -> Record | None:
        with self._lock:
            return self._records.get(record_id)

    def snapshot(self) -> dict[RecordId, Record]:
        """Shallow copy of all records, in insertion order."""
        with self._lock:
            return dict(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._records

    def __iter__(self) -> Iterator[RecordId]:
        return iter(self.snapshot())
