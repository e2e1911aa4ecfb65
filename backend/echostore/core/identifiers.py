"""Record Identifiers — collision-free key generation for the record store.

Invariants:
    - A factory never returns the same identifier twice within a process
    - "timestamp" identifiers keep the YYYYMMDDHHMMSS (UTC) format; repeats
      within one second (or after the clock steps back) get a -N suffix on
      the latest second issued

Design Decisions:
    - uuid4 hex as default: no coordination needed across app instances
    - Timestamp strategy kept for clients that sort keys by creation time
"""

import threading
import uuid
from datetime import datetime, timezone
from typing import Callable

from echostore.core.domain_types import IdStrategy

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


class IdentifierFactory:
    """Generates record identifiers with the configured strategy."""

    def __init__(
        self,
        strategy: IdStrategy = IdStrategy.UUID,
        clock: Callable[[], datetime] | None = None,
    ):
        self.strategy = IdStrategy(strategy)
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._lock = threading.Lock()
        self._last_second: str | None = None
        self._sequence = 0

    def __call__(self) -> str:
        if self.strategy is IdStrategy.UUID:
            return uuid.uuid4().hex
        return self._next_timestamp_id()

    def _next_timestamp_id(self) -> str:
        with self._lock:
            second = self._clock().strftime(TIMESTAMP_FORMAT)
            # Same second, or the clock stepped back: extend the last issued second
            if self._last_second is not None and second <= self._last_second:
                self._sequence += 1
                return f"{self._last_second}-{self._sequence}"
            self._last_second = second
            self._sequence = 0
            return second
