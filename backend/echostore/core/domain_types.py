"""Domain Types — enums and aliases shared across layers.

Invariants:
    - Enum values are the exact strings that appear on the wire or in config
"""

from enum import Enum
from typing import Any, NewType

RecordId = NewType("RecordId", str)

# Record payloads are arbitrary JSON objects; no schema is enforced
Record = dict[str, Any]


class IdStrategy(str, Enum):
    """Record identifier strategies (see core/identifiers.py)."""
    UUID = "uuid"
    TIMESTAMP = "timestamp"


class EnvelopeStatus(str, Enum):
    """Outcome carried by every response Envelope."""
    SUCCESS = "success"
    ERROR = "error"
