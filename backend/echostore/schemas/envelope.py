"""Response Schemas — the uniform Envelope and the health snapshot.

Invariants:
    - Every API response except health/readiness is an Envelope
    - Envelope.data is omitted from the JSON body when absent (never null)
    - Timestamps are timezone-aware UTC, serialized as ISO-8601

Design Decisions:
    - render() drops only the top-level data key: payload contents (including
      nested nulls) pass through untouched
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from echostore.core.domain_types import EnvelopeStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Envelope(BaseModel):
    """Uniform wrapper carrying message, status, timestamp and optional payload."""
    message: str
    data: Any = None
    timestamp: datetime = Field(default_factory=_utcnow)
    status: EnvelopeStatus = EnvelopeStatus.SUCCESS

    @classmethod
    def success(cls, message: str, data: Any = None) -> "Envelope":
        return cls(message=message, data=data)

    @classmethod
    def error(cls, message: str) -> "Envelope":
        return cls(message=message, status=EnvelopeStatus.ERROR)

    def render(self) -> dict:
        """JSON-ready dict with data omitted when absent."""
        body = self.model_dump(mode="json")
        if self.data is None:
            body.pop("data")
        return body


class HealthSnapshot(BaseModel):
    """Liveness payload: constant status plus process uptime."""
    status: str = "healthy"
    timestamp: datetime = Field(default_factory=_utcnow)
    uptime: str
    uptime_seconds: float
    version: str
