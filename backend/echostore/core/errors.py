"""Error Hierarchy — typed, categorized exceptions for all EchoStore failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the same Envelope shape as successful responses
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with EchoStoreError base: FastAPI global handler catches all
    - Envelope built by hand (not via schemas/): core never imports from the API layer
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    record_id: str | None = None
    debug_info: dict[str, Any] | None = None


class EchoStoreError(Exception):
    """Base exception for all EchoStore errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to an error Envelope."""
        return {
            "message": self.message,
            "status": "error",
            "timestamp": self.context.timestamp.isoformat(),
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidPayloadError(EchoStoreError):
    """Request body is not a JSON object."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"reason": reason}
        super().__init__(
            "Invalid JSON data", "INVALID_JSON", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.reason = reason


class IdentifierCollisionError(EchoStoreError):
    """Insert attempted under an identifier that is already stored."""
    def __init__(self, record_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.record_id = record_id
        super().__init__(
            f"Record '{record_id}' already exists",
            "IDENTIFIER_COLLISION", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.record_id = record_id
