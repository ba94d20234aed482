"""Error Hierarchy: typed, categorized exceptions for every data-dip failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
      and the HTTP status it maps to
    - to_plain_text() produces the connector-facing body; to_response() the JSON envelope
    - Client errors (400-level) never carry stack traces or internal state

Design Decisions:
    - Single hierarchy with DataDipError base: one FastAPI handler catches all
      (ADR: uniform error shape)
    - Plain-text rendering is the default on the wire: the connector contract
      expects a bare error line, not a JSON envelope
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    NOT_IMPLEMENTED = "not_implemented"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for log correlation."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    route: str | None = None
    debug_info: dict[str, Any] | None = None


class DataDipError(Exception):
    """Base exception for all data-dip mock errors."""

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

    def to_plain_text(self) -> str:
        """Body written to the connector: the error text on a single line."""
        return f"{self.message}\n"

    def to_response(self) -> dict:
        """Convert to the JSON error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "route": self.context.route,
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class RequestDecodeError(DataDipError):
    """Request body is not a valid JSON document for the route's request type."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "REQUEST_DECODE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Stub Routes (500-level) ────────────────────────────────────

class EndpointNotImplementedError(DataDipError):
    """Route is part of the connector contract but has no canned reply."""
    def __init__(self, route: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.route = route
        super().__init__(
            f"{route} is not implemented",
            "NOT_IMPLEMENTED", ErrorCategory.NOT_IMPLEMENTED,
            ErrorSeverity.INFO, ctx, 501,
        )

    def to_plain_text(self) -> str:
        """Stubs echo their status code, nothing else."""
        return f"{self.http_status}\n"
