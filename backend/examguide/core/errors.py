"""Error Hierarchy: typed, categorized exceptions for every failure the API reports.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input errors are 400, missing records 404, an unready store 503, store and
      unexpected failures 500
    - to_response() is the only error envelope: every status shares the same keys
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ExamGuideError base: one global handler catches all
    - ErrorContext as dataclass: carries request-level detail without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    UNAVAILABLE = "unavailable"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request-level context attached to an error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    exam_name: str | None = None
    field: str | None = None


@dataclass(frozen=True)
class FieldIssue:
    """One invalid field: dotted location, message, machine-readable type."""
    field: str
    message: str
    type: str = "value_error"

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message, "type": self.type}


class ExamGuideError(Exception):
    """Base exception for all exam guide errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: list[FieldIssue] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details or []

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "exam_name": self.context.exam_name,
                    "field": self.context.field,
                },
                "details": [d.to_dict() for d in self.details],
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidInputError(ExamGuideError):
    """Missing or malformed request field."""
    def __init__(
        self,
        message: str,
        field: str,
        context: ErrorContext | None = None,
        details: list[FieldIssue] | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
            details if details is not None else [FieldIssue(field, message)],
        )
        self.field = field

    @classmethod
    def from_issues(cls, issues: list[FieldIssue]) -> "InvalidInputError":
        """One error for a whole set of schema failures; the first names the field."""
        first = issues[0].field if issues else "body"
        return cls("Invalid request data", first, details=issues)


class ResourceNotFoundError(ExamGuideError):
    """Requested record does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class ServiceUnavailableError(ExamGuideError):
    """Store handle missing or not connected; no store access was attempted."""
    def __init__(self, reason: str = "database not connected", context: ErrorContext | None = None):
        super().__init__(
            f"Service unavailable: {reason}",
            "SERVICE_UNAVAILABLE", ErrorCategory.UNAVAILABLE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.reason = reason


class StoreError(ExamGuideError):
    """Store operation failed during an otherwise valid request."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class InternalError(ExamGuideError):
    """Anything not covered above; the message is always generic."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
