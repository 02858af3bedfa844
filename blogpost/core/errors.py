"""Error Hierarchy — typed, categorized exceptions for every post service failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are caller mistakes; infrastructure errors (500-level) are critical
    - message is never empty: it is what the RPC failure response carries
    - to_response() produces the REST error envelope

Design Decisions:
    - Single hierarchy with BlogPostError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the error envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    post_id: str | None = None
    rpc_method: str | None = None
    debug_info: dict[str, Any] | None = None


class BlogPostError(Exception):
    """Base exception for all post service errors."""

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
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "post_id": self.context.post_id,
                    "rpc_method": self.context.rpc_method,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidIdentifierError(BlogPostError):
    """Identifier string is not a valid UUID. Raised before any service call."""
    def __init__(self, raw_id: str, context: ErrorContext | None = None):
        super().__init__(
            "invalid post id", "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.raw_id = raw_id


class NotFoundError(BlogPostError):
    """No live post for the id (missing and soft-deleted look the same)."""
    def __init__(self, post_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.post_id = post_id
        super().__init__(
            f"post '{post_id}' is not available",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class InvalidTargetError(BlogPostError):
    """Update requested against a missing or soft-deleted post."""
    def __init__(self, post_id: str | None = None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.post_id = post_id
        super().__init__(
            "post is not available or is deleted",
            "INVALID_TARGET", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class PersistenceError(BlogPostError):
    """Store rejected a read or write, or the operation timed out."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "PERSISTENCE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class ConfigurationError(BlogPostError):
    """A required collaborator was not supplied at construction."""
    def __init__(self, component: str, missing: list[str]):
        super().__init__(
            f"{component} is missing required collaborators: {', '.join(missing)}",
            "CONFIGURATION_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, None, 500,
        )
        self.component = component
        self.missing = missing


class InvariantViolationError(BlogPostError):
    """A layer reported failure without saying why."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVARIANT_VIOLATION", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


def require_collaborators(component: str, **collaborators: object) -> None:
    """Raise ConfigurationError naming every collaborator that is None."""
    missing = [name for name, value in collaborators.items() if value is None]
    if missing:
        raise ConfigurationError(component, missing)
