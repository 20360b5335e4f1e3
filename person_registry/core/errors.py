"""Error Hierarchy — typed, categorized exceptions for all Person Registry failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller-misuse errors derive from InvalidArgumentError (400-level, never retried)
    - Infrastructure errors (500-level) propagate to the caller; no recovery in core
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PersonRegistryError base: FastAPI global handler catches all
    - InvalidArgumentError subclasses encode the *kind* of misuse (null, validation,
      duplicate, not-found) so callers can catch either the family or one kind
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    person_id: str | None = None
    country_id: str | None = None


class PersonRegistryError(Exception):
    """Base exception for all Person Registry errors."""

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
                    "person_id": self.context.person_id,
                    "country_id": self.context.country_id,
                },
            }
        }


# ─── Caller Errors (400-level) ──────────────────────────────────

class InvalidArgumentError(PersonRegistryError):
    """A service argument is unusable. Base for every caller-misuse kind."""


class NullArgumentError(InvalidArgumentError):
    """A required request or identifier was absent."""
    def __init__(self, argument: str, context: ErrorContext | None = None):
        super().__init__(
            f"'{argument}' must not be None",
            "NULL_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.argument = argument


class ValidationFailureError(InvalidArgumentError):
    """A request field violates its declared constraint.

    details lists every violation found (field, message); it defaults to the
    single violation being raised.
    """
    def __init__(
        self,
        message: str,
        field: str,
        details: list[dict[str, str]] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field
        self.details = details or [{"field": field, "message": message}]

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["field"] = self.field
        response["error"]["details"] = self.details
        return response


class DuplicateNameError(InvalidArgumentError):
    """A country with the same name already exists."""
    def __init__(self, country_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Country name '{country_name}' already exists",
            "DUPLICATE_NAME", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.country_name = country_name


class PersonNotFoundError(InvalidArgumentError):
    """An update referenced a person that does not exist."""
    def __init__(self, person_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.person_id = person_id
        super().__init__(
            f"Person '{person_id}' does not exist",
            "PERSON_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class ResourceNotFoundError(PersonRegistryError):
    """Requested resource does not exist (route-level lookup miss)."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(PersonRegistryError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
