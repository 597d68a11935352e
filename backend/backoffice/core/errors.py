"""Error Hierarchy — typed, categorized exceptions for every backoffice failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - DomainError subclasses (400-level) are turned into terminal responses by the
      pipeline executor; infrastructure errors (500-level) propagate to the app handler
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BackofficeError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ConflictError maps to 400, not 409: existing clients treat a blocked
      delete as a bad request
"""

from dataclasses import dataclass, field
from enum import Enum
from collections.abc import Iterable, Mapping
from typing import Any
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
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    identifier: str | None = None
    details: list[dict[str, Any]] | None = None


class BackofficeError(Exception):
    """Base exception for all backoffice errors."""

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
        error = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
            "context": {
                "resource": self.context.resource,
                "identifier": self.context.identifier,
            },
        }
        if self.context.details:
            error["details"] = self.context.details
        return {"error": error}


# ─── Domain Errors (400-level) ──────────────────────────────────

class DomainError(BackofficeError):
    """Client-caused failure that terminates a pipeline with a response."""


class ValidationError(DomainError):
    """Missing or malformed required field, or malformed path identifier."""
    def __init__(
        self,
        message: str,
        resource: str | None = None,
        details: list[dict[str, Any]] | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING,
            ErrorContext(resource=resource, details=details), 400,
        )


class NotFoundError(DomainError):
    """Identifier does not resolve to a stored row."""
    def __init__(self, resource: str, identifier: object):
        super().__init__(
            f"{resource} '{identifier}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING,
            ErrorContext(resource=resource, identifier=str(identifier)), 404,
        )


class ConflictError(DomainError):
    """Deletion blocked because dependent rows still reference the target."""
    def __init__(self, resource: str, identifier: object, dependents: str):
        super().__init__(
            f"{resource} '{identifier}' still has {dependents}",
            "DEPENDENTS_EXIST", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING,
            ErrorContext(resource=resource, identifier=str(identifier)), 400,
        )
        self.dependents = dependents


# ─── Infrastructure Errors (500-level) ──────────────────────────

class PersistenceError(BackofficeError):
    """Underlying store failed or returned an inconsistent result."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "PERSISTENCE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class IntegrityViolationError(PersistenceError):
    """Store rejected a write because a constraint (e.g. foreign key) failed."""


class PipelineExhaustedError(BackofficeError):
    """Every stage proceeded and none produced a response."""
    def __init__(self, stage_count: int):
        super().__init__(
            f"Pipeline of {stage_count} stage(s) ended without a response",
            "PIPELINE_EXHAUSTED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, None, 500,
        )


class UnexpectedError(BackofficeError):
    """Stand-in for an exception nothing else handled; carries no internals."""
    def __init__(self):
        super().__init__(
            "An unexpected error occurred", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, None, 500,
        )


def field_details(errors: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Flatten pydantic-style error entries into ValidationError details."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in errors
    ]
