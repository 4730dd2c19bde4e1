"""Error Hierarchy — typed, categorized exceptions for all People API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; anything unexpected becomes a 500
    - to_response() produces the wire envelope: {"message": ...} plus "errors" for validation
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PeopleApiError base: FastAPI global handler catches all
    - FieldError as frozen dataclass: shared by the validation layer and the envelope
"""

from dataclasses import dataclass
from enum import Enum


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
    ROUTE_NOT_FOUND = "route_not_found"
    INTERNAL = "internal"


@dataclass(frozen=True)
class FieldError:
    """One violated rule on one input field."""
    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class PeopleApiError(Exception):
    """Base exception for all People API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {"message": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

VALIDATION_FAILED_MESSAGE = "Validation failed"
ROUTE_NOT_FOUND_MESSAGE = "Route not found."
UNEXPECTED_ERROR_MESSAGE = "Unexpected error. Please try again."


class RequestValidationFailed(PeopleApiError):
    """Request input violated one or more schema rules."""
    def __init__(self, errors: list[FieldError]):
        super().__init__(
            VALIDATION_FAILED_MESSAGE, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.errors = list(errors)

    def to_response(self) -> dict:
        return {
            "message": self.message,
            "errors": [e.to_dict() for e in self.errors],
        }


class ResourceNotFoundError(PeopleApiError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: int, operation: str):
        super().__init__(
            f"Cannot {operation} {resource_type.lower()} {resource_id}: not found.",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id
        self.operation = operation


class RouteNotFoundError(PeopleApiError):
    """No route matches the request method and path."""
    def __init__(self, method: str, path: str):
        super().__init__(
            ROUTE_NOT_FOUND_MESSAGE, "ROUTE_NOT_FOUND", ErrorCategory.ROUTE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.method = method
        self.path = path


def build_internal_error_response(exc: Exception) -> dict:
    """500 envelope — the exception description only, never a traceback."""
    return {"message": UNEXPECTED_ERROR_MESSAGE, "detail": str(exc)}
