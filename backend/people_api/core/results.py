"""Service Outcomes — tagged result type returned by the resource service.

Invariants:
    - Exactly one of Ok, Invalid, NotFound describes each finished request
    - Ok carries the HTTP status chosen by the operation (200, 201, 204)
    - Invalid carries every field error found, never a partial list

Design Decisions:
    - Return values over exceptions for expected failures: the route layer
      matches on the outcome, the exception handlers only see real defects
    - Frozen dataclasses so outcomes can be compared directly in tests
"""

from dataclasses import dataclass, field
from typing import Any, Union

from people_api.core.errors import (
    FieldError,
    PeopleApiError,
    RequestValidationFailed,
    ResourceNotFoundError,
)


@dataclass(frozen=True)
class Ok:
    """Operation succeeded."""
    value: Any = None
    status: int = 200


@dataclass(frozen=True)
class Invalid:
    """Input failed validation before any business logic ran."""
    errors: list[FieldError] = field(default_factory=list)

    def to_error(self) -> PeopleApiError:
        return RequestValidationFailed(self.errors)


@dataclass(frozen=True)
class NotFound:
    """An id-addressed operation found no matching record."""
    resource: str
    resource_id: int
    operation: str

    def to_error(self) -> PeopleApiError:
        return ResourceNotFoundError(self.resource, self.resource_id, self.operation)


Outcome = Union[Ok, Invalid, NotFound]
