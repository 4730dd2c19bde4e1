"""Person Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - PersonCreate: name 3-120 chars (after strip), email required, age 0-130 optional
    - PersonUpdate: every field optional, at least one must be provided
    - PersonIdParams: id is a positive integer written in decimal digits
    - Unknown keys are ignored (dropped from the sanitized value)
    - Explicit null is rejected: a field may be omitted, never cleared
    - Email is checked for syntax only and kept as sent (after strip)
    - Booleans are not ages

Design Decisions:
    - field_validator(mode="before") for strip: runs before length/format checks
    - Bounds imported from core.domain_types: single source of truth for limits
    - email-validator called directly instead of EmailStr: EmailStr accepts
      "Name <addr>" and lowercases the domain
"""

import re
from typing import Annotated, Any

from email_validator import EmailNotValidError, validate_email
from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from people_api.core.domain_types import AGE_MAX, AGE_MIN, NAME_MAX_LENGTH, NAME_MIN_LENGTH

_DECIMAL_ID = re.compile(r"[0-9]+")


def _strip_text(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip()
    return value


def _reject_null(value: Any) -> Any:
    if value is None:
        raise ValueError("must not be null")
    return value


def _check_age(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("must be an integer")
    return _reject_null(value)


def _check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"must be a valid email address: {exc}") from exc
    return value


Email = Annotated[str, AfterValidator(_check_email), Field(json_schema_extra={"format": "email"})]


class PersonCreate(BaseModel):
    """Person creation — validates name length, email syntax and age range."""
    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "examples": [{"name": "Ana Silva", "email": "ana@example.com", "age": 30}],
        },
    )

    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    email: Email
    age: int | None = Field(None, ge=AGE_MIN, le=AGE_MAX)

    @field_validator("name", "email", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Any:
        return _strip_text(v)

    @field_validator("age", mode="before")
    @classmethod
    def check_age(cls, v: Any) -> Any:
        return _check_age(v)


class PersonUpdate(BaseModel):
    """Partial update — same rules as creation, all optional, never empty."""
    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"examples": [{"age": 31}]},
    )

    name: str | None = Field(None, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    email: Email | None = None
    age: int | None = Field(None, ge=AGE_MIN, le=AGE_MAX)

    @field_validator("name", "email", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Any:
        return _reject_null(_strip_text(v))

    @field_validator("age", mode="before")
    @classmethod
    def check_age(cls, v: Any) -> Any:
        return _check_age(v)

    @model_validator(mode="after")
    def require_one_field(self):
        if not self.model_fields_set:
            raise ValueError("at least one of name, email, age must be provided")
        return self

    def changes(self) -> dict[str, Any]:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class PersonIdParams(BaseModel):
    """Path parameters for id-addressed routes."""
    id: int = Field(gt=0)

    @field_validator("id", mode="before")
    @classmethod
    def decimal_digits_only(cls, v: Any) -> Any:
        # int() would also take "+1" and "1_0"
        if isinstance(v, bool):
            raise ValueError("must be an integer")
        if isinstance(v, str) and not _DECIMAL_ID.fullmatch(v):
            raise ValueError("must be a positive integer")
        return v


# --- Response documentation ---------------------------------------------------

class PersonResponse(BaseModel):
    """Stored person as returned by the API (age omitted when unset)."""
    id: int
    name: str
    email: str
    age: int | None = None


class FieldErrorResponse(BaseModel):
    field: str
    message: str


class MessageResponse(BaseModel):
    """Error envelope for 404 responses."""
    message: str


class ValidationErrorResponse(BaseModel):
    """Error envelope for 400 responses."""
    message: str
    errors: list[FieldErrorResponse]


class InternalErrorResponse(BaseModel):
    """Error envelope for 500 responses."""
    message: str
    detail: str
