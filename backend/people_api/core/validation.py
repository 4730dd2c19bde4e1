"""Validation Layer — check a candidate value against a schema, collect every violation.

Invariants:
    - validate() never raises for bad input: it returns Valid or Invalid
    - Invalid lists ALL field errors from one pass (no first-error-wins)
    - Valid.value is the sanitized model: unknown keys dropped, strings stripped
    - Errors without a field location are reported on the root field ("body" by default)

Design Decisions:
    - Pydantic model_validate as the rule engine: schemas live in schemas/, this
      module only adapts pydantic's error list to FieldError
    - Root field name is a parameter so path-parameter failures read as "id"
      (via the loc) while whole-object failures read as "body"
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel, ValidationError

from people_api.core.errors import FieldError
from people_api.core.results import Invalid

ModelT = TypeVar("ModelT", bound=BaseModel)

ROOT_FIELD = "body"


@dataclass(frozen=True)
class Valid(Generic[ModelT]):
    """Candidate satisfied every rule."""
    value: ModelT


def validate(
    schema: type[ModelT], candidate: Any, root_field: str = ROOT_FIELD,
) -> Union[Valid[ModelT], Invalid]:
    """Validate candidate against schema; return sanitized value or every error."""
    try:
        return Valid(schema.model_validate(candidate))
    except ValidationError as exc:
        return Invalid(to_field_errors(exc, root_field))


def to_field_errors(exc: ValidationError, root_field: str = ROOT_FIELD) -> list[FieldError]:
    """Flatten a pydantic ValidationError into field/message pairs."""
    return [
        FieldError(
            field=".".join(str(loc) for loc in e["loc"]) or root_field,
            message=e["msg"],
        )
        for e in exc.errors()
    ]
