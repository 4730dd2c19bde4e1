"""Person Service — one request at a time: validate, touch the store, report an outcome.

Invariants:
    - Validation runs before any store access; an Invalid outcome means the store was not read
    - Id-addressed operations return NotFound (never raise) when the id is absent
    - update validates both the id and the body and reports all their errors together
    - The service holds the repository it was given and no other reference to the data

Design Decisions:
    - Tagged outcomes (core.results) over HTTPException: the service stays free of
      FastAPI and the route layer decides how each outcome is rendered
    - Raw input in, sanitized value out: callers pass the path string and the decoded
      JSON body untouched, this module owns the schema choice per operation
"""

import logging
from typing import Any

from people_api.core.domain_types import Operation, PersonId, RESOURCE_PERSON
from people_api.core.person import merge_person
from people_api.core.repository_protocols import PersonRepository
from people_api.core.results import Invalid, NotFound, Ok, Outcome
from people_api.core.validation import Valid, validate
from people_api.schemas.person import PersonCreate, PersonIdParams, PersonUpdate

logger = logging.getLogger(__name__)


class PersonService:
    """CRUD use cases over a PersonRepository."""

    def __init__(self, repository: PersonRepository) -> None:
        self.repository = repository

    def list_people(self) -> Outcome:
        return Ok(self.repository.list())

    def get_person(self, raw_id: Any) -> Outcome:
        checked = _validate_id(raw_id)
        if isinstance(checked, Invalid):
            return checked
        person = self.repository.get(checked)
        if person is None:
            return _not_found(checked, Operation.GET)
        return Ok(person)

    def create_person(self, body: Any) -> Outcome:
        checked = validate(PersonCreate, body)
        if isinstance(checked, Invalid):
            return checked
        person = self.repository.insert(checked.value.model_dump())
        logger.info(
            f"Person {person.id} created",
            extra={"person_id": person.id, "operation": Operation.CREATE.value},
        )
        return Ok(person, status=201)

    def update_person(self, raw_id: Any, body: Any) -> Outcome:
        checked_id = _validate_id(raw_id)
        checked_body = validate(PersonUpdate, body)
        errors = []
        if isinstance(checked_id, Invalid):
            errors.extend(checked_id.errors)
        if isinstance(checked_body, Invalid):
            errors.extend(checked_body.errors)
        if errors:
            return Invalid(errors)

        current = self.repository.get(checked_id)
        if current is None:
            return _not_found(checked_id, Operation.UPDATE)
        merged = merge_person(current, checked_body.value.changes())
        stored = self.repository.replace(checked_id, merged)
        if stored is None:
            return _not_found(checked_id, Operation.UPDATE)
        logger.info(
            f"Person {checked_id} updated",
            extra={"person_id": checked_id, "operation": Operation.UPDATE.value},
        )
        return Ok(stored)

    def delete_person(self, raw_id: Any) -> Outcome:
        checked = _validate_id(raw_id)
        if isinstance(checked, Invalid):
            return checked
        if not self.repository.remove(checked):
            return _not_found(checked, Operation.DELETE)
        logger.info(
            f"Person {checked} deleted",
            extra={"person_id": checked, "operation": Operation.DELETE.value},
        )
        return Ok(None, status=204)


def _validate_id(raw_id: Any) -> PersonId | Invalid:
    checked = validate(PersonIdParams, {"id": raw_id}, root_field="id")
    if isinstance(checked, Valid):
        return PersonId(checked.value.id)
    return checked


def _not_found(person_id: PersonId, operation: Operation) -> NotFound:
    logger.warning(
        f"Person {person_id} not found",
        extra={"person_id": person_id, "operation": operation.value},
    )
    return NotFound(RESOURCE_PERSON, person_id, operation.value)
