"""Person Service — tests for outcome selection per operation.

Tests cover:
    - create returns Ok(201) with a fresh id; list shows it appended last
    - get/update/delete on absent ids return NotFound naming the id
    - invalid ids and bodies return Invalid before the store is touched
    - update merges partially and reports id and body errors together
    - delete is not idempotent: the second call is NotFound
"""

import pytest

from people_api.core.person import Person
from people_api.core.results import Invalid, NotFound, Ok


def _create(service, **fields) -> Person:
    body = {"name": "Ana Silva", "email": "ana@example.com", **fields}
    outcome = service.create_person(body)
    assert isinstance(outcome, Ok)
    return outcome.value


def _fields(outcome: Invalid) -> set[str]:
    return {e.field for e in outcome.errors}


def test_list_starts_empty(service):
    outcome = service.list_people()
    assert outcome == Ok([])


def test_create_returns_201_with_assigned_id(service):
    outcome = service.create_person({"name": "Ana Silva", "email": "ana@example.com"})
    assert isinstance(outcome, Ok)
    assert outcome.status == 201
    assert outcome.value.to_dict() == {"id": 1, "name": "Ana Silva", "email": "ana@example.com"}


def test_create_ids_strictly_increase_and_list_appends(service):
    previous = []
    for n in range(4):
        person = _create(service, name=f"Person {n}")
        assert all(person.id > p.id for p in previous)
        previous.append(person)
        assert service.list_people().value[-1] == person


def test_create_missing_email_is_invalid(service, store):
    outcome = service.create_person({"name": "Ana Silva"})
    assert isinstance(outcome, Invalid)
    assert "email" in _fields(outcome)
    assert len(store) == 0


def test_create_drops_unknown_fields(service):
    person = _create(service, id=42, role="admin")
    assert person.id == 1
    assert "role" not in person.to_dict()


def test_get_round_trip(service):
    created = _create(service)
    assert service.get_person("1") == Ok(created)


@pytest.mark.parametrize("operation", ["get", "update", "delete"])
def test_absent_id_is_not_found(service, operation):
    _create(service)
    if operation == "get":
        outcome = service.get_person("77")
    elif operation == "update":
        outcome = service.update_person("77", {"age": 5})
    else:
        outcome = service.delete_person("77")
    assert outcome == NotFound("Person", 77, operation)
    assert "77" in outcome.to_error().message


@pytest.mark.parametrize("raw_id", ["abc", "0", "-1"])
def test_invalid_id_is_invalid(service, raw_id):
    outcome = service.get_person(raw_id)
    assert isinstance(outcome, Invalid)
    assert _fields(outcome) == {"id"}


def test_partial_update_keeps_other_fields(service):
    _create(service, name="Ana", email="ana@x.com", age=30)
    outcome = service.update_person("1", {"age": 31})
    assert isinstance(outcome, Ok)
    assert outcome.status == 200
    assert outcome.value.to_dict() == {"id": 1, "name": "Ana", "email": "ana@x.com", "age": 31}
    assert service.get_person("1").value == outcome.value


def test_update_empty_body_is_invalid(service):
    _create(service)
    outcome = service.update_person("1", {})
    assert isinstance(outcome, Invalid)


def test_update_reports_id_and_body_errors_together(service):
    outcome = service.update_person("zero", {"name": "Al"})
    assert isinstance(outcome, Invalid)
    assert _fields(outcome) == {"id", "name"}


def test_update_validates_body_before_lookup(service):
    outcome = service.update_person("99", {})
    assert isinstance(outcome, Invalid)


def test_update_strips_unknown_fields(service):
    _create(service)
    outcome = service.update_person("1", {"age": 20, "id": 5, "nickname": "Aninha"})
    assert outcome.value.to_dict() == {
        "id": 1, "name": "Ana Silva", "email": "ana@example.com", "age": 20,
    }


def test_delete_then_delete_again(service):
    _create(service)
    assert service.delete_person("1") == Ok(None, status=204)
    assert service.delete_person("1") == NotFound("Person", 1, "delete")
    assert service.list_people().value == []
