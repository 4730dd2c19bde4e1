"""Person Merge — tests for the partial-update merge and record serialization.

Tests cover:
    - merge_person overwrites provided fields and keeps omitted ones
    - id never changes, even when present in the changes mapping
    - Unknown keys in changes are ignored
    - to_dict omits an unset age
"""

from people_api.core.domain_types import PersonId
from people_api.core.person import Person, merge_person


def _ana() -> Person:
    return Person(id=PersonId(1), name="Ana", email="ana@x.com", age=30)


def test_merge_overwrites_only_provided_fields():
    merged = merge_person(_ana(), {"age": 31})
    assert merged == Person(id=PersonId(1), name="Ana", email="ana@x.com", age=31)


def test_merge_multiple_fields():
    merged = merge_person(_ana(), {"name": "Ana Maria", "email": "am@x.com"})
    assert merged.name == "Ana Maria"
    assert merged.email == "am@x.com"
    assert merged.age == 30


def test_merge_never_touches_id():
    merged = merge_person(_ana(), {"id": 99, "name": "Bea"})
    assert merged.id == 1
    assert merged.name == "Bea"


def test_merge_ignores_unknown_keys():
    merged = merge_person(_ana(), {"nickname": "Aninha"})
    assert merged == _ana()
    assert not hasattr(merged, "nickname")


def test_merge_with_no_changes_returns_same_record():
    person = _ana()
    assert merge_person(person, {}) is person


def test_merge_returns_new_record_and_leaves_original_intact():
    person = _ana()
    merged = merge_person(person, {"age": 40})
    assert merged is not person
    assert person.age == 30


def test_to_dict_includes_age_when_set():
    assert _ana().to_dict() == {"id": 1, "name": "Ana", "email": "ana@x.com", "age": 30}


def test_to_dict_omits_unset_age():
    person = Person(id=PersonId(2), name="Bea", email="bea@x.com")
    assert person.to_dict() == {"id": 2, "name": "Bea", "email": "bea@x.com"}
