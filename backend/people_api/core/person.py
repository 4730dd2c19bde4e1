"""Person Entity — the stored record and its partial-update merge.

Invariants:
    - id is assigned by the store and never changed by merge_person
    - age is optional; an unset age is omitted from the serialized record
    - merge_person only touches MUTABLE_FIELDS present in the changes mapping

Design Decisions:
    - Frozen dataclass: updates produce a new record, the stored one is replaced whole
    - Field-by-field merge over dict spreading: scalar fields only, no aliasing
"""

from dataclasses import dataclass, replace
from typing import Any, Mapping

from people_api.core.domain_types import PersonId

MUTABLE_FIELDS = ("name", "email", "age")


@dataclass(frozen=True)
class Person:
    """A registered person — pure dataclass, no IO."""
    id: PersonId
    name: str
    email: str
    age: int | None = None

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"id": self.id, "name": self.name, "email": self.email}
        if self.age is not None:
            data["age"] = self.age
        return data


def merge_person(person: Person, changes: Mapping[str, Any]) -> Person:
    """Apply a partial update: provided fields overwrite, omitted fields retain."""
    updates = {key: changes[key] for key in MUTABLE_FIELDS if key in changes}
    if not updates:
        return person
    return replace(person, **updates)
