"""In-Memory Person Store — volatile, ordered collection with monotonic id assignment.

Invariants:
    - ids start at 1 and only increase; a removed id is never handed out again
    - list() preserves insertion order of live records and returns a copy
    - replace() keeps the record's position and its id
    - Every mutation runs under one lock

Design Decisions:
    - One store instance per app, created in create_app() and injected via app.state
      (state lost on restart, acceptable: no durability requirement)
    - Linear scans: collection sizes are small, order matters more than lookup speed
    - threading.Lock even though handlers run on one event loop: keeps the store
      correct if an endpoint is ever declared sync and moved to the threadpool
"""

import dataclasses
import logging
import threading
from typing import Any, Mapping

from people_api.core.domain_types import PersonId
from people_api.core.person import Person

logger = logging.getLogger(__name__)


class InMemoryPersonStore:
    """Process-lifetime person collection — implements PersonRepository."""

    def __init__(self) -> None:
        self._people: list[Person] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._people)

    def list(self) -> list[Person]:
        return list(self._people)

    def get(self, person_id: PersonId) -> Person | None:
        return next((p for p in self._people if p.id == person_id), None)

    def insert(self, fields: Mapping[str, Any]) -> Person:
        """Assign the next id, append and return the new record."""
        with self._lock:
            person = Person(
                id=PersonId(self._next_id),
                name=fields["name"],
                email=fields["email"],
                age=fields.get("age"),
            )
            self._next_id += 1
            self._people.append(person)
        logger.debug("Person inserted", extra={"person_id": person.id})
        return person

    def replace(self, person_id: PersonId, person: Person) -> Person | None:
        """Swap the stored record in place; the stored id always wins."""
        with self._lock:
            index = self._index_of(person_id)
            if index is None:
                return None
            if person.id != person_id:
                person = dataclasses.replace(person, id=person_id)
            self._people[index] = person
        return person

    def remove(self, person_id: PersonId) -> bool:
        with self._lock:
            index = self._index_of(person_id)
            if index is None:
                return False
            del self._people[index]
        logger.debug("Person removed", extra={"person_id": person_id})
        return True

    def reset(self) -> None:
        """Drop every record and restart ids at 1 (test isolation only)."""
        with self._lock:
            self._people.clear()
            self._next_id = 1

    def _index_of(self, person_id: PersonId) -> int | None:
        for index, person in enumerate(self._people):
            if person.id == person_id:
                return index
        return None
