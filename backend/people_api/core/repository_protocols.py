"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - The resource service reaches storage only through PersonRepository
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous methods: the in-memory store has no IO, so no suspension
      point can interleave two operations on the event loop
"""

from typing import Any, Mapping, Protocol

from people_api.core.domain_types import PersonId
from people_api.core.person import Person


class PersonRepository(Protocol):
    """Contract for person persistence — implemented by shell."""
    def list(self) -> list[Person]: ...
    def get(self, person_id: PersonId) -> Person | None: ...
    def insert(self, fields: Mapping[str, Any]) -> Person: ...
    def replace(self, person_id: PersonId, person: Person) -> Person | None: ...
    def remove(self, person_id: PersonId) -> bool: ...
