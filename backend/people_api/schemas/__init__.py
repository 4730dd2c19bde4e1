"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request body, path parameters)
    - Responses are documented from the same models

Design Decisions:
    - Separate from core.person: schemas are API contracts, Person is the
      stored entity (DTO/model split)
"""
