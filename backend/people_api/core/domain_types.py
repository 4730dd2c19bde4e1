"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PersonId wraps int and is always >= 1 once assigned by the store
    - Field bounds (name length, age range) defined once here and reused by schemas
    - All operation names encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log records without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PersonId = NewType("PersonId", int)


# ─── Field Bounds ────────────────────────────────────────────────

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 120
AGE_MIN = 0
AGE_MAX = 130

RESOURCE_PERSON = "Person"


# ─── Enums ───────────────────────────────────────────────────────

class Operation(str, Enum):
    """Resource operations — used in not-found messages and log records."""
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
