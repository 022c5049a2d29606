"""Domain Types: the user entity and its input shapes as plain values.

Invariants:
    - UserRecord is immutable; layers exchange records, never ORM objects
    - UserRecord timestamps are timezone-aware UTC datetimes
    - UserPatch uses None for "not supplied"; assignments() yields supplied fields only
    - Ids above MAX_USER_ID cannot exist in storage
    - NewUser carries exactly the client-settable fields (no id, no timestamps)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)

# Largest id the users.id column can hold (INTEGER is int4 on PostgreSQL).
MAX_USER_ID = 2**31 - 1


# ─── Entity ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class UserRecord:
    """A persisted user as seen by the service layer."""
    id: UserId
    name: str
    email: str
    age: int | None
    created_at: datetime
    updated_at: datetime


# ─── Inputs ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class NewUser:
    """Client-supplied fields for a user that does not exist yet."""
    name: str
    email: str
    age: int | None = None


@dataclass(frozen=True)
class UserPatch:
    """Optional-field diff applied by an update."""
    name: str | None = None
    email: str | None = None
    age: int | None = None

    def assignments(self) -> dict[str, Any]:
        """Return only the fields that were supplied, keyed by column attribute."""
        supplied = {"name": self.name, "email": self.email, "age": self.age}
        return {key: value for key, value in supplied.items() if value is not None}

    def is_empty(self) -> bool:
        return not self.assignments()
