"""Boundary Protocols: contracts between the service and persistence.

Invariants:
    - The service depends on UserRepository, never on SQLAlchemy
    - Absence is signalled with None / False, never with an exception
    - Infrastructure failures propagate as exceptions (logged by the implementation)

Design Decisions:
    - Protocol over ABC: structural subtyping, so tests pass a plain in-memory
      class without inheriting from anything
"""

from typing import Protocol

from users_api.core.domain_types import NewUser, UserId, UserPatch, UserRecord


class UserRepository(Protocol):
    """Contract for user persistence, implemented by infrastructure."""
    async def find_all(self) -> list[UserRecord]: ...
    async def find_by_id(self, user_id: UserId) -> UserRecord | None: ...
    async def create(self, user: NewUser) -> UserRecord: ...
    async def update(
        self, user_id: UserId, patch: UserPatch,
    ) -> UserRecord | None: ...
    async def delete(self, user_id: UserId) -> bool: ...
