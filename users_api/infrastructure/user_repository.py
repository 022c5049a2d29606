"""SQL User Repository: UserRepository implementation over async SQLAlchemy.

Invariants:
    - Every read path returns UserRecord with UTC-aware created_at/updated_at
    - update() touches only supplied fields plus updatedAt; an empty patch is a plain read
    - update() returns None when no row matched; delete() returns False when no row matched
    - Database errors are logged with context and re-raised unchanged (no envelopes here)
    - One session per operation, released before returning
    - Ids beyond the column range are answered as "no such row" without a query

Design Decisions:
    - The SET clause is a dict of mapped attributes built from UserPatch.assignments(),
      never string-built SQL
    - Re-reads use populate_existing so the returned record reflects stored values,
      not the objects still held in the identity map
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from users_api.core.domain_types import (
    MAX_USER_ID, NewUser, UserId, UserPatch, UserRecord,
)
from users_api.infrastructure.database import DatabaseSessionManager
from users_api.models.user import User

logger = logging.getLogger(__name__)


def normalize_timestamp(value: datetime | str) -> datetime:
    """Coerce a raw driver timestamp into an aware UTC datetime."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_record(row: User) -> UserRecord:
    return UserRecord(
        id=UserId(row.id),
        name=row.name,
        email=row.email,
        age=row.age,
        created_at=normalize_timestamp(row.created_at),
        updated_at=normalize_timestamp(row.updated_at),
    )


async def _select_by_id(db: AsyncSession, user_id: int) -> User | None:
    result = await db.execute(
        select(User)
        .where(User.id == user_id)
        .execution_options(populate_existing=True),
    )
    return result.scalar_one_or_none()


class SqlUserRepository:
    """Reads and writes the users table."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def find_all(self) -> list[UserRecord]:
        try:
            async with self._db.session() as db:
                result = await db.execute(select(User))
                return [to_record(row) for row in result.scalars().all()]
        except Exception as e:
            logger.error(f"Error finding all users: {e}")
            raise

    async def find_by_id(self, user_id: UserId) -> UserRecord | None:
        if user_id > MAX_USER_ID:
            return None
        try:
            async with self._db.session() as db:
                row = await _select_by_id(db, user_id)
                return to_record(row) if row else None
        except Exception as e:
            logger.error(
                f"Error finding user by id: {e}", extra={"user_id": user_id},
            )
            raise

    async def create(self, user: NewUser) -> UserRecord:
        try:
            async with self._db.session() as db:
                row = User(name=user.name, email=user.email, age=user.age)
                db.add(row)
                await db.commit()
                created = await _select_by_id(db, row.id)
                return to_record(created)
        except Exception as e:
            logger.error(f"Error creating user: {e}")
            raise

    async def update(
        self, user_id: UserId, patch: UserPatch,
    ) -> UserRecord | None:
        if user_id > MAX_USER_ID:
            return None
        if patch.is_empty():
            return await self.find_by_id(user_id)

        values = {
            getattr(User, key): value for key, value in patch.assignments().items()
        }
        values[User.updated_at] = datetime.now(timezone.utc)
        try:
            async with self._db.session() as db:
                result = await db.execute(
                    update(User).where(User.id == user_id).values(values),
                )
                await db.commit()
                if result.rowcount == 0:
                    return None
                updated = await _select_by_id(db, user_id)
                return to_record(updated) if updated else None
        except Exception as e:
            logger.error(
                f"Error updating user: {e}", extra={"user_id": user_id},
            )
            raise

    async def delete(self, user_id: UserId) -> bool:
        if user_id > MAX_USER_ID:
            return False
        try:
            async with self._db.session() as db:
                result = await db.execute(
                    delete(User).where(User.id == user_id),
                )
                await db.commit()
                return result.rowcount == 1
        except Exception as e:
            logger.error(
                f"Error deleting user: {e}", extra={"user_id": user_id},
            )
            raise
