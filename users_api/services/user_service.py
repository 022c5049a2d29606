"""User Service: business rules and translation of repository outcomes into envelopes.

Invariants:
    - Every public method returns a ServiceResponse; none raises
    - Any repository exception is logged and degraded to a generic 500 envelope
    - create() scans all users for an exact email match before inserting
    - update() checks email conflicts only when the email actually changes,
      excluding the record being updated
    - delete() success carries no payload (204)

Design Decisions:
    - No transaction around read-then-write sequences: two concurrent requests
      with the same email can both pass the check; the database unique
      constraint then fails the second insert, which surfaces as a 500 envelope
"""

import logging
from http import HTTPStatus

from users_api.core.domain_types import NewUser, UserId, UserPatch, UserRecord
from users_api.core.repository_protocols import UserRepository
from users_api.core.service_response import ServiceResponse, failure, success
from users_api.core.user_rules import find_email_conflict, is_email_change

logger = logging.getLogger(__name__)


class UserService:
    """User CRUD with existence and email-uniqueness rules."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def find_all(self) -> ServiceResponse[list[UserRecord]]:
        try:
            users = await self.repository.find_all()
            if not users:
                return failure("No Users found", None, HTTPStatus.NOT_FOUND)
            return success("Users found", users)
        except Exception as e:
            logger.error(f"Error finding all users: {e}")
            return failure(
                "An error occurred while retrieving users.",
                None, HTTPStatus.INTERNAL_SERVER_ERROR,
            )

    async def find_by_id(self, user_id: UserId) -> ServiceResponse[UserRecord]:
        try:
            user = await self.repository.find_by_id(user_id)
            if user is None:
                return failure("User not found", None, HTTPStatus.NOT_FOUND)
            return success("User found", user)
        except Exception as e:
            logger.error(
                f"Error finding user with id {user_id}: {e}",
                extra={"user_id": user_id},
            )
            return failure(
                "An error occurred while finding user.",
                None, HTTPStatus.INTERNAL_SERVER_ERROR,
            )

    async def create(self, data: NewUser) -> ServiceResponse[UserRecord]:
        try:
            users = await self.repository.find_all()
            if find_email_conflict(users, data.email):
                return failure("Email already in use", None, HTTPStatus.CONFLICT)

            user = await self.repository.create(data)
            logger.info("User created", extra={"user_id": user.id})
            return success("User created successfully", user, HTTPStatus.CREATED)
        except Exception as e:
            logger.error(f"Error creating user: {e}")
            return failure(
                "An error occurred while creating user.",
                None, HTTPStatus.INTERNAL_SERVER_ERROR,
            )

    async def update(
        self, user_id: UserId, patch: UserPatch,
    ) -> ServiceResponse[UserRecord]:
        try:
            existing = await self.repository.find_by_id(user_id)
            if existing is None:
                return failure("User not found", None, HTTPStatus.NOT_FOUND)

            if is_email_change(existing, patch):
                users = await self.repository.find_all()
                if find_email_conflict(users, patch.email, exclude_id=user_id):
                    return failure("Email already in use", None, HTTPStatus.CONFLICT)

            updated = await self.repository.update(user_id, patch)
            if updated is None:
                return failure(
                    "Failed to update user", None,
                    HTTPStatus.INTERNAL_SERVER_ERROR,
                )
            return success("User updated successfully", updated)
        except Exception as e:
            logger.error(
                f"Error updating user with id {user_id}: {e}",
                extra={"user_id": user_id},
            )
            return failure(
                "An error occurred while updating user.",
                None, HTTPStatus.INTERNAL_SERVER_ERROR,
            )

    async def delete(self, user_id: UserId) -> ServiceResponse[None]:
        try:
            existing = await self.repository.find_by_id(user_id)
            if existing is None:
                return failure("User not found", None, HTTPStatus.NOT_FOUND)

            deleted = await self.repository.delete(user_id)
            if not deleted:
                return failure(
                    "Failed to delete user", None,
                    HTTPStatus.INTERNAL_SERVER_ERROR,
                )
            return success("User deleted successfully", None, HTTPStatus.NO_CONTENT)
        except Exception as e:
            logger.error(
                f"Error deleting user with id {user_id}: {e}",
                extra={"user_id": user_id},
            )
            return failure(
                "An error occurred while deleting user.",
                None, HTTPStatus.INTERNAL_SERVER_ERROR,
            )
