"""User Rules: pure checks the service applies before writing.

Invariants:
    - Email comparison is exact and case-sensitive
    - The record being updated never conflicts with itself
    - Functions are pure: they read the given records and return a decision
"""

from collections.abc import Iterable

from users_api.core.domain_types import UserId, UserPatch, UserRecord


def find_email_conflict(
    users: Iterable[UserRecord], email: str, exclude_id: UserId | None = None,
) -> UserRecord | None:
    """Return the first user (other than exclude_id) already holding email."""
    for user in users:
        if user.email == email and user.id != exclude_id:
            return user
    return None


def is_email_change(existing: UserRecord, patch: UserPatch) -> bool:
    """True when the patch supplies an email different from the current one."""
    return bool(patch.email) and patch.email != existing.email
