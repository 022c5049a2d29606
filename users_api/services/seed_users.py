"""Development seed: a handful of sample users for an empty table."""

import logging

from sqlalchemy import func, select

from users_api.infrastructure.database import DatabaseSessionManager
from users_api.models.user import User

logger = logging.getLogger(__name__)

SAMPLE_USERS = (
    {"name": "Alice Johnson", "email": "alice@example.com", "age": 32},
    {"name": "Bob Smith", "email": "bob@example.com", "age": 45},
    {"name": "Carol Williams", "email": "carol@example.com", "age": 28},
    {"name": "David Brown", "email": "david@example.com", "age": 39},
    {"name": "Eva Davis", "email": "eva@example.com", "age": 24},
)


async def seed_database(db_manager: DatabaseSessionManager) -> int:
    """Insert SAMPLE_USERS when the table is empty. Returns rows inserted."""
    async with db_manager.session() as db:
        count = await db.scalar(select(func.count()).select_from(User))
        if count:
            logger.info("Database already seeded, skipping seed operation")
            return 0

        db.add_all([User(**sample) for sample in SAMPLE_USERS])
        await db.commit()
    logger.info("Database seeded successfully with sample data")
    return len(SAMPLE_USERS)
