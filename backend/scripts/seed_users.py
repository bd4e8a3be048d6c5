"""
Seed initial users for development.
Run: python -m scripts.seed_users  (from backend/)
"""

import asyncio

from todo_app.core.config import settings
from todo_app.core.logging import get_logger, setup_logging
from todo_app.db.session import session_scope
from todo_app.persistence.seed_data import SEED_USERS
from todo_app.repositories.users import create_user, get_user_by_username

logger = get_logger("scripts.seed_users")


async def seed(session_factory=None) -> int:
    """Insert seed users that do not exist yet. Returns how many were created."""
    created = 0
    async with session_scope(session_factory) as session:
        for data in SEED_USERS:
            if await get_user_by_username(session, data["username"]) is not None:
                logger.info("User already present", username=data["username"])
                continue
            user = await create_user(session, **data)
            logger.info("Created user", username=user.username)
            created += 1
    logger.info("Seeding finished", created=created, total=len(SEED_USERS))
    return created


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    asyncio.run(seed())
