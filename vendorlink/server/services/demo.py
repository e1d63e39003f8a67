"""
Demo data.

Demo deployments skip the identity provider and serve every request as one
seeded user who can both buy and sell.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from vendorlink.core.database.entities import Category, User
from vendorlink.core.database.repositories import CategoryRepository, UserRepository
from vendorlink.core.logging_config import get_logger
from vendorlink.core.models.domain import UserRole
from vendorlink.server.core import constant

logger = get_logger(__name__)


async def seed_demo_data(session: AsyncSession) -> User:
    """Create the demo user and demo category when missing and return the demo user."""
    users = UserRepository(session)
    user = await users.get_by_id(constant.DEMO_USER_ID)
    if user is None:
        user = await users.create(
            User(
                id=constant.DEMO_USER_ID,
                email=constant.DEMO_USER_EMAIL,
                first_name="Demo",
                last_name="User",
                role=UserRole.both.value,
                business_name="Demo Business",
                is_verified=True,
            )
        )
        logger.info("Seeded demo user")

    categories = CategoryRepository(session)
    if await categories.get_by_name(constant.DEMO_CATEGORY_NAME) is None:
        await categories.create(
            Category(name=constant.DEMO_CATEGORY_NAME, description="Products listed from the demo account")
        )
        logger.info("Seeded demo category")
    return user
