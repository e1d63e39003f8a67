"""
User repository.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..base import utc_now_naive
from ..entities.users import User
from .base import AsyncCrudRepository


class UserRepository(AsyncCrudRepository[User]):
    """Repository for marketplace users."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def upsert(
        self,
        user_id: str,
        *,
        email: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        profile_image_url: Optional[str] = None,
    ) -> User:
        """Insert the user or refresh its identity fields, leaving the marketplace profile alone.

        Args:
            user_id: Identity provider subject
            email: Email claim
            first_name: Given name claim
            last_name: Family name claim
            profile_image_url: Picture claim

        Returns:
            The persisted user
        """
        user = await self.get_by_id(user_id)
        if user is None:
            user = User(id=user_id)
        user.email = email
        user.first_name = first_name
        user.last_name = last_name
        user.profile_image_url = profile_image_url
        user.updated_at = utc_now_naive()
        return await self.update(user)
