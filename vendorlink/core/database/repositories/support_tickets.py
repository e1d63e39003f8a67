"""
Support ticket repository.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from ..entities.support_tickets import SupportTicket
from .base import AsyncCrudRepository


class SupportTicketRepository(AsyncCrudRepository[SupportTicket]):
    """Repository for support tickets."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, SupportTicket)

    async def list_for_user(self, user_id: str) -> List[SupportTicket]:
        stmt = (
            select(SupportTicket)
            .where(SupportTicket.user_id == user_id)
            .order_by(col(SupportTicket.created_at).desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_owned(self, ticket_id: str, user_id: str) -> Optional[SupportTicket]:
        stmt = select(SupportTicket).where(SupportTicket.id == ticket_id, SupportTicket.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
