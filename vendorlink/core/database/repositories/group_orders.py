"""
Group order repository.

The join path is the one place two requests can race for the same row. It is
a single conditional UPDATE whose WHERE clause re-checks capacity, status and
deadline, so the database serialises concurrent joins and the caller learns
from the row count whether the slot was taken.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple

from sqlalchemy import func, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from ..base import utc_now_naive
from ..entities.group_orders import GroupOrder, GroupOrderParticipant
from .base import AsyncCrudRepository


class GroupOrderRepository(AsyncCrudRepository[GroupOrder]):
    """Repository for group orders and their participants."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, GroupOrder)

    async def list_active(self) -> List[GroupOrder]:
        """Active group orders, soonest deadline first."""
        stmt = select(GroupOrder).where(GroupOrder.status == "active").order_by(GroupOrder.deadline)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def reserve_slot(self, group_order_id: str, quantity: int, now: Optional[datetime] = None) -> bool:
        """Atomically take one participant slot and add ``quantity`` to the running total.

        Does not commit. Returns False when the group order is missing, not
        active, full or past its deadline.
        """
        now = now or utc_now_naive()
        stmt = (
            update(GroupOrder)
            .where(
                col(GroupOrder.id) == group_order_id,
                col(GroupOrder.status) == "active",
                col(GroupOrder.current_participants) < col(GroupOrder.max_participants),
                col(GroupOrder.deadline) > now,
            )
            .values(
                current_participants=col(GroupOrder.current_participants) + 1,
                current_quantity=col(GroupOrder.current_quantity) + quantity,
                updated_at=now,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def get_participant(self, group_order_id: str, vendor_id: str) -> Optional[GroupOrderParticipant]:
        stmt = select(GroupOrderParticipant).where(
            GroupOrderParticipant.group_order_id == group_order_id,
            GroupOrderParticipant.vendor_id == vendor_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def add_participant(self, participant: GroupOrderParticipant) -> GroupOrderParticipant:
        self.session.add(participant)
        await self.session.flush()
        return participant

    async def list_participants(self, group_order_id: str) -> List[GroupOrderParticipant]:
        stmt = (
            select(GroupOrderParticipant)
            .where(GroupOrderParticipant.group_order_id == group_order_id)
            .order_by(GroupOrderParticipant.joined_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_participations(self, vendor_id: str) -> int:
        stmt = select(func.count()).select_from(GroupOrderParticipant).where(GroupOrderParticipant.vendor_id == vendor_id)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def participation_prices_since(self, vendor_id: str, since: datetime) -> List[Tuple[Decimal, Decimal, int]]:
        """``(regular_price, group_price, quantity)`` of the vendor's participations joined at or after ``since``."""
        stmt = (
            select(
                GroupOrder.regular_price_per_unit,
                GroupOrder.group_price_per_unit,
                GroupOrderParticipant.quantity,
            )
            .join(GroupOrder, col(GroupOrder.id) == col(GroupOrderParticipant.group_order_id))
            .where(
                GroupOrderParticipant.vendor_id == vendor_id,
                col(GroupOrderParticipant.joined_at) >= since,
            )
        )
        result = await self.session.execute(stmt)
        return [(Decimal(regular), Decimal(group), int(qty)) for regular, group, qty in result.all()]
