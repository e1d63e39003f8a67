"""
Order repository.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Iterable, List, Optional

from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from ..entities.orders import Order
from .base import AsyncCrudRepository


class OrderRepository(AsyncCrudRepository[Order]):
    """Repository for orders."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Order)

    async def list_for_vendor(self, vendor_id: str, status: Optional[str] = None) -> List[Order]:
        """Orders placed by the vendor, newest first."""
        stmt = select(Order).where(Order.vendor_id == vendor_id)
        if status:
            stmt = stmt.where(Order.status == status)
        stmt = stmt.order_by(col(Order.created_at).desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_for_supplier(self, supplier_id: str, status: Optional[str] = None) -> List[Order]:
        """Orders received by the supplier, newest first."""
        stmt = select(Order).where(Order.supplier_id == supplier_id)
        if status:
            stmt = stmt.where(Order.status == status)
        stmt = stmt.order_by(col(Order.created_at).desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_for_party(self, order_id: str, user_id: str) -> Optional[Order]:
        """The order if the user is its vendor or its supplier."""
        stmt = select(Order).where(
            Order.id == order_id,
            or_(Order.vendor_id == user_id, Order.supplier_id == user_id),
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_for_vendor(self, vendor_id: str, statuses: Iterable[str]) -> int:
        stmt = (
            select(func.count())
            .select_from(Order)
            .where(Order.vendor_id == vendor_id, col(Order.status).in_(list(statuses)))
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def count_for_supplier(self, supplier_id: str, statuses: Iterable[str]) -> int:
        stmt = (
            select(func.count())
            .select_from(Order)
            .where(Order.supplier_id == supplier_id, col(Order.status).in_(list(statuses)))
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def delivered_amounts_since(self, supplier_id: str, since: datetime) -> List[Decimal]:
        """Total amounts of the supplier's orders delivered at or after ``since``."""
        stmt = select(Order.total_amount).where(
            Order.supplier_id == supplier_id,
            Order.status == "delivered",
            col(Order.actual_delivery_date) >= since,
        )
        result = await self.session.execute(stmt)
        return [Decimal(amount) for amount in result.scalars().all()]
