"""
Price alert repository.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from ..entities.catalog import Product
from ..entities.price_alerts import PriceAlert
from .base import AsyncCrudRepository


class PriceAlertRepository(AsyncCrudRepository[PriceAlert]):
    """Repository for vendor price alerts."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, PriceAlert)

    async def list_active(self, vendor_id: str) -> List[PriceAlert]:
        stmt = (
            select(PriceAlert)
            .where(PriceAlert.vendor_id == vendor_id, PriceAlert.is_active == True)  # noqa: E712
            .order_by(col(PriceAlert.created_at).desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_triggered(self, vendor_id: str) -> List[Tuple[PriceAlert, Product]]:
        """Active alerts whose product currently sells at or below the target price."""
        stmt = (
            select(PriceAlert, Product)
            .join(Product, col(Product.id) == col(PriceAlert.product_id))
            .where(
                PriceAlert.vendor_id == vendor_id,
                PriceAlert.is_active == True,  # noqa: E712
                col(Product.price_per_unit) <= col(PriceAlert.target_price),
            )
            .order_by(col(PriceAlert.created_at).desc())
        )
        result = await self.session.execute(stmt)
        return [(alert, product) for alert, product in result.all()]

    async def get_owned(self, alert_id: str, vendor_id: str) -> Optional[PriceAlert]:
        stmt = select(PriceAlert).where(PriceAlert.id == alert_id, PriceAlert.vendor_id == vendor_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
