"""
Dashboard statistics, computed from orders, group participations and reviews.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from vendorlink.core.database.base import utc_now_naive
from vendorlink.core.database.entities import User
from vendorlink.core.database.repositories import (
    GroupOrderRepository,
    OrderRepository,
    ProductRepository,
    ReviewRepository,
)
from vendorlink.core.models.domain import (
    ACTIVE_ORDER_STATUSES,
    OrderStatus,
    average_rating,
    to_money,
    total_savings,
)
from vendorlink.core.models.io import SupplierStats, VendorStats


def month_start(now: Optional[datetime] = None) -> datetime:
    """Midnight UTC on the first day of the current calendar month."""
    now = now or utc_now_naive()
    return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


class StatsService:
    def __init__(self, session: AsyncSession) -> None:
        self.orders = OrderRepository(session)
        self.group_orders = GroupOrderRepository(session)
        self.products = ProductRepository(session)
        self.reviews = ReviewRepository(session)

    async def vendor_stats(self, user: User, now: Optional[datetime] = None) -> VendorStats:
        since = month_start(now)
        shares = await self.group_orders.participation_prices_since(user.id, since)
        return VendorStats(
            active_orders=await self.orders.count_for_vendor(user.id, [s.value for s in ACTIVE_ORDER_STATUSES]),
            monthly_savings=total_savings(shares),
            credit_score=user.credit_score if user.credit_score is not None else 600,
            group_orders=await self.group_orders.count_participations(user.id),
        )

    async def supplier_stats(self, user: User, now: Optional[datetime] = None) -> SupplierStats:
        since = month_start(now)
        revenue = await self.orders.delivered_amounts_since(user.id, since)
        return SupplierStats(
            pending_orders=await self.orders.count_for_supplier(user.id, [OrderStatus.pending.value]),
            monthly_revenue=to_money(sum(revenue, to_money(0))),
            rating=average_rating(await self.reviews.ratings_for_supplier(user.id)),
            products_listed=await self.products.count_active_for_supplier(user.id),
        )
