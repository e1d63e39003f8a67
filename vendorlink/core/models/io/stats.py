"""
Dashboard statistics I/O models.
"""

from __future__ import annotations

from decimal import Decimal

from .base import CamelModel


class VendorStats(CamelModel):
    active_orders: int
    monthly_savings: Decimal
    credit_score: int
    group_orders: int


class SupplierStats(CamelModel):
    pending_orders: int
    monthly_revenue: Decimal
    rating: float
    products_listed: int
