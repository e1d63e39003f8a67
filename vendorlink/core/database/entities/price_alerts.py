"""
Price alert entity models.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlmodel import Field

from ..base import Base, new_id, utc_now_naive


class PriceAlert(Base, table=True):
    """A vendor's request to be told when a product drops to a target price.

    Table: price_alerts
    """

    __tablename__ = "price_alerts"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    vendor_id: str = Field(foreign_key="users.id", index=True, max_length=255)
    product_id: str = Field(foreign_key="products.id", max_length=36)
    target_price: Decimal = Field(max_digits=10, decimal_places=2)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now_naive)
