"""
Price alert I/O models.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from .base import CamelModel


class PriceAlertCreate(CamelModel):
    product_id: str = Field(min_length=1)
    target_price: Decimal = Field(gt=0, max_digits=10, decimal_places=2)


class PriceAlertRead(CamelModel):
    id: str
    vendor_id: str
    product_id: str
    target_price: Decimal
    is_active: bool
    created_at: datetime


class TriggeredPriceAlert(PriceAlertRead):
    """An active alert whose product now sells at or below the target price."""

    product_name: str
    current_price: Decimal
