"""
Order I/O models.

``POST /api/orders`` accepts either a single order or a cart checkout with
an ``items`` list; both share the delivery details.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from vendorlink.core.models.domain import OrderStatus

from .base import CamelModel, NaiveUTCDatetime


class DeliveryDetails(CamelModel):
    delivery_address: Optional[str] = None
    expected_delivery_date: Optional[NaiveUTCDatetime] = None
    notes: Optional[str] = None


class OrderCreate(DeliveryDetails):
    """Schema for placing a single order."""

    product_id: str = Field(min_length=1)
    quantity: int = Field(ge=1)


class CartItem(CamelModel):
    product_id: str = Field(min_length=1)
    quantity: int = Field(ge=1)


class CartCheckout(DeliveryDetails):
    """Schema for checking out a cart; one order is created per item."""

    items: List[CartItem] = Field(min_length=1)


class OrderStatusUpdate(CamelModel):
    status: OrderStatus


class OrderRead(CamelModel):
    """Schema for reading an order."""

    id: str
    vendor_id: str
    supplier_id: str
    product_id: str
    group_order_id: Optional[str] = None
    quantity: int
    price_per_unit: Decimal
    total_amount: Decimal
    status: OrderStatus
    delivery_address: Optional[str] = None
    expected_delivery_date: Optional[datetime] = None
    actual_delivery_date: Optional[datetime] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class CheckoutResult(CamelModel):
    """Response of a cart checkout."""

    message: str
    orders: List[OrderRead]
