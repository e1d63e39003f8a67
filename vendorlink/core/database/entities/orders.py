"""
Order entity models.

An order is a single vendor's purchase of one product from its supplier.
Orders created when a group order completes carry ``group_order_id``.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlmodel import Field

from ..base import Base, new_id, utc_now_naive


class Order(Base, table=True):
    """Entity for vendor orders.

    Table: orders
    """

    __tablename__ = "orders"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    vendor_id: str = Field(foreign_key="users.id", index=True, max_length=255)
    supplier_id: str = Field(foreign_key="users.id", index=True, max_length=255)
    product_id: str = Field(foreign_key="products.id", max_length=36)
    group_order_id: Optional[str] = Field(default=None, foreign_key="group_orders.id", max_length=36)

    quantity: int
    price_per_unit: Decimal = Field(max_digits=10, decimal_places=2)
    total_amount: Decimal = Field(max_digits=10, decimal_places=2)
    status: str = Field(default="pending", max_length=20, index=True)

    delivery_address: Optional[str] = Field(default=None)
    expected_delivery_date: Optional[datetime] = Field(default=None)
    actual_delivery_date: Optional[datetime] = Field(default=None)
    notes: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=utc_now_naive, index=True)
    updated_at: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive})

    def __repr__(self) -> str:
        return f"Order(id={self.id}, status={self.status}, total_amount={self.total_amount})"
