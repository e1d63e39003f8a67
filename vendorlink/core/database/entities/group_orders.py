"""
Group order entity models.

Vendors pool their demand for one product to reach a discounted group price.
Each vendor may join a group order once; the unique constraint on
(group_order_id, vendor_id) rejects a second join at the database level.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from ..base import Base, new_id, utc_now_naive


class GroupOrder(Base, table=True):
    """Entity for group buying campaigns.

    Table: group_orders
    """

    __tablename__ = "group_orders"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    product_id: str = Field(foreign_key="products.id", max_length=36)
    organizer_id: str = Field(foreign_key="users.id", index=True, max_length=255)

    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    target_quantity: int
    current_quantity: int = Field(default=0)
    max_participants: int = Field(default=10)
    current_participants: int = Field(default=0)
    regular_price_per_unit: Decimal = Field(max_digits=10, decimal_places=2)
    group_price_per_unit: Decimal = Field(max_digits=10, decimal_places=2)
    deadline: datetime
    status: str = Field(default="active", max_length=20, index=True)

    created_at: datetime = Field(default_factory=utc_now_naive)
    updated_at: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive})

    def __repr__(self) -> str:
        return (
            f"GroupOrder(id={self.id}, status={self.status}, "
            f"participants={self.current_participants}/{self.max_participants})"
        )


class GroupOrderParticipant(Base, table=True):
    """Entity for a vendor's share in a group order.

    Table: group_order_participants
    """

    __tablename__ = "group_order_participants"
    __table_args__ = (
        UniqueConstraint("group_order_id", "vendor_id", name="uq_group_order_participant"),
        {"extend_existing": True},
    )

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    group_order_id: str = Field(foreign_key="group_orders.id", index=True, max_length=36)
    vendor_id: str = Field(foreign_key="users.id", index=True, max_length=255)
    quantity: int
    joined_at: datetime = Field(default_factory=utc_now_naive)
