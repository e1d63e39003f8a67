"""
Group order I/O models.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, model_validator

from vendorlink.core.models.domain import GroupOrderStatus

from .base import CamelModel, NaiveUTCDatetime


class GroupOrderCreate(CamelModel):
    """Schema for organising a group order."""

    product_id: str = Field(min_length=1)
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    target_quantity: int = Field(ge=1)
    max_participants: int = Field(default=10, ge=1)
    regular_price_per_unit: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    group_price_per_unit: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    deadline: NaiveUTCDatetime

    @model_validator(mode="after")
    def _group_price_not_above_regular(self) -> "GroupOrderCreate":
        if self.group_price_per_unit > self.regular_price_per_unit:
            raise ValueError("groupPricePerUnit must not exceed regularPricePerUnit")
        return self


class JoinGroupOrder(CamelModel):
    quantity: int = Field(ge=1)


class GroupOrderStatusUpdate(CamelModel):
    status: GroupOrderStatus


class GroupOrderRead(CamelModel):
    """Schema for reading a group order."""

    id: str
    product_id: str
    organizer_id: str
    title: str
    description: Optional[str] = None
    target_quantity: int
    current_quantity: int
    max_participants: int
    current_participants: int
    regular_price_per_unit: Decimal
    group_price_per_unit: Decimal
    deadline: datetime
    status: GroupOrderStatus
    created_at: datetime
    updated_at: datetime


class ParticipantRead(CamelModel):
    id: str
    group_order_id: str
    vendor_id: str
    quantity: int
    joined_at: datetime
