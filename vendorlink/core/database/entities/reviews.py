"""
Review entity models.

Two kinds of review exist: a supplier review left against a completed order,
and a product review that other vendors can mark as helpful.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, new_id, utc_now_naive


class Review(Base, table=True):
    """Supplier review tied to one order.

    Table: reviews
    """

    __tablename__ = "reviews"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    order_id: str = Field(foreign_key="orders.id", unique=True, max_length=36)
    vendor_id: str = Field(foreign_key="users.id", max_length=255)
    supplier_id: str = Field(foreign_key="users.id", index=True, max_length=255)
    rating: int
    comment: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now_naive)


class ProductReview(Base, table=True):
    """Review of a product.

    Table: product_reviews
    """

    __tablename__ = "product_reviews"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    product_id: str = Field(foreign_key="products.id", index=True, max_length=36)
    vendor_id: str = Field(foreign_key="users.id", max_length=255)
    supplier_id: str = Field(foreign_key="users.id", max_length=255)
    rating: int
    comment: Optional[str] = Field(default=None)
    helpful_count: int = Field(default=0)
    created_at: datetime = Field(default_factory=utc_now_naive)
