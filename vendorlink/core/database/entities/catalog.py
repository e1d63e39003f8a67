"""
Catalog entity models: categories and the products suppliers list in them.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlmodel import Field

from ..base import Base, new_id, utc_now_naive


class Category(Base, table=True):
    """Product category.

    Table: categories
    """

    __tablename__ = "categories"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now_naive)


class ProductBase(Base):
    """Base fields for a listed product."""

    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    unit: str = Field(max_length=50, description="Unit of sale, e.g. 'kg' or 'litre'")
    price_per_unit: Decimal = Field(max_digits=10, decimal_places=2)
    available_quantity: int = Field(default=0)
    minimum_order_quantity: int = Field(default=1)
    image_url: Optional[str] = Field(default=None)
    is_active: bool = Field(default=True)


class Product(ProductBase, table=True):
    """Entity for products offered by suppliers.

    Table: products
    """

    __tablename__ = "products"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    supplier_id: str = Field(foreign_key="users.id", index=True, max_length=255)
    category_id: str = Field(foreign_key="categories.id", index=True, max_length=36)

    created_at: datetime = Field(default_factory=utc_now_naive)
    updated_at: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive})

    def __repr__(self) -> str:
        return f"Product(id={self.id}, name={self.name}, price_per_unit={self.price_per_unit})"
