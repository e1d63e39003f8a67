"""
Category and product I/O models.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from .base import CamelModel


class CategoryCreate(CamelModel):
    """Schema for creating a category."""

    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None


class CategoryRead(CamelModel):
    """Schema for reading a category."""

    id: str
    name: str
    description: Optional[str] = None
    created_at: datetime


class ProductCreate(CamelModel):
    """Schema for listing a new product. The supplier is always the caller."""

    category_id: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    unit: str = Field(min_length=1, max_length=50)
    price_per_unit: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    available_quantity: int = Field(default=0, ge=0)
    minimum_order_quantity: int = Field(default=1, ge=1)
    image_url: Optional[str] = None


class ProductUpdate(CamelModel):
    """Schema for updating a product. Omitted fields are left unchanged."""

    category_id: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    unit: Optional[str] = Field(default=None, min_length=1, max_length=50)
    price_per_unit: Optional[Decimal] = Field(default=None, gt=0, max_digits=10, decimal_places=2)
    available_quantity: Optional[int] = Field(default=None, ge=0)
    minimum_order_quantity: Optional[int] = Field(default=None, ge=1)
    image_url: Optional[str] = None
    is_active: Optional[bool] = None


class StockUpdate(CamelModel):
    """Schema for setting a product's available quantity."""

    quantity: int = Field(ge=0)


class ProductRead(CamelModel):
    """Schema for reading a product."""

    id: str
    supplier_id: str
    category_id: str
    name: str
    description: Optional[str] = None
    unit: str
    price_per_unit: Decimal
    available_quantity: int
    minimum_order_quantity: int
    image_url: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
