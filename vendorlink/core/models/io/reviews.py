"""
Review I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class ReviewCreate(CamelModel):
    """Schema for reviewing the supplier of one of the caller's orders."""

    order_id: str = Field(min_length=1)
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = None


class ReviewRead(CamelModel):
    id: str
    order_id: str
    vendor_id: str
    supplier_id: str
    rating: int
    comment: Optional[str] = None
    created_at: datetime


class ProductReviewCreate(CamelModel):
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = None


class ProductReviewRead(CamelModel):
    id: str
    product_id: str
    vendor_id: str
    supplier_id: str
    rating: int
    comment: Optional[str] = None
    helpful_count: int
    created_at: datetime
