"""
User I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from vendorlink.core.models.domain import UserRole

from .base import CamelModel


class UserRead(CamelModel):
    """Schema for reading a user from the API."""

    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: UserRole
    business_name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    phone: Optional[str] = None
    credit_score: int
    is_verified: bool
    created_at: datetime
    updated_at: datetime


class RoleUpdate(CamelModel):
    """Schema for switching the marketplace role."""

    role: UserRole


class ProfileUpdate(CamelModel):
    """Schema for updating business and contact details. Omitted fields are left unchanged."""

    first_name: Optional[str] = Field(default=None, max_length=255)
    last_name: Optional[str] = Field(default=None, max_length=255)
    business_name: Optional[str] = Field(default=None, max_length=255)
    address: Optional[str] = None
    city: Optional[str] = Field(default=None, max_length=100)
    state: Optional[str] = Field(default=None, max_length=100)
    pincode: Optional[str] = Field(default=None, max_length=20)
    phone: Optional[str] = Field(default=None, max_length=20)
