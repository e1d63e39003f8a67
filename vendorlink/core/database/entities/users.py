"""
User entity models.

A user is created or refreshed from the identity provider's claims on every
login. The marketplace role decides whether the user buys (vendor), sells
(supplier) or does both.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now_naive


class UserBase(Base):
    """Base fields for a marketplace user."""

    email: Optional[str] = Field(default=None, max_length=255, unique=True)
    first_name: Optional[str] = Field(default=None, max_length=255)
    last_name: Optional[str] = Field(default=None, max_length=255)
    profile_image_url: Optional[str] = Field(default=None)

    # Marketplace profile
    role: str = Field(default="vendor", max_length=20, description="vendor, supplier or both")
    business_name: Optional[str] = Field(default=None, max_length=255)
    address: Optional[str] = Field(default=None)
    city: Optional[str] = Field(default=None, max_length=100)
    state: Optional[str] = Field(default=None, max_length=100)
    pincode: Optional[str] = Field(default=None, max_length=20)
    phone: Optional[str] = Field(default=None, max_length=20)
    credit_score: int = Field(default=600)
    is_verified: bool = Field(default=False)


class User(UserBase, table=True):
    """Entity for marketplace users.

    The primary key is the identity provider's ``sub`` claim.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(primary_key=True, max_length=255)

    created_at: datetime = Field(default_factory=utc_now_naive)
    updated_at: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive})

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email}, role={self.role})"
