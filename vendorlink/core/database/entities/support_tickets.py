"""
Support ticket entity models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, new_id, utc_now_naive


class SupportTicket(Base, table=True):
    """Entity for user support requests.

    Table: support_tickets
    """

    __tablename__ = "support_tickets"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    user_id: str = Field(foreign_key="users.id", index=True, max_length=255)
    subject: str = Field(max_length=255)
    description: str
    priority: str = Field(default="medium", max_length=20)
    status: str = Field(default="open", max_length=20)
    category: str = Field(max_length=20)
    assigned_to: Optional[str] = Field(default=None, max_length=255)
    resolution: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=utc_now_naive)
    updated_at: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive})
