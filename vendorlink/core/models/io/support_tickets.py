"""
Support ticket I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from vendorlink.core.models.domain import TicketCategory, TicketPriority, TicketStatus

from .base import CamelModel


class TicketCreate(CamelModel):
    subject: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    priority: TicketPriority = TicketPriority.medium
    category: TicketCategory


class TicketStatusUpdate(CamelModel):
    status: TicketStatus
    resolution: Optional[str] = None


class TicketRead(CamelModel):
    id: str
    user_id: str
    subject: str
    description: str
    priority: TicketPriority
    status: TicketStatus
    category: TicketCategory
    assigned_to: Optional[str] = None
    resolution: Optional[str] = None
    created_at: datetime
    updated_at: datetime
