"""
Server-side login session entity.

The signed session cookie only carries the session id; the tokens and
claims obtained from the identity provider live in this table.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from sqlalchemy import JSON, Column
from sqlmodel import Field

from ..base import Base


class LoginSession(Base, table=True):
    """Persisted login session.

    Table: sessions
    """

    __tablename__ = "sessions"
    __table_args__ = ({"extend_existing": True},)

    sid: str = Field(primary_key=True, max_length=255)
    sess: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    expire: datetime = Field(index=True)
