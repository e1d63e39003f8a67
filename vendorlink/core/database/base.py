"""
Base database models and utilities.

This module provides the foundational database components used across
all VendorLink entities using SQLModel.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from pydantic import ConfigDict
from sqlmodel import SQLModel


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def new_id() -> str:
    """Generate a string UUID primary key."""
    return str(uuid.uuid4())


def utc_now_naive() -> datetime:
    """Get current UTC datetime as naive datetime.

    Columns are ``TIMESTAMP WITHOUT TIME ZONE`` so values are stored in UTC
    with the tzinfo stripped.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)
