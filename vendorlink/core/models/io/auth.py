"""
Authentication diagnostics I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from .base import CamelModel


class SessionDebug(CamelModel):
    """Shape of ``GET /api/auth/debug``."""

    authenticated: bool
    has_session: bool
    user_id: Optional[str] = None
    has_access_token: bool
    has_refresh_token: bool
    expires_at: Optional[datetime] = None
    is_expired: Optional[bool] = None
    demo_mode: bool
