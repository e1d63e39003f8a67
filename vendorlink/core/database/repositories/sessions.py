"""
Login session store.

Rows expire after the configured TTL; expired rows are treated as absent and
removed by ``prune_expired``.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from ..base import utc_now_naive
from ..entities.sessions import LoginSession
from .base import AsyncCrudRepository


class SessionRepository(AsyncCrudRepository[LoginSession]):
    """Repository for server-side login sessions."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, LoginSession)

    async def get_data(self, sid: str, now: Optional[datetime] = None) -> Optional[Dict[str, Any]]:
        """Session payload for ``sid``, or None when missing or expired."""
        now = now or utc_now_naive()
        stmt = select(LoginSession).where(LoginSession.sid == sid, col(LoginSession.expire) > now)
        result = await self.session.execute(stmt)
        row = result.scalar_one_or_none()
        return dict(row.sess) if row is not None else None

    async def save(self, sid: str, data: Dict[str, Any], ttl_seconds: int) -> LoginSession:
        """Insert or replace the payload and push the expiry ``ttl_seconds`` into the future."""
        row = await self.get_by_id(sid)
        expire = utc_now_naive() + timedelta(seconds=ttl_seconds)
        if row is None:
            row = LoginSession(sid=sid, sess=data, expire=expire)
        else:
            row.sess = data
            row.expire = expire
        return await self.update(row)

    async def destroy(self, sid: str) -> bool:
        return await self.delete(sid)

    async def prune_expired(self, now: Optional[datetime] = None) -> int:
        """Delete expired rows and return how many were removed."""
        now = now or utc_now_naive()
        result = await self.session.execute(delete(LoginSession).where(col(LoginSession.expire) <= now))
        await self.session.commit()
        return int(result.rowcount or 0)
