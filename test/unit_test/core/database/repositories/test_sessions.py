"""Unit tests for SessionRepository."""

from __future__ import annotations

from datetime import timedelta

import pytest

from vendorlink.core.database.base import utc_now_naive
from vendorlink.core.database.repositories import SessionRepository


class TestSessionRepository:
    @pytest.mark.asyncio
    async def test_save_and_get(self, in_memory_session):
        """Test that a saved payload is returned until it expires."""
        repo = SessionRepository(in_memory_session)

        await repo.save("sid-1", {"user_id": "u1"}, ttl_seconds=60)

        assert await repo.get_data("sid-1") == {"user_id": "u1"}
        assert await repo.get_data("sid-1", now=utc_now_naive() + timedelta(seconds=120)) is None

    @pytest.mark.asyncio
    async def test_save_replaces_payload(self, in_memory_session):
        """Test that saving an existing sid overwrites the payload."""
        repo = SessionRepository(in_memory_session)
        await repo.save("sid-1", {"user_id": "u1", "access_token": "a"}, ttl_seconds=60)

        await repo.save("sid-1", {"user_id": "u1", "access_token": "b"}, ttl_seconds=60)

        assert (await repo.get_data("sid-1"))["access_token"] == "b"

    @pytest.mark.asyncio
    async def test_destroy(self, in_memory_session):
        """Test that a destroyed session is gone and destroying twice is harmless."""
        repo = SessionRepository(in_memory_session)
        await repo.save("sid-1", {"user_id": "u1"}, ttl_seconds=60)

        assert await repo.destroy("sid-1") is True
        assert await repo.destroy("sid-1") is False
        assert await repo.get_data("sid-1") is None

    @pytest.mark.asyncio
    async def test_prune_expired(self, in_memory_session):
        """Test that only expired rows are pruned."""
        repo = SessionRepository(in_memory_session)
        await repo.save("short", {"user_id": "u1"}, ttl_seconds=60)
        await repo.save("long", {"user_id": "u2"}, ttl_seconds=3600)

        removed = await repo.prune_expired(now=utc_now_naive() + timedelta(seconds=120))

        assert removed == 1
        assert await repo.get_data("long") == {"user_id": "u2"}
