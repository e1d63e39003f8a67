from __future__ import annotations

import os
from pathlib import Path
from typing import Tuple

import httpx
import pytest
from dotenv import load_dotenv

TEST_ROOT = Path(__file__).resolve().parent
# Load test/.env first, then fallback to test/.env.example for defaults
load_dotenv(TEST_ROOT / ".env", override=False)
load_dotenv(TEST_ROOT / ".env.example", override=False)

# The application engine is created on import; never point it at a real server
os.environ.setdefault("DATABASE__URL", "sqlite+aiosqlite:///:memory:")

# Import test settings after dotenv is loaded
from test.settings import test_settings  # noqa: E402


@pytest.fixture(scope="session")
def test_config():
    """Fixture providing test configuration from Pydantic settings model.

    Returns:
        TestSettings: Test configuration with all environment variables loaded
    """
    return test_settings


# Mocked providers and the in-process ASGI app are the only reachable hosts
OFFLINE_ALLOWED_PREFIXES: Tuple[str, ...] = (
    "http://mock",
    "https://mock",
    "http://localhost",
    "http://127.0.0.1",
    "/",
)


def _reachable(url) -> bool:
    return str(url).startswith(OFFLINE_ALLOWED_PREFIXES)


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    """Fail any test that would talk to a real host through httpx."""
    sync_request = httpx.Client.request
    async_request = httpx.AsyncClient.request

    def guarded_sync(self, method, url, *args, **kwargs):
        if not _reachable(url):
            raise RuntimeError(f"Blocked outbound HTTP call in tests: {method} {url}")
        return sync_request(self, method, url, *args, **kwargs)

    async def guarded_async(self, method, url, *args, **kwargs):
        if not _reachable(url):
            raise RuntimeError(f"Blocked outbound HTTP call in tests: {method} {url}")
        return await async_request(self, method, url, *args, **kwargs)

    monkeypatch.setattr(httpx.Client, "request", guarded_sync)
    monkeypatch.setattr(httpx.AsyncClient, "request", guarded_async)
