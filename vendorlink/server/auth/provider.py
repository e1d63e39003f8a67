"""
OIDC client singleton.

Provides the process-wide ``OIDCClient`` built from settings for API
endpoints, and a shutdown hook for the application lifespan.
"""

from __future__ import annotations

from typing import Optional

from vendorlink.server.core.config import settings

from .oidc import OIDCClient

_client: Optional[OIDCClient] = None


def get_oidc_client() -> OIDCClient:
    """Return the shared OIDC client, creating it on first use."""
    global _client
    if _client is None:
        secret = settings.oidc.client_secret.get_secret_value() if settings.oidc.client_secret else None
        _client = OIDCClient(
            settings.oidc.issuer_url,
            settings.oidc.client_id,
            client_secret=secret,
            discovery_ttl_seconds=settings.oidc.discovery_ttl_seconds,
            timeout=settings.oidc.timeout_seconds,
        )
    return _client


async def close_oidc_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
