"""OpenID Connect client

Overview
--------
Wraps an Authlib Starlette OAuth client registered from the provider's
discovery document. Authlib runs the authorization code flow:

- ``authorize_redirect`` generates ``state``, ``nonce`` and a PKCE (S256)
  verifier, keeps them in the cookie session and redirects to the provider
- ``authorize_access_token`` checks ``state``, redeems the code with the
  verifier and validates the id_token (signature against the provider's
  JWKS, issuer, audience, expiry and nonce)

On top of that this module re-reads the discovery document after a TTL,
runs the refresh token grant and builds the end-session (logout) URL.

Errors
------
Every provider failure (OAuth error responses, state mismatches, invalid
id_tokens, HTTP and transport errors) is raised as ``OIDCError`` with the
status code and provider payload where available.
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable, Dict, Optional, Tuple

import httpx
from authlib.common.urls import add_params_to_uri
from authlib.integrations.starlette_client import OAuth, OAuthError, StarletteOAuth2App
from authlib.jose.errors import JoseError
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from starlette.requests import Request
from starlette.responses import RedirectResponse

from vendorlink.core.logging_config import get_logger
from vendorlink.server.core import constant

from .errors import OIDCError

logger = get_logger(__name__)

PROVIDER_NAME = "vendorlink"
REQUIRED_METADATA = ("issuer", "authorization_endpoint", "token_endpoint", "jwks_uri")


class TokenSet(BaseModel):
    """Token endpoint response.

    ``claims`` holds the validated id_token claims of a login; refresh
    responses leave it empty.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    access_token: str
    token_type: str = "Bearer"
    refresh_token: Optional[str] = None
    id_token: Optional[str] = None
    expires_in: Optional[int] = None
    claims: Dict[str, Any] = Field(default_factory=dict, alias="userinfo")

    def expires_at(self, now: Optional[float] = None) -> Optional[int]:
        """Absolute expiry in epoch seconds, or None when the provider gave no lifetime."""
        if self.expires_in is None:
            return None
        return int((now if now is not None else time.time()) + self.expires_in)


def _response_details(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class OIDCClient:
    """Async client for one OpenID Connect provider.

    Args:
        issuer_url: Issuer base URL; discovery is read from
            ``{issuer_url}/.well-known/openid-configuration``.
        client_id: Registered client identifier.
        client_secret: Client secret, sent in the form body. Public clients
            omit it and send only ``client_id``.
        discovery_ttl_seconds: How long the discovery document is cached.
        timeout: HTTP timeout for provider calls.
        transport: Optional httpx transport for every provider call.
        clock: Monotonic clock used for the discovery cache.
    """

    def __init__(
        self,
        issuer_url: str,
        client_id: str,
        *,
        client_secret: Optional[str] = None,
        discovery_ttl_seconds: int = 3600,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.issuer_url = issuer_url.rstrip("/")
        self.client_id = client_id
        self._client_secret = client_secret
        self._discovery_ttl = discovery_ttl_seconds
        self._clock = clock
        self._client_kwargs: Dict[str, Any] = {
            "scope": constant.OIDC_SCOPE,
            "code_challenge_method": "S256",
            "token_endpoint_auth_method": "client_secret_post" if client_secret else "none",
            "timeout": timeout,
        }
        if transport is not None:
            self._client_kwargs["transport"] = transport
        self._app: Optional[StarletteOAuth2App] = None
        self._registered_at = 0.0

    @property
    def discovery_url(self) -> str:
        return f"{self.issuer_url}/.well-known/openid-configuration"

    def _provider(self) -> StarletteOAuth2App:
        # A fresh registration starts with empty metadata, so discovery is read again
        now = self._clock()
        if self._app is None or now - self._registered_at >= self._discovery_ttl:
            self._app = OAuth().register(
                name=PROVIDER_NAME,
                client_id=self.client_id,
                client_secret=self._client_secret,
                server_metadata_url=self.discovery_url,
                client_kwargs=dict(self._client_kwargs),
            )
            self._registered_at = now
            logger.debug(f"Registered OIDC client for {self.issuer_url}")
        return self._app

    @asynccontextmanager
    async def _provider_call(self, action: str) -> AsyncIterator[None]:
        try:
            yield
        except OAuthError as e:
            raise OIDCError(
                f"OIDC {action} failed: {e.error}",
                details={"error": e.error, "error_description": e.description},
            ) from e
        except JoseError as e:
            raise OIDCError(f"OIDC {action} failed: invalid id_token ({e.error})", details={"error": e.error}) from e
        except httpx.HTTPStatusError as e:
            raise OIDCError(
                f"OIDC {action} failed: {e.response.status_code}",
                status_code=e.response.status_code,
                details=_response_details(e.response),
            ) from e
        except httpx.HTTPError as e:
            raise OIDCError(f"OIDC {action} failed: {e}") from e
        except ValueError as e:
            raise OIDCError(f"OIDC {action} failed: provider response is not valid JSON") from e

    async def _loaded_provider(self) -> Tuple[StarletteOAuth2App, Dict[str, Any]]:
        provider = self._provider()
        async with self._provider_call("discovery"):
            metadata = await provider.load_server_metadata()
        missing = [key for key in REQUIRED_METADATA if not metadata.get(key)]
        if missing:
            self._app = None
            raise OIDCError("Invalid OIDC discovery document", details={"missing": missing})
        return provider, metadata

    async def discover(self) -> Dict[str, Any]:
        """Return the provider metadata, fetching it when the cache is empty or stale."""
        _, metadata = await self._loaded_provider()
        return metadata

    async def aclose(self) -> None:
        self._app = None

    async def authorize_redirect(self, request: Request, redirect_uri: str) -> RedirectResponse:
        """Start a login; the pending ``state``/``nonce``/verifier go into ``request.session``."""
        provider, _ = await self._loaded_provider()
        async with self._provider_call("authorization"):
            return await provider.authorize_redirect(request, redirect_uri, prompt=constant.OIDC_PROMPT)

    async def authorize_access_token(self, request: Request) -> TokenSet:
        """Finish the login started by ``authorize_redirect``.

        Raises:
            OIDCError: The provider reported an error, ``state`` matches no
                pending login, the code was rejected or the id_token is
                missing or invalid.
        """
        provider, _ = await self._loaded_provider()
        async with self._provider_call("login"):
            token = await provider.authorize_access_token(request)
        tokens = self._token_set(token)
        if not tokens.claims.get("sub"):
            raise OIDCError("Token response carries no valid id_token", details={"keys": sorted(token)})
        return tokens

    async def refresh(self, refresh_token: str) -> TokenSet:
        """Obtain fresh tokens with a refresh token."""
        provider, _ = await self._loaded_provider()
        async with self._provider_call("refresh"):
            token = await provider.fetch_access_token(grant_type="refresh_token", refresh_token=refresh_token)
        return self._token_set(token)

    @staticmethod
    def _token_set(token: Dict[str, Any]) -> TokenSet:
        try:
            return TokenSet.model_validate(dict(token))
        except ValidationError as e:
            raise OIDCError("Invalid token response", details=e.errors(include_context=False)) from e

    async def end_session_url(self, *, post_logout_redirect_uri: str) -> str:
        """URL that ends the session at the provider and comes back to ``post_logout_redirect_uri``."""
        _, metadata = await self._loaded_provider()
        endpoint = metadata.get("end_session_endpoint") or f"{self.issuer_url}/session/end"
        return add_params_to_uri(
            endpoint,
            [("client_id", self.client_id), ("post_logout_redirect_uri", post_logout_redirect_uri)],
        )
