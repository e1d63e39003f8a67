"""
Login flow and session authentication.

The signed session cookie (Starlette ``SessionMiddleware``) carries the
server-side session id and, between ``/api/login`` and ``/api/callback``,
the pending login Authlib keeps there (``state``, ``nonce`` and PKCE
verifier). Tokens and id_token claims are kept in the ``sessions`` table.

A server-side session holds::

    {"user_id": str, "claims": dict, "access_token": str,
     "refresh_token": str | None, "expires_at": int | None}
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from authlib.common.security import generate_token
from fastapi import HTTPException, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from vendorlink.core.database.repositories import SessionRepository, UserRepository
from vendorlink.core.logging_config import get_logger
from vendorlink.core.models.io import SessionDebug
from vendorlink.server.core.config import Settings
from vendorlink.server.services.errors import BusinessRuleError

from .errors import OIDCError
from .oidc import OIDCClient, TokenSet

logger = get_logger(__name__)

SESSION_ID_KEY = "sid"


def _unauthorized() -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


class AuthFlow:
    """Drive the OIDC login and validate sessions for one request.

    Args:
        oidc: Identity provider client.
        db: The request's database session.
        config: Application settings.
        clock: Wall clock in epoch seconds, used for token expiry.
    """

    def __init__(
        self,
        oidc: OIDCClient,
        db: AsyncSession,
        config: Settings,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.oidc = oidc
        self.db = db
        self.config = config
        self.sessions = SessionRepository(db)
        self.users = UserRepository(db)
        self._clock = clock

    def callback_url(self, host: str) -> str:
        return f"{self.config.oidc.callback_scheme}://{host}/api/callback"

    def _host(self, request: Request) -> str:
        host = request.url.hostname or ""
        if host not in self.config.oidc.domain_list:
            logger.warning(f"Login attempted from unconfigured domain '{host}'")
            raise BusinessRuleError(f"Unknown authentication domain: {host}")
        return host

    async def begin_login(self, request: Request) -> RedirectResponse:
        """Redirect to the provider; the pending login is kept in the cookie session."""
        host = self._host(request)
        return await self.oidc.authorize_redirect(request, self.callback_url(host))

    async def complete_login(self, request: Request) -> bool:
        """Finish the login started by ``begin_login``.

        Returns:
            True when a session was established, False when the login has to be restarted.
        """
        self._host(request)
        try:
            tokens = await self.oidc.authorize_access_token(request)
        except OIDCError as e:
            logger.warning(f"Login callback rejected: {e}", extra={"details": e.details})
            return False

        claims = dict(tokens.claims)
        user = await self.users.upsert(
            str(claims["sub"]),
            email=claims.get("email"),
            first_name=claims.get("first_name") or claims.get("given_name"),
            last_name=claims.get("last_name") or claims.get("family_name"),
            profile_image_url=claims.get("profile_image_url") or claims.get("picture"),
        )

        pruned = await self.sessions.prune_expired()
        if pruned:
            logger.debug(f"Pruned {pruned} expired login sessions")
        old_sid = request.session.get(SESSION_ID_KEY)
        if old_sid:
            await self.sessions.destroy(old_sid)
        sid = generate_token(48)
        await self.sessions.save(sid, self._session_data(user.id, claims, tokens), self.config.session.ttl_seconds)
        request.session[SESSION_ID_KEY] = sid
        logger.info(f"User {user.id} logged in")
        return True

    def _session_data(
        self, user_id: str, claims: Dict[str, Any], tokens: TokenSet, previous_refresh: Optional[str] = None
    ) -> Dict[str, Any]:
        return {
            "user_id": user_id,
            "claims": claims,
            "access_token": tokens.access_token,
            "refresh_token": tokens.refresh_token or previous_refresh,
            "expires_at": tokens.expires_at(self._clock()),
        }

    async def logout(self, request: Request) -> str:
        """Destroy the session and return the provider's end-session URL."""
        sid = request.session.get(SESSION_ID_KEY)
        if sid:
            await self.sessions.destroy(sid)
        request.session.clear()
        scheme = self.config.oidc.callback_scheme
        return await self.oidc.end_session_url(post_logout_redirect_uri=f"{scheme}://{request.url.netloc}")

    async def authenticate(self, request: Request) -> str:
        """Return the user id of a valid session, refreshing expired tokens when possible.

        Raises:
            HTTPException: 401 when there is no usable session.
        """
        sid = request.session.get(SESSION_ID_KEY)
        data = await self.sessions.get_data(sid) if sid else None
        if not data or not data.get("user_id") or data.get("expires_at") is None:
            raise _unauthorized()

        if self._clock() <= data["expires_at"]:
            return data["user_id"]

        refresh_token = data.get("refresh_token")
        if not refresh_token:
            raise _unauthorized()
        try:
            tokens = await self.oidc.refresh(refresh_token)
        except OIDCError as e:
            logger.info(f"Token refresh failed for user {data['user_id']}: {e}")
            raise _unauthorized() from e

        await self.sessions.save(
            sid,
            self._session_data(data["user_id"], data.get("claims", {}), tokens, previous_refresh=refresh_token),
            self.config.session.ttl_seconds,
        )
        logger.debug(f"Refreshed tokens for user {data['user_id']}")
        return data["user_id"]

    async def debug(self, request: Request) -> SessionDebug:
        """Describe the current session without exposing tokens."""
        sid = request.session.get(SESSION_ID_KEY)
        data = await self.sessions.get_data(sid) if sid else None
        if not data:
            return SessionDebug(
                authenticated=self.config.demo_mode,
                has_session=False,
                has_access_token=False,
                has_refresh_token=False,
                demo_mode=self.config.demo_mode,
            )
        expires_at = data.get("expires_at")
        is_expired = None if expires_at is None else self._clock() > expires_at
        return SessionDebug(
            authenticated=self.config.demo_mode or (expires_at is not None and not is_expired),
            has_session=True,
            user_id=data.get("user_id"),
            has_access_token=bool(data.get("access_token")),
            has_refresh_token=bool(data.get("refresh_token")),
            expires_at=(
                datetime.fromtimestamp(expires_at, tz=timezone.utc).replace(tzinfo=None)
                if expires_at is not None
                else None
            ),
            is_expired=is_expired,
            demo_mode=self.config.demo_mode,
        )
