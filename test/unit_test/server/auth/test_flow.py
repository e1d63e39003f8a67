"""
Unit tests for session authentication in ``AuthFlow``.

Requests are built directly so the session contents and the clock can be
controlled.
"""

from typing import Any, Dict, Optional

import httpx
import pytest
from fastapi import HTTPException
from starlette.requests import Request

from vendorlink.core.database.repositories import SessionRepository
from vendorlink.server.auth import AuthFlow, OIDCClient
from vendorlink.server.auth.flow import SESSION_ID_KEY
from vendorlink.server.core.config import OIDCConfig, Settings
from vendorlink.server.services.errors import BusinessRuleError

from ..conftest import VENDOR_ID
from .mock_idp import CLIENT_ID, ISSUER, MockIdP, login_params

NOW = 1_700_000_000.0


def _request(host: str = "localhost", session: Optional[Dict[str, Any]] = None) -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "scheme": "http",
            "path": "/api/auth/user",
            "query_string": b"",
            "headers": [(b"host", host.encode())],
            "session": session if session is not None else {},
        }
    )


@pytest.fixture
def idp() -> MockIdP:
    return MockIdP()


@pytest.fixture
def flow(session, idp) -> AuthFlow:
    oidc = OIDCClient(ISSUER, CLIENT_ID, transport=idp.transport())
    config = Settings(oidc=OIDCConfig(issuer_url=ISSUER, client_id=CLIENT_ID, domains="localhost, app.example"))
    return AuthFlow(oidc, session, config, clock=lambda: NOW)


async def _store(session, data: Dict[str, Any], sid: str = "sid-1") -> Request:
    await SessionRepository(session).save(sid, data, ttl_seconds=3600)
    return _request(session={SESSION_ID_KEY: sid})


class TestHostCheck:
    @pytest.mark.asyncio
    async def test_begin_login_keeps_pending_login_in_session(self, flow):
        """Test that the pending login lands in the cookie session and the callback uses the request host."""
        request = _request(host="app.example")

        response = await flow.begin_login(request)

        params = login_params(response.headers["location"])
        assert params["redirect_uri"] == "https://app.example/api/callback"
        assert [key for key in request.session if params["state"] in key]

    @pytest.mark.asyncio
    async def test_unconfigured_host_is_rejected(self, flow):
        """Test that only configured domains may log in."""
        with pytest.raises(BusinessRuleError):
            await flow.begin_login(_request(host="other.example"))


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_valid_session(self, flow, session):
        """Test that an unexpired session yields its user id without provider calls."""
        request = await _store(session, {"user_id": VENDOR_ID, "access_token": "a", "expires_at": NOW + 60})

        assert await flow.authenticate(request) == VENDOR_ID

    @pytest.mark.asyncio
    async def test_missing_session_is_unauthorized(self, flow):
        """Test that a request without a session id gets 401."""
        with pytest.raises(HTTPException) as exc_info:
            await flow.authenticate(_request())

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_session_without_expiry_is_unauthorized(self, flow, session):
        """Test that a session lacking expires_at is not trusted."""
        request = await _store(session, {"user_id": VENDOR_ID, "access_token": "a", "expires_at": None})

        with pytest.raises(HTTPException):
            await flow.authenticate(request)

    @pytest.mark.asyncio
    async def test_expired_session_is_refreshed(self, flow, session, idp):
        """Test that expired tokens are refreshed and the session updated."""
        request = await _store(
            session,
            {"user_id": VENDOR_ID, "access_token": "old", "refresh_token": "r-old", "expires_at": NOW - 1},
        )

        assert await flow.authenticate(request) == VENDOR_ID

        data = await SessionRepository(session).get_data("sid-1")
        assert data["access_token"] == "access-1"
        assert data["refresh_token"] == "refresh-1"
        assert data["expires_at"] == int(NOW + 3600)
        assert idp.forms("/token")[0]["refresh_token"] == "r-old"

    @pytest.mark.asyncio
    async def test_refresh_keeps_previous_refresh_token(self, flow, session, idp):
        """Test that a provider not rotating refresh tokens keeps the old one."""
        original = idp.handler

        def no_rotation(request):
            response = original(request)
            if request.url.path == "/token":
                return httpx.Response(200, json={"access_token": "fresh", "expires_in": 60})
            return response

        idp.handler = no_rotation
        request = await _store(
            session,
            {"user_id": VENDOR_ID, "access_token": "old", "refresh_token": "r-old", "expires_at": NOW - 1},
        )

        await flow.authenticate(request)

        data = await SessionRepository(session).get_data("sid-1")
        assert data["access_token"] == "fresh"
        assert data["refresh_token"] == "r-old"

    @pytest.mark.asyncio
    async def test_expired_without_refresh_token_is_unauthorized(self, flow, session):
        """Test that an expired session with nothing to refresh gets 401."""
        request = await _store(session, {"user_id": VENDOR_ID, "access_token": "a", "expires_at": NOW - 1})

        with pytest.raises(HTTPException):
            await flow.authenticate(request)

    @pytest.mark.asyncio
    async def test_failed_refresh_is_unauthorized(self, flow, session, idp):
        """Test that a rejected refresh token gets 401."""
        idp.token_status = 400
        request = await _store(
            session, {"user_id": VENDOR_ID, "access_token": "a", "refresh_token": "r", "expires_at": NOW - 1}
        )

        with pytest.raises(HTTPException) as exc_info:
            await flow.authenticate(request)

        assert exc_info.value.status_code == 401


class TestDebug:
    @pytest.mark.asyncio
    async def test_expired_session_is_reported(self, flow, session):
        """Test that the diagnostics flag an expired session."""
        request = await _store(
            session, {"user_id": VENDOR_ID, "access_token": "a", "refresh_token": None, "expires_at": NOW - 1}
        )

        report = await flow.debug(request)

        assert report.has_session is True
        assert report.is_expired is True
        assert report.authenticated is False
        assert report.has_refresh_token is False
