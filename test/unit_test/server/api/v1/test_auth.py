"""
Unit tests for the login, callback, logout and session endpoints.

The identity provider is served in process by ``MockIdP``; the cookie jar
of the test client carries the signed session cookie between requests.
"""

from datetime import timedelta
from urllib.parse import parse_qs, urlsplit

import httpx
import pytest
from sqlmodel import select

from vendorlink.core.database.base import utc_now_naive
from vendorlink.core.database.entities import LoginSession
from vendorlink.core.database.repositories import SessionRepository, UserRepository
from vendorlink.server.auth import OIDCClient, get_oidc_client
from vendorlink.server.core.config import OIDCConfig, Settings, get_settings

from ...auth.mock_idp import CLIENT_ID, ISSUER, MockIdP, login_params


@pytest.fixture
def idp() -> MockIdP:
    return MockIdP()


@pytest.fixture
def auth_settings(test_config) -> Settings:
    oidc = OIDCConfig(issuer_url=ISSUER, client_id=CLIENT_ID, domains=test_config.oidc.domain, callback_scheme="http")
    return Settings(oidc=oidc)


@pytest.fixture
def auth_app(app, idp, auth_settings):
    """The application wired to the mock identity provider."""
    oidc = OIDCClient(ISSUER, CLIENT_ID, transport=idp.transport())
    app.dependency_overrides[get_oidc_client] = lambda: oidc
    app.dependency_overrides[get_settings] = lambda: auth_settings
    return app


async def _login(client, idp: MockIdP) -> httpx.Response:
    """Run /api/login and /api/callback like a browser would, the provider echoing the nonce."""
    login = await client.get("/api/login")
    params = login_params(login.headers["location"])
    if idp.nonce is None:
        idp.nonce = params["nonce"]
    return await client.get("/api/callback", params={"code": "auth-code", "state": params["state"]})


async def _session_ids(session):
    return list((await session.execute(select(LoginSession.sid))).scalars().all())


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_redirects_to_provider(self, auth_app, client):
        """Test that /api/login redirects with a PKCE challenge and the callback URL."""
        response = await client.get("/api/login")

        assert response.status_code == 302
        location = urlsplit(response.headers["location"])
        params = parse_qs(location.query)
        assert f"{location.scheme}://{location.netloc}{location.path}" == f"{ISSUER}/auth"
        assert params["redirect_uri"] == ["http://localhost/api/callback"]
        assert params["code_challenge_method"] == ["S256"]

    @pytest.mark.asyncio
    async def test_unknown_domain_is_rejected(self, auth_app, client):
        """Test that a host outside the configured domains cannot start a login."""
        response = await client.get("/api/login", headers={"host": "evil.example"})

        assert response.status_code == 400
        assert response.json() == {"message": "Unknown authentication domain: evil.example"}


class TestCallback:
    @pytest.mark.asyncio
    async def test_successful_login_creates_user_and_session(self, auth_app, client, session, idp):
        """Test the full login: user upserted from claims, session usable right away."""
        response = await _login(client, idp)

        assert response.status_code == 302
        assert response.headers["location"] == "/"
        user = await UserRepository(session).get_by_id("idp-user-1")
        assert user.email == "asha@example.com"
        assert user.role == "vendor"

        me = await client.get("/api/auth/user")
        assert me.status_code == 200
        assert me.json()["firstName"] == "Asha"

        token_form = idp.forms("/token")[0]
        assert token_form["grant_type"] == "authorization_code"
        assert token_form["redirect_uri"] == "http://localhost/api/callback"

    @pytest.mark.asyncio
    async def test_state_mismatch_restarts_login(self, auth_app, client, idp):
        """Test that a forged state never reaches the token endpoint."""
        await client.get("/api/login")

        response = await client.get("/api/callback", params={"code": "auth-code", "state": "forged"})

        assert response.status_code == 302
        assert response.headers["location"] == "/api/login"
        assert idp.forms("/token") == []

    @pytest.mark.asyncio
    async def test_provider_error_restarts_login(self, auth_app, client):
        """Test that an error parameter from the provider restarts the login."""
        await client.get("/api/login")

        response = await client.get("/api/callback", params={"error": "access_denied"})

        assert response.headers["location"] == "/api/login"

    @pytest.mark.asyncio
    async def test_failed_code_exchange_restarts_login(self, auth_app, client, idp):
        """Test that a rejected code redirects back to the login."""
        idp.token_status = 400

        response = await _login(client, idp)

        assert response.headers["location"] == "/api/login"
        assert (await client.get("/api/auth/user")).status_code == 401

    @pytest.mark.asyncio
    async def test_id_token_for_another_login_restarts_login(self, auth_app, client, session, idp):
        """Test that an id_token whose nonce does not match the pending login creates no user."""
        idp.nonce = "nonce-of-another-login"

        response = await _login(client, idp)

        assert response.headers["location"] == "/api/login"
        assert await UserRepository(session).get_by_id("idp-user-1") is None
        assert await _session_ids(session) == []

    @pytest.mark.asyncio
    async def test_login_prunes_expired_sessions(self, auth_app, client, session, idp):
        """Test that expired session rows are deleted when someone logs in."""
        sessions = SessionRepository(session)
        stale = await sessions.save("stale", {"user_id": "gone"}, ttl_seconds=60)
        stale.expire = utc_now_naive() - timedelta(days=30)
        await sessions.update(stale)
        await sessions.save("live", {"user_id": "still-here"}, ttl_seconds=3600)

        await _login(client, idp)

        remaining = await _session_ids(session)
        assert "stale" not in remaining
        assert "live" in remaining
        assert len(remaining) == 2


class TestSessionAccess:
    @pytest.mark.asyncio
    async def test_no_session_is_unauthorized(self, auth_app, client):
        """Test that protected endpoints return 401 without a session."""
        response = await client.get("/api/products")

        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized"}

    @pytest.mark.asyncio
    async def test_logout_destroys_session(self, auth_app, client, session, idp):
        """Test that logout removes the server-side session and redirects to the provider."""
        await _login(client, idp)

        response = await client.get("/api/logout")

        assert response.status_code == 302
        assert response.headers["location"].startswith(f"{ISSUER}/session/end?")
        assert (await client.get("/api/auth/user")).status_code == 401
        assert await _session_ids(session) == []

    @pytest.mark.asyncio
    async def test_debug_never_exposes_tokens(self, auth_app, client, idp):
        """Test the diagnostics endpoint before and after login."""
        before = (await client.get("/api/auth/debug")).json()
        assert before["hasSession"] is False
        assert before["authenticated"] is False

        await _login(client, idp)
        after = (await client.get("/api/auth/debug")).json()

        assert after["hasSession"] is True
        assert after["authenticated"] is True
        assert after["userId"] == "idp-user-1"
        assert after["hasAccessToken"] is True
        assert after["hasRefreshToken"] is True
        assert after["isExpired"] is False
        assert "access-1" not in str(after)


class TestDemoMode:
    @pytest.mark.asyncio
    async def test_requests_are_served_as_demo_user(self, app, client):
        """Test that demo mode needs no login and seeds the demo user."""
        app.dependency_overrides[get_settings] = lambda: Settings(VENDORLINK_DEMO_MODE=True)

        me = await client.get("/api/auth/user")
        categories = await client.get("/api/categories")

        assert me.status_code == 200
        assert me.json()["id"] == "demo-user"
        assert me.json()["email"] == "demo@vendorlink.com"
        assert [c["name"] for c in categories.json()] == ["Demo Products"]
