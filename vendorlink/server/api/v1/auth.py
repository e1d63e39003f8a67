"""
Authentication Endpoints.

OpenID Connect login, callback and logout redirects, plus the current user
and a session diagnostics endpoint.
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

from vendorlink.core.logging_config import get_logger
from vendorlink.core.models.io import SessionDebug, UserRead
from vendorlink.server.services.deps import AuthFlowDep, CurrentUserDep

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])


@router.get(
    "/login",
    summary="Start Login",
    description="Redirect to the identity provider's authorization endpoint.",
    responses={302: {"description": "Redirect to the identity provider"}, 400: {"description": "Unknown domain"}},
)
async def login(request: Request, flow: AuthFlowDep) -> RedirectResponse:
    return await flow.begin_login(request)


@router.get(
    "/callback",
    summary="Login Callback",
    description="Complete the login and establish a session. Failed logins restart at /api/login.",
    responses={302: {"description": "Redirect to the application or back to /api/login"}},
)
async def callback(request: Request, flow: AuthFlowDep) -> RedirectResponse:
    target = "/" if await flow.complete_login(request) else "/api/login"
    return RedirectResponse(target, status_code=status.HTTP_302_FOUND)


@router.get(
    "/logout",
    summary="Logout",
    description="Destroy the session and redirect to the identity provider's end-session endpoint.",
    responses={302: {"description": "Redirect to the identity provider"}},
)
async def logout(request: Request, flow: AuthFlowDep) -> RedirectResponse:
    url = await flow.logout(request)
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)


@router.get(
    "/auth/user",
    response_model=UserRead,
    summary="Current User",
    responses={401: {"description": "Not logged in"}},
)
async def current_user(user: CurrentUserDep) -> UserRead:
    """Return the logged-in user's profile."""
    return UserRead.model_validate(user)


@router.get(
    "/auth/debug",
    response_model=SessionDebug,
    summary="Session Diagnostics",
    description="Report whether a session exists and whether its tokens are present and valid. Tokens are never returned.",
)
async def auth_debug(request: Request, flow: AuthFlowDep) -> SessionDebug:
    return await flow.debug(request)
