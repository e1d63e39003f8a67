"""
API Dependencies.

Typed ``Annotated`` dependencies for the request's database session, the
settings, the OIDC client and the authenticated user.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendorlink.core.database import get_session
from vendorlink.core.database.entities import User
from vendorlink.core.database.repositories import UserRepository
from vendorlink.server.auth import AuthFlow, OIDCClient, get_oidc_client
from vendorlink.server.core.config import Settings, get_settings

from .demo import seed_demo_data

SessionDep = Annotated[AsyncSession, Depends(get_session)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
OIDCClientDep = Annotated[OIDCClient, Depends(get_oidc_client)]


def get_auth_flow(session: SessionDep, oidc: OIDCClientDep, config: SettingsDep) -> AuthFlow:
    return AuthFlow(oidc, session, config)


AuthFlowDep = Annotated[AuthFlow, Depends(get_auth_flow)]


async def get_current_user(request: Request, session: SessionDep, config: SettingsDep, flow: AuthFlowDep) -> User:
    """
    Resolve the authenticated user of the request.

    In demo mode every request is served as the seeded demo user. Otherwise
    the session must be valid (see ``AuthFlow.authenticate``) and point at an
    existing user row.
    """
    if config.demo_mode:
        return await seed_demo_data(session)

    user_id = await flow.authenticate(request)
    user = await UserRepository(session).get_by_id(user_id)
    if user is None:
        # Session outlived its user row
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return user


CurrentUserDep = Annotated[User, Depends(get_current_user)]
