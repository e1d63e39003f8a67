"""
User Profile Endpoints.
"""

from fastapi import APIRouter

from vendorlink.core.database.base import utc_now_naive
from vendorlink.core.database.repositories import UserRepository
from vendorlink.core.logging_config import get_logger
from vendorlink.core.models.io import ProfileUpdate, RoleUpdate, UserRead
from vendorlink.server.services.deps import CurrentUserDep, SessionDep

logger = get_logger(__name__)

router = APIRouter(tags=["users"])


@router.patch(
    "/user/role",
    response_model=UserRead,
    summary="Switch Marketplace Role",
    description="Set the caller's role to vendor, supplier or both.",
    responses={400: {"description": "Invalid role"}},
)
async def update_role(payload: RoleUpdate, user: CurrentUserDep, session: SessionDep) -> UserRead:
    user.role = payload.role.value
    user.updated_at = utc_now_naive()
    user = await UserRepository(session).update(user)
    logger.info(f"User {user.id} switched role to {user.role}")
    return UserRead.model_validate(user)


@router.patch(
    "/user/profile",
    response_model=UserRead,
    summary="Update Profile",
    description="Update the caller's business and contact details. Omitted fields are left unchanged.",
)
async def update_profile(payload: ProfileUpdate, user: CurrentUserDep, session: SessionDep) -> UserRead:
    for key, value in payload.model_dump(exclude_unset=True).items():
        setattr(user, key, value)
    user.updated_at = utc_now_naive()
    user = await UserRepository(session).update(user)
    return UserRead.model_validate(user)
