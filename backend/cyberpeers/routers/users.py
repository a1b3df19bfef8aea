"""
User router for profiles, activities and admin operations.
"""
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query
from motor.motor_asyncio import AsyncIOMotorDatabase

from cyberpeers.core.identity import IdentityClaims
from cyberpeers.database.connections import get_database
from cyberpeers.dependencies.auth import VerifiedIdentity, verify_token
from cyberpeers.dependencies.roles import AdminProfile
from cyberpeers.schemas.user import (
    AdminStatsResponse,
    ProfileUpdateRequest,
    RoleUpdateRequest,
    StatusUpdateRequest,
    UserUpsertRequest,
    WriteResponse,
)
from cyberpeers.services.user_service import UserService

router = APIRouter(tags=["Users"])


async def get_user_service(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)],
) -> UserService:
    """Dependency to get UserService instance."""
    return UserService(db)


# ==================== User routes ====================


@router.post(
    "/user",
    response_model=WriteResponse,
    summary="Create or sign in a user",
)
async def upsert_user(
    body: UserUpsertRequest,
    identity: Annotated[IdentityClaims, Depends(verify_token)],
    user_service: UserService = Depends(get_user_service),
):
    """
    Create the profile on first sign-in, otherwise record a login.

    New profiles get role `user` and status `active`.

    Requires `Authorization: Bearer <token>`.
    """
    return await user_service.upsert_on_login(body.model_dump(exclude_unset=True))


@router.get(
    "/user",
    summary="Get user profile",
)
async def get_user(
    identity: VerifiedIdentity,
    email: Annotated[str, Query(description="Requester email")],
    user_service: UserService = Depends(get_user_service),
) -> dict[str, Any]:
    """
    Get the requester's profile with `daysActive`.

    Requires a bearer token whose email matches `?email=`.
    """
    return await user_service.get_profile(email)


@router.patch(
    "/user/profile",
    response_model=WriteResponse,
    summary="Update user profile",
)
async def update_profile(
    body: ProfileUpdateRequest,
    identity: VerifiedIdentity,
    email: Annotated[str, Query(description="Requester email")],
    user_service: UserService = Depends(get_user_service),
):
    """
    Merge the body fields into the requester's profile.

    Requires a bearer token whose email matches `?email=`.
    """
    return await user_service.update_profile(email, body.model_dump(exclude_unset=True))


@router.get(
    "/user/activities",
    summary="Get user activities",
)
async def get_user_activities(
    identity: VerifiedIdentity,
    email: Annotated[str, Query(description="Requester email")],
    user_service: UserService = Depends(get_user_service),
) -> list[dict[str, Any]]:
    """
    List the requester's activities, newest first.

    Each entry carries `timestamp`, the whole days elapsed since it was created.
    """
    return await user_service.list_activities(email)


# ==================== Admin routes ====================


@router.get(
    "/users",
    summary="List all users",
)
async def list_users(
    admin: AdminProfile,
    user_service: UserService = Depends(get_user_service),
) -> list[dict[str, Any]]:
    """
    List every profile.

    Requires a bearer token and an admin profile for `?email=`.
    """
    return await user_service.list_users()


@router.get(
    "/admin/stats",
    response_model=AdminStatsResponse,
    summary="Admin dashboard statistics",
)
async def get_admin_stats(
    admin: AdminProfile,
    user_service: UserService = Depends(get_user_service),
):
    """
    Profile counters and the five most recent activities.

    Requires a bearer token and an admin profile for `?email=`.
    """
    return await user_service.get_admin_stats()


@router.patch(
    "/user/role/{user_id}",
    response_model=WriteResponse,
    summary="Change a user's role",
)
async def change_user_role(
    user_id: str,
    body: RoleUpdateRequest,
    admin: AdminProfile,
    email: Annotated[str, Query(description="Requester email")],
    user_service: UserService = Depends(get_user_service),
):
    """
    Change the role of another, non-suspended user.

    Admins cannot change their own role.
    """
    return await user_service.change_role(email, user_id, body.role)


@router.patch(
    "/user/status/{user_id}",
    response_model=WriteResponse,
    summary="Change a user's status",
)
async def change_user_status(
    user_id: str,
    body: StatusUpdateRequest,
    admin: AdminProfile,
    email: Annotated[str, Query(description="Requester email")],
    user_service: UserService = Depends(get_user_service),
):
    """
    Change the status of another user.

    Admins cannot change their own status.
    """
    return await user_service.change_status(email, user_id, body.status)
