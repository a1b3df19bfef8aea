"""
Role-based access control dependencies.
"""
from typing import Annotated, Any, Optional

from fastapi import Depends, Query
from motor.motor_asyncio import AsyncIOMotorDatabase

from cyberpeers.core.exceptions import ForbiddenError
from cyberpeers.core.identity import IdentityClaims
from cyberpeers.database.connections import get_database
from cyberpeers.dependencies.auth import verify_token
from cyberpeers.models.user import UserRole
from cyberpeers.services.user_service import UserService


async def verify_admin(
    identity: Annotated[IdentityClaims, Depends(verify_token)],
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)],
    email: Annotated[Optional[str], Query(description="Requester email")] = None,
) -> dict[str, Any]:
    """
    Dependency that requires the profile named by the ``email`` query
    parameter to hold the admin role.

    The profile is looked up by the query value, not by the token's claim.

    Returns:
        The admin's profile document

    Raises:
        ForbiddenError 403: If no profile matches or its role is not admin.
            The body carries the role that was found.
    """
    user = None
    if email is not None:
        user = await UserService(db).get_user_by_email(email)

    role = user.get("role") if user else None
    if not user or role != UserRole.ADMIN.value:
        raise ForbiddenError("only admins allowed", role=role)
    return user


# Type alias for cleaner route signatures
AdminProfile = Annotated[dict[str, Any], Depends(verify_admin)]
