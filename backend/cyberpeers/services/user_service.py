"""
User service for profile management and admin operations.

Every mutating operation writes the primary record change and appends one
activity entry. The two writes are independent: there is no transaction
and no rollback if either one fails.
"""
import logging
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase

from cyberpeers.core.exceptions import BadRequestError, NotFoundError
from cyberpeers.core.timeutils import days_since, utc_now_iso
from cyberpeers.database.collections import Collections
from cyberpeers.models.activity import ActorField
from cyberpeers.models.user import UserRole, UserStatus
from cyberpeers.schemas.user import AdminStatsResponse, WriteResponse
from cyberpeers.services.activity_service import ActivityService
from cyberpeers.services.documents import (
    insert_result_to_dict,
    serialize_document,
    update_result_to_dict,
)

logger = logging.getLogger(__name__)

# Rendered in activity text when a profile or its name is missing,
# matching entries already stored by earlier deployments
MISSING_NAME = "undefined"


def display_name(user: Optional[dict[str, Any]]) -> str:
    """Name of a profile for activity descriptions."""
    if not user or user.get("name") is None:
        return MISSING_NAME
    return str(user["name"])


class UserService:
    """Service for user profile operations."""

    def __init__(self, db: AsyncIOMotorDatabase, activity_service: Optional[ActivityService] = None):
        """Initialize with the application database."""
        self.db = db
        self.users = db[Collections.USERS]
        self.activity_service = activity_service or ActivityService(db)

    async def get_user_by_email(self, email: str) -> Optional[dict[str, Any]]:
        """Raw profile document for an email, or None."""
        return await self.users.find_one({"email": email})

    # ==================== User operations ====================

    async def upsert_on_login(self, body: dict[str, Any]) -> WriteResponse:
        """
        Create the profile on first sign-in, otherwise record a login.

        The defaults (role, status, timestamps) are applied to the incoming
        body in both cases, but an existing profile only gets its
        ``last_loggedIn`` refreshed.

        Args:
            body: Profile fields sent by the client, including email

        Returns:
            WriteResponse with the insert or update result
        """
        now = utc_now_iso()
        user = dict(body)
        user["role"] = UserRole.USER.value
        user["status"] = UserStatus.ACTIVE.value
        user["createdAt"] = now
        user["last_loggedIn"] = now
        logger.debug("User data received: %s", user)

        query = {"email": user["email"]}
        already_exists = await self.users.find_one(query)

        if already_exists:
            await self.activity_service.log(
                ActorField.USER, user["email"], f"{display_name(user)} Logged in"
            )
            result = await self.users.update_one(
                query, {"$set": {"last_loggedIn": utc_now_iso()}}
            )
            return WriteResponse(
                message="User logged in", result=update_result_to_dict(result)
            )

        await self.activity_service.log(
            ActorField.USER, user["email"], f"{display_name(user)} created an account"
        )
        result = await self.users.insert_one(dict(user))
        logger.info("Created profile for %s", user["email"])
        return WriteResponse(
            message="User created Successfully", result=insert_result_to_dict(result)
        )

    async def get_profile(self, email: str) -> dict[str, Any]:
        """
        Get a profile with its ``daysActive`` count.

        Raises:
            NotFoundError: If no profile has this email
        """
        user = await self.users.find_one({"email": email})
        if not user:
            raise NotFoundError("User not found")

        profile = serialize_document(user)
        profile["daysActive"] = days_since(profile.get("createdAt"))
        return profile

    async def update_profile(self, email: str, update_data: dict[str, Any]) -> WriteResponse:
        """
        Merge fields into a profile.

        Raises:
            BadRequestError: If there is nothing to update
        """
        if not update_data:
            raise BadRequestError("No profile fields to update")

        query = {"email": email}
        user = await self.users.find_one(query)
        await self.activity_service.log(
            ActorField.USER, email, f"{display_name(user)} updated their profile"
        )
        result = await self.users.update_one(query, {"$set": update_data})
        return WriteResponse(
            message="User profile updated", result=update_result_to_dict(result)
        )

    async def list_activities(self, email: str) -> list[dict[str, Any]]:
        return await self.activity_service.list_for_user(email)

    # ==================== Admin operations ====================

    async def list_users(self) -> list[dict[str, Any]]:
        """Every profile, unfiltered and unpaginated."""
        users = await self.users.find().to_list(length=None)
        return [serialize_document(user) for user in users]

    async def get_admin_stats(self) -> AdminStatsResponse:
        """Profile counters and the most recent activity entries."""
        total_users = await self.users.count_documents({})
        active_users = await self.users.count_documents(
            {"status": UserStatus.ACTIVE.value}
        )
        suspended_users = await self.users.count_documents(
            {"status": UserStatus.SUSPENDED.value}
        )
        activities_count = await self.activity_service.count_admin_activities()
        recent_activities = await self.activity_service.recent()

        return AdminStatsResponse(
            totalUsers=total_users,
            activeUsers=active_users,
            suspendedUsers=suspended_users,
            recentActivities=activities_count,
            activities=recent_activities,
        )

    async def change_role(self, admin_email: str, user_id: str, role: str) -> WriteResponse:
        """
        Change another user's role.

        Matches nothing when the target is the requesting admin or a
        suspended profile. The activity entry is written regardless.
        """
        query = {
            "_id": self._object_id(user_id),
            "email": {"$ne": admin_email},
            "status": {"$ne": UserStatus.SUSPENDED.value},
        }
        result = await self.users.update_one(query, {"$set": {"role": role}})
        admin_user = await self.users.find_one({"email": admin_email})
        user = await self.users.find_one(query)
        await self.activity_service.log(
            ActorField.ADMIN,
            admin_email,
            f"{display_name(admin_user)} changed role of {display_name(user)} to {role}",
        )
        logger.info(
            "Role change to %r by %s matched %d profile(s)",
            role, admin_email, result.matched_count,
        )
        return WriteResponse(
            message="User role updated", result=update_result_to_dict(result)
        )

    async def change_status(self, admin_email: str, user_id: str, status: str) -> WriteResponse:
        """
        Change another user's status.

        Matches nothing when the target is the requesting admin. The
        activity entry is written regardless.
        """
        query = {"_id": self._object_id(user_id), "email": {"$ne": admin_email}}
        user = await self.users.find_one(query)
        admin_user = await self.users.find_one({"email": admin_email})
        await self.activity_service.log(
            ActorField.ADMIN,
            admin_email,
            f"{display_name(admin_user)} changed status of {display_name(user)} to {status}",
        )
        result = await self.users.update_one(query, {"$set": {"status": status}})
        logger.info(
            "Status change to %r by %s matched %d profile(s)",
            status, admin_email, result.matched_count,
        )
        return WriteResponse(
            message="User status updated", result=update_result_to_dict(result)
        )

    @staticmethod
    def _object_id(user_id: str) -> ObjectId:
        try:
            return ObjectId(user_id)
        except (InvalidId, TypeError):
            raise BadRequestError("Invalid user id")
