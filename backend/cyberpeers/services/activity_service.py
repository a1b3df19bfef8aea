"""
Activity service for the append-only audit trail.
"""
from typing import Any

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.results import InsertOneResult

from cyberpeers.core.timeutils import days_since, utc_now_iso
from cyberpeers.database.collections import Collections
from cyberpeers.models.activity import Activity, ActorField
from cyberpeers.services.documents import serialize_document

RECENT_ACTIVITY_LIMIT = 5


class ActivityService:
    """Service for reading and appending activity log entries."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the application database."""
        self.db = db
        self.activities = db[Collections.ACTIVITIES]

    async def log(
        self, actor_field: ActorField, actor_email: str, action: str
    ) -> InsertOneResult:
        """
        Append one activity entry.

        Args:
            actor_field: Field the actor email is stored under
            actor_email: Email of whoever performed the action
            action: Human-readable description

        Returns:
            Driver insert result
        """
        fields = {actor_field.value, "action", "createdAt"}
        activity = Activity(
            **{actor_field.value: actor_email},
            action=action,
            createdAt=utc_now_iso(),
        )
        return await self.activities.insert_one(activity.model_dump(include=fields))

    async def list_for_user(self, email: str) -> list[dict[str, Any]]:
        """All activities performed by a user, newest first."""
        cursor = self.activities.find({ActorField.USER.value: email}).sort("createdAt", -1)
        docs = await cursor.to_list(length=None)
        return [self._with_elapsed_days(doc) for doc in docs]

    async def recent(self, limit: int = RECENT_ACTIVITY_LIMIT) -> list[dict[str, Any]]:
        """Most recent activities across all actors."""
        cursor = self.activities.find().sort("createdAt", -1).limit(limit)
        docs = await cursor.to_list(length=None)
        return [self._with_elapsed_days(doc) for doc in docs]

    async def count_admin_activities(self) -> int:
        # Entries carry no "role" field, so this always counts zero
        return await self.activities.count_documents({"role": "admin"})

    @staticmethod
    def _with_elapsed_days(doc: dict[str, Any]) -> dict[str, Any]:
        doc = serialize_document(doc)
        doc["timestamp"] = days_since(doc.get("createdAt"))
        return doc
