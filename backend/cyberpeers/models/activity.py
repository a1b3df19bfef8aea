"""
Activity log entry model for the activities collection.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ActorField(str, Enum):
    """
    Field that records who performed an action.

    User actions store the actor under ``userEmail``, admin actions under
    ``adminEmail``.
    """
    USER = "userEmail"
    ADMIN = "adminEmail"


class Activity(BaseModel):
    """Append-only audit entry."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    userEmail: Optional[str] = Field(None, description="Actor email for user actions")
    adminEmail: Optional[str] = Field(None, description="Actor email for admin actions")
    action: str = Field(..., description="Human-readable description")
    createdAt: Optional[str] = Field(None, description="Creation timestamp (ISO-8601)")
    timestamp: Optional[int] = Field(
        None, description="Whole days since createdAt (computed at read time)"
    )
