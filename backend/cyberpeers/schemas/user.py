"""
User request/response schemas.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UserUpsertRequest(BaseModel):
    """Profile sent by the client on sign-in (POST /user)."""
    model_config = ConfigDict(extra="allow")

    email: str = Field(..., description="User email address")
    name: Any = Field(None, description="Display name")


class ProfileUpdateRequest(BaseModel):
    """Partial profile update; every supplied field is merged in."""
    model_config = ConfigDict(extra="allow")


class RoleUpdateRequest(BaseModel):
    role: str = Field(..., description="New role, e.g. 'admin' or 'user'")


class StatusUpdateRequest(BaseModel):
    status: str = Field(..., description="New status, e.g. 'active' or 'suspended'")


class WriteResponse(BaseModel):
    """Acknowledgement of a write with the raw driver result."""
    message: str = Field(..., description="Outcome message")
    result: dict[str, Any] = Field(..., description="Driver write result")


class AdminStatsResponse(BaseModel):
    """Admin dashboard counters."""
    totalUsers: int = Field(..., description="Number of profiles")
    activeUsers: int = Field(..., description="Profiles with status 'active'")
    suspendedUsers: int = Field(..., description="Profiles with status 'suspended'")
    recentActivities: int = Field(..., description="Activity entries matching role 'admin'")
    activities: list[dict[str, Any]] = Field(..., description="Five most recent activity entries")
