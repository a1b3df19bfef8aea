"""
Request and response schemas for API endpoints.
"""
from cyberpeers.schemas.user import (
    AdminStatsResponse,
    ProfileUpdateRequest,
    RoleUpdateRequest,
    StatusUpdateRequest,
    UserUpsertRequest,
    WriteResponse,
)

__all__ = [
    "AdminStatsResponse",
    "ProfileUpdateRequest",
    "RoleUpdateRequest",
    "StatusUpdateRequest",
    "UserUpsertRequest",
    "WriteResponse",
]
