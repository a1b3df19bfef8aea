"""
Pydantic models for database documents.
"""
from cyberpeers.models.activity import Activity, ActorField
from cyberpeers.models.user import UserRole, UserStatus

__all__ = [
    "Activity",
    "ActorField",
    "UserRole",
    "UserStatus",
]
