"""
Service layer for business logic.
"""
from cyberpeers.services.activity_service import ActivityService
from cyberpeers.services.user_service import UserService

__all__ = [
    "ActivityService",
    "UserService",
]
