"""
Role and status values for documents in the users collection.

Profiles are stored as the client sent them, plus these defaults and the
``createdAt`` / ``last_loggedIn`` timestamps. Values are compared as plain
strings and never enforced.
"""
from enum import Enum


class UserRole(str, Enum):
    """Known role values."""
    USER = "user"
    ADMIN = "admin"


class UserStatus(str, Enum):
    """Known account status values."""
    ACTIVE = "active"
    SUSPENDED = "suspended"
