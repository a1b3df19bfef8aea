"""
Collection definitions for the application database.
"""


class Collections:
    """Collection names in the application database."""
    USERS = "users"
    ACTIVITIES = "activities"
