"""
Dependencies for dependency injection in routes.
"""
from cyberpeers.dependencies.auth import verify_email, verify_token
from cyberpeers.dependencies.roles import verify_admin

__all__ = [
    "verify_token",
    "verify_email",
    "verify_admin",
]
