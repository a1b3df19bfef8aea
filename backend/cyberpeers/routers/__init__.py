"""
API Routers module.
"""
from cyberpeers.routers import health, root, users

__all__ = ["health", "root", "users"]
