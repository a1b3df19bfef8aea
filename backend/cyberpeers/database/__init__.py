"""
Database module - MongoDB connection and collection definitions.
"""
from cyberpeers.database.collections import Collections
from cyberpeers.database.connections import (
    close_connections,
    get_database,
    get_mongo_client,
)

__all__ = [
    "Collections",
    "close_connections",
    "get_database",
    "get_mongo_client",
]
