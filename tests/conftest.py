"""
Global test fixtures for the Cyberpeers server.

This module provides shared fixtures for all tests including:
- Test environment configuration (shared-secret identity provider)
- Mock MongoDB (mongomock-motor)
- Identity token helpers
- Profile and activity factories
"""

import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

# Configure the app before it is imported
os.environ.setdefault("MONGO_DB_URI", "mongodb://localhost:27017")
os.environ.setdefault("DB_NAME", "cyberpeers_test")
os.environ["IDENTITY_PROVIDER"] = "jwt"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"

TEST_DB_NAME = os.environ["DB_NAME"]


# =============================================================================
# Time Helpers
# =============================================================================

def iso_ago(**delta) -> str:
    """ISO-8601 UTC timestamp for ``now - timedelta(**delta)``."""
    value = datetime.now(timezone.utc) - timedelta(**delta)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_db(mock_async_mongo_client):
    """Provide the mock application database."""
    yield mock_async_mongo_client[TEST_DB_NAME]


# =============================================================================
# Identity Fixtures
# =============================================================================

@pytest.fixture
def make_token():
    """Factory minting identity tokens accepted by the test verifier."""
    from cyberpeers.core.security import create_identity_token

    def _make(email: str, **kwargs) -> str:
        return create_identity_token(email, **kwargs)
    return _make


@pytest.fixture
def auth_headers(make_token):
    """Factory building ``Authorization`` headers for an email."""
    def _headers(email: str, **kwargs) -> dict:
        return {"Authorization": f"Bearer {make_token(email, **kwargs)}"}
    return _headers


# =============================================================================
# Profile Fixtures
# =============================================================================

@pytest.fixture
def user_doc() -> dict:
    """A regular profile as stored in MongoDB."""
    return {
        "email": "alice@example.com",
        "name": "Alice",
        "role": "user",
        "status": "active",
        "createdAt": iso_ago(days=3, hours=2),
        "last_loggedIn": iso_ago(days=1),
    }


@pytest.fixture
def admin_doc() -> dict:
    """An admin profile as stored in MongoDB."""
    return {
        "email": "root@example.com",
        "name": "Root",
        "role": "admin",
        "status": "active",
        "createdAt": iso_ago(days=30),
        "last_loggedIn": iso_ago(hours=1),
    }


@pytest_asyncio.fixture
async def seeded_user(mock_db, user_doc) -> dict:
    """Insert the regular profile and return it with its ``_id``."""
    result = await mock_db.users.insert_one(dict(user_doc))
    return {**user_doc, "_id": result.inserted_id}


@pytest_asyncio.fixture
async def seeded_admin(mock_db, admin_doc) -> dict:
    """Insert the admin profile and return it with its ``_id``."""
    result = await mock_db.users.insert_one(dict(admin_doc))
    return {**admin_doc, "_id": result.inserted_id}


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app():
    """
    Create FastAPI app for testing.

    Note: This imports the actual app; use ``app_with_mocks`` for routes
    that touch the database.
    """
    from cyberpeers.main import app
    return app


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Use this for synchronous endpoint testing.
    """
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def app_with_mocks(app, mock_db):
    """FastAPI app whose database dependency returns the mock database."""
    from cyberpeers.database.connections import get_database

    app.dependency_overrides[get_database] = lambda: mock_db
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app_with_mocks):
    """
    Create an async test client backed by the mock database.
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app_with_mocks),
        base_url="http://test"
    ) as ac:
        yield ac
