"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with backend-specific helpers
for testing services and error responses.
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def activity_service(mock_db):
    """ActivityService bound to the mock database."""
    from cyberpeers.services.activity_service import ActivityService
    return ActivityService(mock_db)


@pytest_asyncio.fixture
async def user_service(mock_db, activity_service):
    """UserService bound to the mock database."""
    from cyberpeers.services.user_service import UserService
    return UserService(mock_db, activity_service)


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, message: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "message" in data
        if message:
            assert data["message"] == message
        return data
    return _assert
