"""
Global test fixtures for the OAuth client store.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Client registration factories
- Settings cache reset
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so each test sees its own environment."""
    from oauth_clientstore.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


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
async def mock_oauth_db(mock_async_mongo_client):
    """Provide mock oauth_db database."""
    db = mock_async_mongo_client["oauth_db"]
    await db.oauth_client.create_index("user_id")
    yield db


# =============================================================================
# Client Fixtures
# =============================================================================

@pytest.fixture
def client_info():
    """A client registration as the authorization server would hand it over."""
    from oauth_clientstore.models import Client

    return Client(secret="s1", domain="example.com", user_id="u1")


@pytest.fixture
def make_client():
    """Factory for client registrations."""
    from oauth_clientstore.models import Client

    def _make(user_id: str = "u1", secret: str = "s1", domain: str = "example.com"):
        return Client(secret=secret, domain=domain, user_id=user_id)

    return _make
