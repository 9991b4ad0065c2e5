"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with store instances and
stand-ins for an unresponsive or failing MongoDB.
"""

import asyncio
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def client_store(mock_async_mongo_client):
    """MongoClientStore on the mock client and the default collection."""
    from oauth_clientstore.stores import new_mongo_client_store

    return new_mongo_client_store(mock_async_mongo_client, "oauth_db")


def _client_with_collection(collection: MagicMock) -> MagicMock:
    """Motor-like client whose client[db][coll] resolves to `collection`."""
    dbclient = MagicMock()
    dbclient.__getitem__.return_value.__getitem__.return_value = collection
    return dbclient


@pytest.fixture
def hanging_collection():
    """
    Collection whose operations never answer within a test's timeout.
    """
    async def _hang(*args, **kwargs):
        await asyncio.sleep(10)

    collection = MagicMock()
    collection.insert_one = MagicMock(side_effect=_hang)
    collection.find_one = MagicMock(side_effect=_hang)
    collection.delete_many = MagicMock(side_effect=_hang)
    return collection


@pytest.fixture
def hanging_store(hanging_collection):
    """Store with a short timeout against a collection that never answers."""
    from oauth_clientstore.stores import MongoClientStore

    return MongoClientStore(
        _client_with_collection(hanging_collection),
        "oauth_db",
        timeout=0.05,
    )


@pytest.fixture
def failing_collection():
    """
    Collection with AsyncMock operations.

    Configure side effects per test:

        failing_collection.insert_one.side_effect = AutoReconnect("down")
    """
    collection = MagicMock()
    collection.insert_one = AsyncMock()
    collection.find_one = AsyncMock()
    collection.delete_many = AsyncMock()
    return collection


@pytest.fixture
def failing_store(failing_collection):
    """Store backed by the failing_collection mocks."""
    from oauth_clientstore.stores import MongoClientStore

    return MongoClientStore(_client_with_collection(failing_collection), "oauth_db")
