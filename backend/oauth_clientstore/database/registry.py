"""
Index management for the OAuth database.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

from oauth_clientstore.config import get_settings
from oauth_clientstore.database.databases import oauth_db

logger = logging.getLogger(__name__)


async def create_indexes(
    client: AsyncIOMotorClient,
    db_name: Optional[str] = None,
    collection: Optional[str] = None,
) -> str:
    """
    Create indexes for the client collection.

    The user_id index is not unique: one user may own several clients.

    Args:
        client: Motor client
        db_name: Database name (settings default)
        collection: Client collection name (settings default)

    Returns:
        Name of the user_id index
    """
    settings = get_settings()
    db_name = db_name or settings.oauth_db_name
    collection = collection or settings.oauth_client_collection

    clients = client[db_name][collection]
    name = await clients.create_index(oauth_db.KEY_CLIENT_ID)
    logger.info(f"Ensured index {name} on {db_name}.{collection}")
    return name
