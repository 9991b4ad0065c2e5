"""
MongoDB client store for OAuth2 client registrations.

Records are looked up and deleted by their owning user_id, not by the
document _id. The id exposed on returned clients is the string form of _id.
"""
import asyncio
import logging
from typing import Any, Awaitable, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from oauth_clientstore.config import get_settings
from oauth_clientstore.database.databases import oauth_db
from oauth_clientstore.exceptions import ClientNotFoundError, ClientStoreTimeoutError
from oauth_clientstore.models.client import Client, ClientDocument, ClientInfo
from oauth_clientstore.stores.base import OAuthClientStorer

logger = logging.getLogger(__name__)


class MongoClientStore(OAuthClientStorer):
    """Client store backed by a single MongoDB collection."""

    def __init__(
        self,
        dbclient: AsyncIOMotorClient,
        database: str,
        collection: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize with an existing Motor client.

        Args:
            dbclient: Connected Motor client, owned by the caller
            database: Database holding the client collection
            collection: Client collection name (settings default)
            timeout: Seconds allowed per store call (settings default)

        Raises:
            ValueError: If timeout is not positive
        """
        settings = get_settings()
        if timeout is None:
            timeout = settings.client_store_timeout_seconds
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")

        self.dbclient = dbclient
        self.database = database
        self.collection = collection or settings.oauth_client_collection
        self.timeout = timeout

    def _collection(self) -> AsyncIOMotorCollection:
        return self.dbclient[self.database][self.collection]

    async def _bounded(self, operation: str, call: Awaitable[Any]) -> Any:
        """
        Await a store call, cancelling it once the timeout expires.

        Only expiry of this deadline becomes ClientStoreTimeoutError; a
        TimeoutError raised by the driver itself propagates unchanged.
        """
        deadline = asyncio.timeout(self.timeout)
        try:
            async with deadline:
                return await call
        except TimeoutError:
            if not deadline.expired():
                raise
            logger.warning(
                f"{operation} on {self.database}.{self.collection} "
                f"timed out after {self.timeout}s"
            )
            raise ClientStoreTimeoutError(operation, self.timeout) from None

    async def set(self, info: ClientInfo) -> None:
        """
        Save a client.

        A new document is inserted on every call, even when a client for
        the same user_id already exists.

        Args:
            info: Client information providing secret, domain and user id

        Raises:
            ClientStoreTimeoutError: If the insert exceeds the timeout
            PyMongoError: If the insert fails
        """
        document = ClientDocument.from_info(info)
        result = await self._bounded(
            "insert",
            self._collection().insert_one(document.to_mongo()),
        )
        logger.debug(f"Stored client {result.inserted_id} for user_id {document.user_id}")

    async def get_by_id(self, id: str) -> Client:
        """
        Get a client by its owning user_id.

        Args:
            id: user_id the client was registered under

        Returns:
            Client whose id is the stored ObjectId as string

        Raises:
            ClientNotFoundError: If no client matches
            ClientStoreTimeoutError: If the query exceeds the timeout
            PyMongoError: If the query fails
        """
        doc = await self._bounded(
            "find",
            self._collection().find_one({oauth_db.KEY_CLIENT_ID: id}),
        )

        if doc is None:
            logger.debug(f"No client for user_id {id}")
            raise ClientNotFoundError(id)

        return ClientDocument.model_validate(doc).to_client()

    async def remove_by_id(self, id: str) -> None:
        """
        Delete every client registered under a user_id.

        Removing a user_id with no clients is not an error.

        Raises:
            ClientStoreTimeoutError: If the delete exceeds the timeout
            PyMongoError: If the delete fails
        """
        result = await self._bounded(
            "delete",
            self._collection().delete_many({oauth_db.KEY_CLIENT_ID: id}),
        )
        logger.debug(f"Removed {result.deleted_count} client(s) for user_id {id}")


def new_mongo_client_store(dbclient: AsyncIOMotorClient, dbname: str) -> MongoClientStore:
    """Create a store on the default oauth_client collection."""
    return MongoClientStore(dbclient, dbname)
