"""
MongoDB-backed OAuth2 client store.
"""
from oauth_clientstore.database import create_indexes
from oauth_clientstore.exceptions import (
    ClientNotFoundError,
    ClientStoreError,
    ClientStoreTimeoutError,
)
from oauth_clientstore.logging_config import configure_logging
from oauth_clientstore.models import Client, ClientInfo
from oauth_clientstore.stores import (
    ClientStore,
    MongoClientStore,
    OAuthClientStorer,
    new_mongo_client_store,
)

__all__ = [
    "Client",
    "ClientInfo",
    "ClientStore",
    "OAuthClientStorer",
    "MongoClientStore",
    "new_mongo_client_store",
    "create_indexes",
    "configure_logging",
    "ClientStoreError",
    "ClientNotFoundError",
    "ClientStoreTimeoutError",
]
