"""
Client store interfaces and implementations.
"""
from oauth_clientstore.stores.base import ClientStore, OAuthClientStorer
from oauth_clientstore.stores.client_store import MongoClientStore, new_mongo_client_store

__all__ = [
    "ClientStore",
    "OAuthClientStorer",
    "MongoClientStore",
    "new_mongo_client_store",
]
