"""
Database module - MongoDB connection, database definitions and indexes.
"""
from oauth_clientstore.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
)
from oauth_clientstore.database.databases import oauth_db
from oauth_clientstore.database.registry import create_indexes

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "create_indexes",
    "oauth_db",
]
