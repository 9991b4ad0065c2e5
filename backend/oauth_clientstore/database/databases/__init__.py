"""
Database definitions and collection constants.
"""
from oauth_clientstore.database.databases import oauth_db

__all__ = ["oauth_db"]
