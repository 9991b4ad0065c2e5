"""
OAuth database configuration.
Stores OAuth2 client registrations.
"""

DB_NAME = "oauth_db"


class Collections:
    """Collection names in oauth_db."""
    CLIENTS = "oauth_client"


# Filter field for client lookups and deletes
KEY_CLIENT_ID = "user_id"
