"""
Errors raised by the client store.

Driver failures (pymongo.errors.PyMongoError) are not wrapped; they reach
the caller unchanged.
"""


class ClientStoreError(Exception):
    """Base class for client store errors."""


class ClientNotFoundError(ClientStoreError):
    """No client record matches the lookup key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No client registered for user_id '{key}'")


class ClientStoreTimeoutError(ClientStoreError, TimeoutError):
    """The store did not answer before the deadline."""

    def __init__(self, operation: str, timeout: float):
        self.operation = operation
        self.timeout = timeout
        super().__init__(f"Client store {operation} timed out after {timeout}s")
