"""
Pydantic models for client documents and the client-info contract.
"""
from oauth_clientstore.models.client import Client, ClientDocument, ClientInfo

__all__ = [
    "Client",
    "ClientDocument",
    "ClientInfo",
]
