"""
Client store interfaces.
"""
from abc import ABC, abstractmethod

from oauth_clientstore.models.client import ClientInfo


class ClientStore(ABC):
    """Client lookup required by the authorization server."""

    @abstractmethod
    async def get_by_id(self, id: str) -> ClientInfo:
        pass


class OAuthClientStorer(ClientStore):
    """Client lookup plus create and delete."""

    @abstractmethod
    async def set(self, info: ClientInfo) -> None:
        pass

    @abstractmethod
    async def remove_by_id(self, id: str) -> None:
        pass
