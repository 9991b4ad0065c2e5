"""
OAuth2 client models.
"""
from typing import Protocol, runtime_checkable

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field


@runtime_checkable
class ClientInfo(Protocol):
    """Client information consumed by the authorization server."""

    def get_id(self) -> str: ...

    def get_secret(self) -> str: ...

    def get_domain(self) -> str: ...

    def get_user_id(self) -> str: ...


class Client(BaseModel):
    """
    Client registration as seen by the authorization server.

    `id` is the string form of the stored document's ObjectId. It is empty
    for clients that have not been read back from the store.
    """
    id: str = Field(default="", description="Stored ObjectId as string")
    secret: str = Field(..., description="Shared client secret")
    domain: str = Field(..., description="Redirect/callback domain")
    user_id: str = Field(..., description="Owning user, used as lookup key")

    def get_id(self) -> str:
        return self.id

    def get_secret(self) -> str:
        return self.secret

    def get_domain(self) -> str:
        return self.domain

    def get_user_id(self) -> str:
        return self.user_id


class ClientDocument(BaseModel):
    """
    Client document model for the oauth_db.oauth_client collection.
    """
    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    # Only store-generated ids for now
    id: ObjectId | None = Field(None, alias="_id")
    secret: str
    domain: str
    user_id: str

    @classmethod
    def from_info(cls, info: ClientInfo) -> "ClientDocument":
        """Build an insertable document from any client-info object."""
        return cls(
            secret=info.get_secret(),
            domain=info.get_domain(),
            user_id=info.get_user_id(),
        )

    def to_mongo(self) -> dict:
        """Document body for insert; `_id` is left out unless set."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_client(self) -> Client:
        return Client(
            id=str(self.id) if self.id is not None else "",
            secret=self.secret,
            domain=self.domain,
            user_id=self.user_id,
        )
