"""
Client store configuration loaded from environment variables.
"""
import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client store settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongo_uri: str = Field(default="mongodb://mongodb:27017")
    oauth_db_name: str = Field(default="oauth_db")
    oauth_client_collection: str = Field(default="oauth_client")

    # Upper bound for every store round trip
    client_store_timeout_seconds: float = Field(default=5.0, gt=0)

    # Logging
    log_level: str = Field(default="INFO")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the value names a logging level."""
        lvl = str(v).upper()
        if not isinstance(logging.getLevelName(lvl), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return lvl


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
