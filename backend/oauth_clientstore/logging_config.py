"""
Logging setup shared by processes embedding the client store.
"""
import logging
from typing import Optional

from oauth_clientstore.config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str) -> int:
    """
    Map a level name to its numeric value.

    Raises:
        ValueError: If the name is not a logging level
    """
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging.

    Args:
        level: Level name (e.g. "DEBUG"); defaults to settings.log_level

    Raises:
        ValueError: If the level name is unknown
    """
    if level is None:
        level = get_settings().log_level

    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
