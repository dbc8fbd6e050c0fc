"""Configuration management for QueryHub.

Usage:
    >>> from query_hub.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.LOG_LEVEL)
"""

from query_hub.config.connections import (
    ConnectionConfig,
    load_connection_configs,
    parse_connection_configs,
)
from query_hub.config.settings import Settings, get_settings

__all__ = [
    "ConnectionConfig",
    "Settings",
    "get_settings",
    "load_connection_configs",
    "parse_connection_configs",
]
