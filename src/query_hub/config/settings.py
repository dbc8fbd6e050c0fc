"""
Configuration management for QueryHub.

This module provides environment-based configuration using Pydantic BaseSettings.
Environment variables are loaded with the QH_ prefix; the uppercase logging
fields are read without a prefix so that a process-wide LOG_LEVEL applies.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("QH_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Fields without prefix:
    - LOG_LEVEL: Logging level (uppercase)

    Prefixed fields, e.g. QH_CONNECTIONS_CONFIG:
    - connections_config: YAML file with named connection configurations
    - default_connection: Connection used when none is named
    - log_sql: Log every executed statement at debug level
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )

    connections_config: str = Field(
        default="./config/connections.yml",
        description="Path to the connections configuration file",
    )
    default_connection: Optional[str] = Field(
        default=None,
        description="Connection identifier used when none is given",
    )
    log_sql: bool = Field(
        default=False,
        description="Log executed SQL statements at debug level",
    )

    model_config = SettingsConfigDict(
        env_prefix="QH_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
