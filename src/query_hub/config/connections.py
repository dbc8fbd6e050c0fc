"""
Schema and loader for named database connection configurations.

A connections file maps connection identifiers to their parameters:

    connections:
      main:
        type: mysql
        host: 10.0.0.1
        name: mydb
        user: root
        password: ""
      local:
        type: sqlite
        name: ":memory:"
"""

from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional, Union

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from query_hub.infrastructure.sql.exceptions import ConnectionConfigError

logger = structlog.get_logger(__name__)


class ConnectionConfig(BaseModel):
    """Parameters of a single database connection."""

    model_config = ConfigDict(extra="forbid")

    type: Optional[str] = Field(None, description="Driver type: mysql or sqlite")
    host: Optional[str] = Field(None, description="Database host")
    port: Optional[int] = Field(None, description="Database port")
    name: Optional[str] = Field(None, description="Database name (file path for sqlite)")
    charset: Optional[str] = Field(None, description="Connection character set")
    user: Optional[str] = Field(None, description="Database user")
    password: Optional[str] = Field(None, description="Database password")
    dsn: Optional[str] = Field(
        None, description="SQLAlchemy-style URL; overrides the individual fields"
    )
    error_mode: Literal["silent", "exception"] = Field(
        "silent",
        description="silent: failed executions return False; exception: driver errors propagate",
    )


class ConnectionsFile(BaseModel):
    """Schema for the complete connections file."""

    connections: Dict[str, ConnectionConfig] = Field(
        default_factory=dict, description="Connection configurations by identifier"
    )


def parse_connection_configs(
    data: Mapping[str, Any],
) -> Dict[str, ConnectionConfig]:
    """
    Validate raw connection configurations.

    Args:
        data: Mapping of connection identifier to raw parameters

    Returns:
        Mapping of connection identifier to validated ConnectionConfig

    Raises:
        ConnectionConfigError: If any configuration is invalid
    """
    try:
        return ConnectionsFile(connections=dict(data)).connections
    except ValidationError as e:
        raise ConnectionConfigError(f"Connection configuration validation failed: {e}")


def load_connection_configs(
    config_path: Union[str, Path],
) -> Dict[str, ConnectionConfig]:
    """
    Load connection configurations from a YAML file.

    Args:
        config_path: Path to the connections file

    Returns:
        Mapping of connection identifier to validated ConnectionConfig

    Raises:
        ConnectionConfigError: If the file is missing, is not valid YAML or
            fails validation
    """
    config_file = Path(config_path)

    if not config_file.exists():
        logger.error("configuration.file_not_found", config_path=str(config_file))
        raise ConnectionConfigError(f"Connections configuration file not found: {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            raw_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        logger.error(
            "configuration.yaml_parse_error",
            config_path=str(config_file),
            error=str(e),
        )
        raise ConnectionConfigError(f"Invalid YAML in connections file: {e}")

    if not isinstance(raw_config, Mapping):
        raise ConnectionConfigError(
            f"Connections file must contain a mapping, got {type(raw_config).__name__}"
        )

    connections = parse_connection_configs(raw_config.get("connections") or {})
    logger.info(
        "configuration.connections_loaded",
        config_path=str(config_file),
        connection_count=len(connections),
        connections=list(connections.keys()),
    )
    return connections
