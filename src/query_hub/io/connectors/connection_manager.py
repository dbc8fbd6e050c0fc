"""
Named database connections.

ConnectionManager turns connection configurations into QueryBuilder instances
on first use and caches them by identifier. MySQL connections are opened with
PyMySQL, SQLite connections with the standard library driver; both are wrapped
in a DBAPIExecutor that honours the configured error mode.
"""

import sqlite3
import threading
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import pymysql
from pymysql.cursors import DictCursor
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError

from query_hub.config.connections import (
    ConnectionConfig,
    load_connection_configs,
    parse_connection_configs,
)
from query_hub.config.settings import Settings
from query_hub.infrastructure.sql.builder import QueryBuilder
from query_hub.infrastructure.sql.exceptions import (
    ConnectionConfigError,
    ConnectionNotConfiguredError,
    NoDefaultConnectionError,
)
from query_hub.io.connectors.executor import DBAPIExecutor
from query_hub.utils.logging import bind_context, get_logger

logger = get_logger(__name__)

# Connection type -> SQLAlchemy driver name
DRIVER_NAMES = {
    "mysql": "mysql+pymysql",
    "sqlite": "sqlite",
}

DEFAULT_MYSQL_PORT = 3306
DEFAULT_MYSQL_CHARSET = "utf8mb4"


class ConnectionManager:
    """
    Manages one or more named database connections.

    Args:
        configs: Connection configurations by identifier, either validated
            ConnectionConfig instances or raw mappings
        default_connection: Identifier returned by get_default()
        log_sql: Log executed statements at debug level

    Examples:
        >>> manager = ConnectionManager({"local": {"type": "sqlite", "name": ":memory:"}})
        >>> db = manager.get("local")
        >>> db.raw("SELECT 1 AS one").one()
        {'one': 1}
    """

    def __init__(
        self,
        configs: Optional[Mapping[str, Any]] = None,
        default_connection: Optional[str] = None,
        log_sql: bool = False,
    ):
        self.configs: Dict[str, ConnectionConfig] = parse_connection_configs(
            configs or {}
        )
        self.default_connection = default_connection
        self.log_sql = log_sql
        self._connections: Dict[str, QueryBuilder] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path], **kwargs: Any) -> "ConnectionManager":
        """Create a manager from a YAML connections file."""
        return cls(load_connection_configs(config_path), **kwargs)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConnectionManager":
        """Create a manager from application settings."""
        return cls(
            load_connection_configs(settings.connections_config),
            default_connection=settings.default_connection,
            log_sql=settings.log_sql,
        )

    def get(self, connection_id: str) -> QueryBuilder:
        """
        Get a query builder by connection identifier.

        The connection is opened on first use and reused afterwards.

        Raises:
            ConnectionNotConfiguredError: If the identifier is unknown
        """
        with self._lock:
            if connection_id in self._connections:
                return self._connections[connection_id]

            config = self.configs.get(connection_id)
            if config is None:
                raise ConnectionNotConfiguredError(
                    f'No configuration or connection has been supplied for the ID "{connection_id}".',
                    connection_id=connection_id,
                )

            builder = self.build_from_config(config, connection_id)
            self._connections[connection_id] = builder
            return builder

    def get_default(self) -> QueryBuilder:
        """
        Get the default connection.

        The configured default identifier wins; otherwise the manager must know
        exactly one connection.

        Raises:
            NoDefaultConnectionError: If no single default can be determined
        """
        if self.default_connection is not None:
            return self.get(self.default_connection)

        known = set(self.configs) | set(self._connections)
        if len(known) == 1:
            return self.get(known.pop())

        raise NoDefaultConnectionError("There is no default connection.")

    def add(self, connection_id: str, builder: QueryBuilder) -> "ConnectionManager":
        """
        Register an existing query builder.

        Raises:
            ValueError: If a connection with the identifier already exists
        """
        with self._lock:
            if connection_id in self._connections:
                raise ValueError(
                    f'A connection with the ID "{connection_id}" already exists.'
                )
            self._connections[connection_id] = builder
        return self

    def build_from_config(
        self, config: ConnectionConfig, connection_id: str
    ) -> QueryBuilder:
        """
        Open a connection and wrap it in a query builder.

        An explicit ``dsn`` takes precedence over the individual fields; the
        ``user`` and ``password`` fields still apply when the DSN omits them.

        Raises:
            ConnectionConfigError: If the configuration is invalid or names an
                unsupported connection type
        """
        log = bind_context(connection_id=connection_id)
        dsn = config.dsn or self.build_dsn(config, connection_id)
        try:
            url = make_url(dsn)
        except ArgumentError as e:
            raise ConnectionConfigError(
                f'Invalid DSN for configuration "{connection_id}": {e}',
                connection_id=connection_id,
            ) from e

        backend = url.get_backend_name()
        if backend == "mysql":
            connection = pymysql.connect(
                host=url.host or "localhost",
                port=url.port or DEFAULT_MYSQL_PORT,
                user=url.username or config.user,
                password=url.password or config.password or "",
                database=url.database,
                charset=str(url.query.get("charset") or DEFAULT_MYSQL_CHARSET),
                cursorclass=DictCursor,
            )
            paramstyle = pymysql.paramstyle
        elif backend == "sqlite":
            connection = sqlite3.connect(url.database or ":memory:", check_same_thread=False)
            paramstyle = sqlite3.paramstyle
        else:
            raise ConnectionConfigError(
                f'Unsupported connection type "{backend}" for configuration "{connection_id}"',
                connection_id=connection_id,
            )

        log.info(
            "connection.built",
            backend=backend,
            host=url.host,
            database=url.database,
            error_mode=config.error_mode,
        )

        executor = DBAPIExecutor(
            connection,
            paramstyle=paramstyle,
            error_mode=config.error_mode,
            log_sql=self.log_sql,
        )
        return QueryBuilder(executor)

    def build_dsn(self, config: ConnectionConfig, connection_id: str) -> str:
        """
        Build a SQLAlchemy URL string from a connection configuration.

        Examples:
            >>> manager.build_dsn(ConnectionConfig(type="mysql", host="10.0.0.1", name="mydb"), "main")
            'mysql+pymysql://10.0.0.1/mydb'

        Raises:
            ConnectionConfigError: If the configuration has no type
        """
        if not config.type:
            raise ConnectionConfigError(
                f'Missing connection type for configuration "{connection_id}"!',
                connection_id=connection_id,
            )

        url = URL.create(
            DRIVER_NAMES.get(config.type, config.type),
            username=config.user,
            password=config.password or None,
            host=config.host,
            port=config.port,
            database=config.name,
            query={"charset": config.charset} if config.charset else {},
        )
        return url.render_as_string(hide_password=False)

    def close_all(self) -> None:
        """Close every connection opened by this manager."""
        with self._lock:
            for connection_id, builder in self._connections.items():
                executor = builder.get_executor()
                if isinstance(executor, DBAPIExecutor):
                    executor.close()
                    logger.debug("connection.closed", connection_id=connection_id)
            self._connections.clear()
