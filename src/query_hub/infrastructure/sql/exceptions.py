"""Exceptions raised at the boundaries of the query builder.

Statement building itself never raises for malformed input: unsafe
identifiers are dropped and invalid limits are ignored. These errors cover
executor binding, statement preparation and connection configuration.
"""

from typing import Dict, Optional


class QueryHubError(Exception):
    """Base class for all QueryHub errors."""

    pass


class ExecutorNotBoundError(QueryHubError):
    """Raised when an operation needs an executor and none was bound."""

    pass


class PrepareError(QueryHubError):
    """Raised when the executor cannot prepare a SQL statement."""

    def __init__(self, sql: str, message: str):
        self.sql = sql
        super().__init__(message)

    def to_dict(self) -> Dict[str, str]:
        """Convert to structured dict for logging."""
        cause = self.__cause__
        return {
            "error_type": "PrepareError",
            "sql": self.sql,
            "message": str(self),
            "original_error_type": type(cause).__name__ if cause else "",
        }


class ConnectionConfigError(QueryHubError):
    """Raised when a connection configuration is missing or invalid."""

    def __init__(self, message: str, connection_id: Optional[str] = None):
        self.connection_id = connection_id
        super().__init__(message)


class ConnectionNotConfiguredError(ConnectionConfigError):
    """Raised when a connection is requested for an unknown identifier."""

    pass


class NoDefaultConnectionError(ConnectionConfigError):
    """Raised when no single default connection can be determined."""

    pass
