"""
SQL module for composing parameterized statements.

This module provides the clause builders, the statement assemblers built on
top of them, and the QueryBuilder facade that binds queries to an executor.
"""

from .builder import QueryBuilder
from .core.identifier import escape_identifier, is_numeric
from .core.parameters import ParameterAccumulator
from .exceptions import (
    ConnectionConfigError,
    ConnectionNotConfiguredError,
    ExecutorNotBoundError,
    NoDefaultConnectionError,
    PrepareError,
    QueryHubError,
)
from .queries import DeleteQuery, InsertQuery, SelectQuery, SqlQuery, UpdateQuery
from .statements import (
    Between,
    Comparison,
    Exists,
    Fragment,
    OrMarker,
    Subquery,
    TableMode,
)

__all__ = [
    "QueryBuilder",
    "escape_identifier",
    "is_numeric",
    "ParameterAccumulator",
    "ConnectionConfigError",
    "ConnectionNotConfiguredError",
    "ExecutorNotBoundError",
    "NoDefaultConnectionError",
    "PrepareError",
    "QueryHubError",
    "DeleteQuery",
    "InsertQuery",
    "SelectQuery",
    "SqlQuery",
    "UpdateQuery",
    "Between",
    "Comparison",
    "Exists",
    "Fragment",
    "OrMarker",
    "Subquery",
    "TableMode",
]
