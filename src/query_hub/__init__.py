"""
QueryHub - Parameterized SQL query builder.

Composes SELECT, INSERT, UPDATE and DELETE statements through a fluent
interface, keeping every value out of the SQL text as a positional
placeholder, and executes them over DB-API connections.
"""

from query_hub.infrastructure.sql import (
    DeleteQuery,
    InsertQuery,
    QueryBuilder,
    QueryHubError,
    SelectQuery,
    SqlQuery,
    UpdateQuery,
)
from query_hub.io.connectors.connection_manager import ConnectionManager
from query_hub.io.connectors.executor import DBAPIExecutor

__version__ = "0.1.0"

__all__ = [
    "ConnectionManager",
    "DBAPIExecutor",
    "DeleteQuery",
    "InsertQuery",
    "QueryBuilder",
    "QueryHubError",
    "SelectQuery",
    "SqlQuery",
    "UpdateQuery",
]
