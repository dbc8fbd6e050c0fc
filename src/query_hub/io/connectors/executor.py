"""
Prepared-statement executor over DB-API 2.0 connections.

Queries render SQL with positional ``?`` placeholders and hand it, together
with the ordered values, to an Executor. This module defines the executor
boundary and an implementation for any DB-API connection (PyMySQL, sqlite3).

Drivers using the ``format``/``pyformat`` paramstyle receive the SQL with
``?`` rewritten to ``%s`` outside of quoted literals and literal ``%`` doubled.
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Literal, Optional, Protocol, Sequence, Type

from query_hub.infrastructure.sql.exceptions import PrepareError
from query_hub.utils.logging import get_logger

logger = get_logger(__name__)

ErrorMode = Literal["silent", "exception"]

FORMAT_PARAMSTYLES = ("format", "pyformat")

_QUOTES = ("'", '"', "`")


class PreparedHandle(Protocol):
    """A prepared statement that can be executed once with bound values."""

    def execute(self, values: Sequence[Any]) -> bool: ...
    def row_count(self) -> int: ...
    def fetch_one(self) -> Optional[Dict[str, Any]]: ...
    def fetch_all(self) -> List[Dict[str, Any]]: ...
    def fetch_column(self, index: int = 0) -> Any: ...


class Executor(Protocol):
    """Prepares SQL strings for execution."""

    def prepare(self, sql: str) -> PreparedHandle: ...


def qmark_to_format(sql: str) -> str:
    """
    Rewrite ``?`` placeholders to ``%s`` for format-style drivers.

    Placeholders inside quoted literals and identifiers are left alone; every
    literal ``%`` is doubled so the driver's interpolation leaves it intact.

    Examples:
        >>> qmark_to_format("SELECT * FROM `t` WHERE `a` = ? AND b LIKE 'x?%'")
        "SELECT * FROM `t` WHERE `a` = %s AND b LIKE 'x?%%'"
    """
    out = []
    quote: Optional[str] = None
    escaped = False

    for char in sql:
        if char == "%":
            out.append("%%")
            escaped = False
            continue

        if quote is not None:
            out.append(char)
            if escaped:
                escaped = False
            elif char == "\\" and quote != "`":
                escaped = True
            elif char == quote:
                quote = None
            continue

        if char in _QUOTES:
            quote = char
            out.append(char)
        elif char == "?":
            out.append("%s")
        else:
            out.append(char)

    return "".join(out)


def _driver_error_class(connection: Any) -> Type[BaseException]:
    # DB-API drivers expose their exception hierarchy on the connection
    error_class = getattr(connection, "Error", None)
    if isinstance(error_class, type) and issubclass(error_class, BaseException):
        return error_class
    return Exception


class DBAPIPreparedStatement:
    """PreparedHandle backed by a DB-API cursor."""

    def __init__(
        self,
        cursor: Any,
        sql: str,
        paramstyle: str = "qmark",
        error_mode: ErrorMode = "silent",
        error_class: Type[BaseException] = Exception,
        log_sql: bool = False,
    ):
        self.cursor = cursor
        self.sql = sql
        self.paramstyle = paramstyle
        self.error_mode = error_mode
        self.error_class = error_class
        self.log_sql = log_sql

    def execute(self, values: Sequence[Any]) -> bool:
        """
        Execute the statement with the given values.

        Returns:
            True on success; False when the driver reports an error and the
            error mode is ``silent``
        """
        params = list(values)
        sql = self.sql
        if params and self.paramstyle in FORMAT_PARAMSTYLES:
            sql = qmark_to_format(sql)

        try:
            if params:
                self.cursor.execute(sql, params)
            else:
                self.cursor.execute(sql)
        except self.error_class as e:
            if self.error_mode == "exception":
                raise
            logger.warning(
                "query.execute_failed",
                sql=self.sql,
                value_count=len(params),
                error_type=type(e).__name__,
                error=str(e),
            )
            return False

        if self.log_sql:
            logger.debug("query.executed", sql=self.sql, value_count=len(params))
        return True

    def row_count(self) -> int:
        return self.cursor.rowcount

    def fetch_one(self) -> Optional[Dict[str, Any]]:
        row = self.cursor.fetchone()
        if row is None:
            return None
        return self._as_dict(row)

    def fetch_all(self) -> List[Dict[str, Any]]:
        return [self._as_dict(row) for row in self.cursor.fetchall()]

    def fetch_column(self, index: int = 0) -> Any:
        """Fetch one column of the next row, None when no rows are left."""
        row = self.fetch_one()
        if row is None:
            return None
        return list(row.values())[index]

    def _as_dict(self, row: Any) -> Dict[str, Any]:
        if isinstance(row, Mapping):
            return dict(row)
        names = [column[0] for column in self.cursor.description or []]
        return dict(zip(names, row))


class DBAPIExecutor:
    """
    Executor for a DB-API 2.0 connection.

    Args:
        connection: Open DB-API connection
        paramstyle: The driver's paramstyle (``qmark`` for sqlite3,
            ``pyformat`` for PyMySQL)
        error_mode: ``silent`` reports failed executions as False,
            ``exception`` lets driver errors propagate
        log_sql: Log every executed statement at debug level
    """

    def __init__(
        self,
        connection: Any,
        paramstyle: str = "qmark",
        error_mode: ErrorMode = "silent",
        log_sql: bool = False,
    ):
        self.connection = connection
        self.paramstyle = paramstyle
        self.error_mode = error_mode
        self.log_sql = log_sql
        self.error_class = _driver_error_class(connection)

    def prepare(self, sql: str) -> DBAPIPreparedStatement:
        """
        Prepare a statement.

        Raises:
            PrepareError: If the SQL is empty or no cursor can be opened
        """
        if not sql or not sql.strip():
            raise PrepareError(sql, "Cannot prepare an empty SQL statement")

        try:
            cursor = self.connection.cursor()
        except self.error_class as e:
            logger.error("query.prepare_failed", sql=sql, error=str(e))
            raise PrepareError(sql, f"Failed to prepare statement: {e}") from e

        return DBAPIPreparedStatement(
            cursor,
            sql,
            paramstyle=self.paramstyle,
            error_mode=self.error_mode,
            error_class=self.error_class,
            log_sql=self.log_sql,
        )

    def commit(self) -> None:
        self.connection.commit()

    def close(self) -> None:
        self.connection.close()
