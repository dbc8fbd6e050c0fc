"""
QueryBuilder facade.

Creates queries already bound to an executor, so that callers can go from a
connection straight to execution:

    >>> db = QueryBuilder(executor)
    >>> db.select("name").from_("Users").where("uid", 10).one()
"""

from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional, Union

from .queries import DeleteQuery, InsertQuery, SelectQuery, SqlQuery, UpdateQuery

if TYPE_CHECKING:
    from query_hub.io.connectors.executor import Executor


class QueryBuilder:
    """Factory for queries sharing one prepared-statement executor."""

    def __init__(self, executor: Optional["Executor"] = None):
        self.executor = executor

    def set_executor(self, executor: "Executor") -> "QueryBuilder":
        self.executor = executor
        return self

    def get_executor(self) -> Optional["Executor"]:
        return self.executor

    def select(self, fields: Union[str, Iterable[str]] = "*") -> SelectQuery:
        query = SelectQuery().select(fields)
        return self._bind(query)

    def insert(self, values: Mapping[str, Any]) -> InsertQuery:
        query = InsertQuery().values(values)
        return self._bind(query)

    def update(self, table: str) -> UpdateQuery:
        query = UpdateQuery().table(table)
        return self._bind(query)

    def delete(self, table: str) -> DeleteQuery:
        query = DeleteQuery().from_(table)
        return self._bind(query)

    def raw(self, sql: str) -> SqlQuery:
        query = SqlQuery().raw(sql)
        return self._bind(query)

    def _bind(self, query: Any) -> Any:
        if self.executor is not None:
            query.set_executor(self.executor)
        return query
