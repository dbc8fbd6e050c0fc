from typing import Any, Iterable, Optional, Union

from ..statements.from_ import FromStatement
from ..statements.limit import LimitStatement
from ..statements.order import OrderStatement
from ..statements.select import SelectStatement
from ..statements.union import UnionStatement
from ..statements.where import MISSING, WhereStatement
from .base import join_fragments
from .mixins import From, Limit, OrderBy, WhereConditions
from .operations import Fetchable


class SelectQuery(Fetchable, From, WhereConditions, OrderBy, Limit):
    """
    SELECT query.

    Example:
        >>> query = SelectQuery().from_("Users").where("uid", 10).limit(100, 10)
        >>> query.build()
        'SELECT * FROM `Users` WHERE `uid` = ? LIMIT 10,100'
        >>> query.get_values()
        [10]
    """

    _statements = ("_select", "_from", "_where", "_group_by", "_having", "_order_by", "_limit", "_union")

    def __init__(self) -> None:
        super().__init__()
        self._select = SelectStatement()
        self._from = FromStatement()
        self._where = WhereStatement()
        self._group_by = OrderStatement(group_by=True)
        self._having = WhereStatement(having=True)
        self._order_by = OrderStatement()
        self._limit = LimitStatement()
        self._union = UnionStatement()

    def select(self, fields: Union[str, Iterable[str]]) -> "SelectQuery":
        """Replace the selected fields."""
        self._select.clear_fields().add_fields(fields)
        return self

    def aggregate(self, function: str, field: str = "*") -> "SelectQuery":
        """Select a single aggregate expression, e.g. ``aggregate("SUM", "total")``."""
        self._select.clear_fields().add_fields([f"{function}({field})"])
        return self

    def count(self, field: str = "*") -> "SelectQuery":
        return self.aggregate("COUNT", field)

    def sum(self, field: str) -> "SelectQuery":
        return self.aggregate("SUM", field)

    def average(self, field: str) -> "SelectQuery":
        return self.aggregate("AVG", field)

    def min(self, field: str) -> "SelectQuery":
        return self.aggregate("MIN", field)

    def max(self, field: str) -> "SelectQuery":
        return self.aggregate("MAX", field)

    def join(
        self,
        tables: Union[str, Iterable[str]],
        on: Optional[str] = None,
        using: Optional[Union[str, Iterable[str]]] = None,
        join_type: str = "JOIN",
    ) -> "SelectQuery":
        self._from.add_join(tables, on, using, join_type)
        return self

    def group_by(self, fields: Union[str, Iterable[Any]], direction: Optional[str] = None) -> "SelectQuery":
        self._group_by.add_fields(fields, direction)
        return self

    def having(self, field: Any, value: Any = MISSING, operator: str = "=") -> "SelectQuery":
        self._having.add_condition(field, value, operator)
        return self

    def or_having(self, field: Any, value: Any = MISSING, operator: str = "=") -> "SelectQuery":
        self._having.add_or_condition(field, value, operator)
        return self

    def union(self, query: "SelectQuery", union_type: Optional[str] = None) -> "SelectQuery":
        self._union.add_query(query, union_type)
        return self

    def get_select(self) -> SelectStatement:
        return self._select

    def get_group_by(self) -> OrderStatement:
        return self._group_by

    def get_having(self) -> WhereStatement:
        return self._having

    def get_union(self) -> UnionStatement:
        return self._union

    def build(self) -> str:
        sql = join_fragments(
            [
                self._select.build(),
                self._from.build(),
                self._where.build(),
                self._group_by.build(),
                self._having.build(),
                self._order_by.build(),
                self._limit.build(),
                self._union.build(),
            ]
        )

        self._values = (
            self._where.get_values() + self._having.get_values() + self._union.get_values()
        )

        # without a SELECT clause the query is a bare condition used as a subquery
        if sql[:6] == "WHERE ":
            return sql[6:]

        return sql
