"""
Fluent setters shared between query kinds.

Each mixin forwards to a clause builder attribute that the concrete query
creates in its constructor and returns the query itself.
"""

from typing import Any, Iterable, Optional, Tuple, TypeVar, Union

from ..statements.conditions import SubqueryBuilder
from ..statements.from_ import FromStatement
from ..statements.limit import LimitStatement
from ..statements.order import OrderStatement
from ..statements.where import MISSING, WhereStatement
from .base import AbstractQuery

Q = TypeVar("Q", bound=AbstractQuery)


class WhereConditions(AbstractQuery):
    _where: WhereStatement

    def where(self: Q, field: Any, value: Any = MISSING, operator: str = "=") -> Q:
        """
        Add a WHERE condition joined with AND.

        See ``WhereStatement`` for the accepted shapes, e.g.
        ``where("balance", 10, ">")``, ``where("notes IS NULL")`` or
        ``where({"user_id": 5, "group": ["admin", "owner"]})``.
        """
        self._where.add_condition(field, value, operator)
        return self

    def or_where(self: Q, field: Any, value: Any = MISSING, operator: str = "=") -> Q:
        self._where.add_or_condition(field, value, operator)
        return self

    def where_infix(self: Q, field: Any, operator: Any = MISSING, value: Any = MISSING) -> Q:
        """
        Add a WHERE condition with the operator in the middle.

        ``where_infix("balance", ">", 10)``; with two arguments the second is
        the value to compare for equality.
        """
        self._where.add_condition(*_infix_args(field, operator, value))
        return self

    def or_where_infix(self: Q, field: Any, operator: Any = MISSING, value: Any = MISSING) -> Q:
        self._where.add_or_condition(*_infix_args(field, operator, value))
        return self

    def not_(self: Q, field: Any, value: Any = True) -> Q:
        """Add a ``<>`` condition; ``not_("disabled")`` matches rows where disabled <> true."""
        self._where.add_condition(field, value, "<>")
        return self

    def between(self: Q, field: str, a: Any, b: Any) -> Q:
        self._where.add_between_condition(field, a, b)
        return self

    def not_between(self: Q, field: str, a: Any, b: Any) -> Q:
        self._where.add_not_between_condition(field, a, b)
        return self

    def exists(self: Q, builder: SubqueryBuilder) -> Q:
        self._where.add_exists_condition(builder)
        return self

    def not_exists(self: Q, builder: SubqueryBuilder) -> Q:
        self._where.add_not_exists_condition(builder)
        return self

    def get_where(self) -> WhereStatement:
        return self._where


def _infix_args(field: Any, operator: Any, value: Any) -> Tuple[Any, ...]:
    if operator is MISSING:
        return (field,)
    if value is MISSING:
        return (field, operator)
    return (field, value, operator)


class From(AbstractQuery):
    _from: FromStatement

    def from_(self: Q, tables: Union[str, Iterable[str]]) -> Q:
        self._from.add_table(tables)
        return self

    def get_from(self) -> FromStatement:
        return self._from


class OrderBy(AbstractQuery):
    _order_by: OrderStatement

    def order_by(self: Q, fields: Union[str, Iterable[Any]], direction: Optional[str] = None) -> Q:
        self._order_by.add_fields(fields, direction)
        return self

    def get_order_by(self) -> OrderStatement:
        return self._order_by


class Limit(AbstractQuery):
    _limit: LimitStatement

    def limit(self: Q, limit: Any, offset: Any = 0) -> Q:
        """Set the row limit; a non-numeric limit is ignored."""
        self._limit.set_limit(limit, offset)
        return self

    def get_limit(self) -> LimitStatement:
        return self._limit
