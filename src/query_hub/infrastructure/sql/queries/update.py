from typing import Any, Mapping

from ..statements.from_ import FromStatement, TableMode
from ..statements.limit import LimitStatement
from ..statements.order import OrderStatement
from ..statements.values import SetStatement
from ..statements.where import WhereStatement
from .base import join_fragments
from .mixins import Limit, OrderBy, WhereConditions
from .operations import Executable


class UpdateQuery(Executable, WhereConditions, OrderBy, Limit):
    """
    UPDATE query.

    Example:
        >>> query = UpdateQuery().table("Users").values({"name": "john"}).where("uid", 10)
        >>> query.build()
        'UPDATE `Users` SET `name` = ? WHERE `uid` = ?'
        >>> query.get_values()
        ['john', 10]
    """

    _statements = ("_table", "_set", "_where", "_order_by", "_limit")

    def __init__(self) -> None:
        super().__init__()
        self._table = FromStatement(TableMode.UPDATE)
        self._set = SetStatement()
        self._where = WhereStatement()
        self._order_by = OrderStatement()
        self._limit = LimitStatement()

    def table(self, table: str) -> "UpdateQuery":
        self._table.add_table(table)
        return self

    def values(self, values: Mapping[str, Any]) -> "UpdateQuery":
        self._set.add_values(values)
        return self

    def get_table(self) -> FromStatement:
        return self._table

    def get_set(self) -> SetStatement:
        return self._set

    def build(self) -> str:
        sql = join_fragments(
            [
                self._table.build(),
                self._set.build(),
                self._where.build(),
                self._order_by.build(),
                self._limit.build(),
            ]
        )

        self._values = self._set.get_values() + self._where.get_values()

        return sql
