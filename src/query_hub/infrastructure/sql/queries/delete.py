from ..statements.from_ import FromStatement, TableMode
from ..statements.limit import LimitStatement
from ..statements.order import OrderStatement
from ..statements.where import WhereStatement
from .base import join_fragments
from .mixins import From, Limit, OrderBy, WhereConditions
from .operations import Executable


class DeleteQuery(Executable, From, WhereConditions, OrderBy, Limit):
    """DELETE query."""

    _statements = ("_from", "_where", "_order_by", "_limit")

    def __init__(self) -> None:
        super().__init__()
        self._from = FromStatement(TableMode.DELETE)
        self._where = WhereStatement()
        self._order_by = OrderStatement()
        self._limit = LimitStatement()

    def build(self) -> str:
        sql = join_fragments(
            [
                self._from.build(),
                self._where.build(),
                self._order_by.build(),
                self._limit.build(),
            ]
        )

        self._values = self._where.get_values()

        return sql
