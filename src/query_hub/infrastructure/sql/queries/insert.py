from typing import Any, Mapping, Optional

from ..statements.from_ import FromStatement, TableMode
from ..statements.values import ValuesStatement
from .base import join_fragments
from .operations import Executable


class InsertQuery(Executable):
    """
    INSERT query.

    Example:
        >>> query = InsertQuery().into("Test").values({"id": 1, "name": "a"})
        >>> query.build()
        'INSERT INTO `Test` (`id`,`name`) VALUES (?,?)'
        >>> query.get_values()
        [1, 'a']
    """

    _statements = ("_table", "_insert_values")

    def __init__(self) -> None:
        super().__init__()
        self._table = FromStatement(TableMode.INSERT)
        self._insert_values = ValuesStatement()
        self._on_duplicate: Optional[str] = None

    def into(self, table: str) -> "InsertQuery":
        self._table.add_table(table)
        return self

    def values(self, values: Mapping[str, Any]) -> "InsertQuery":
        self._insert_values.add_values(values)
        return self

    def on_duplicate_key_update(self, sql: str) -> "InsertQuery":
        """
        Set the ``ON DUPLICATE KEY UPDATE`` clause.

        The SQL is appended verbatim and is not parameterized, e.g.
        ``on_duplicate_key_update("count = count + 1")``.
        """
        self._on_duplicate = sql
        return self

    def get_into(self) -> FromStatement:
        return self._table

    def get_insert_values(self) -> ValuesStatement:
        return self._insert_values

    def get_on_duplicate_key_update(self) -> Optional[str]:
        return self._on_duplicate

    def build(self) -> str:
        sql = [
            self._table.build(),
            self._insert_values.build(),
        ]
        if self._on_duplicate:
            sql.append(f"ON DUPLICATE KEY UPDATE {self._on_duplicate}")

        self._values = self._insert_values.get_values()

        return join_fragments(sql)

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is NotImplemented or not result:
            return result
        return self._on_duplicate == other._on_duplicate  # type: ignore[attr-defined]
