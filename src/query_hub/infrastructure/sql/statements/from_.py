"""
Table clause builder shared by all statement kinds.

The same builder renders ``FROM``, ``INSERT INTO``, ``UPDATE`` and
``DELETE FROM`` prefixes, selected by its TableMode, followed by the escaped
table list and any joins.
"""

from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Union

from .base import Statement, split_list


class TableMode(str, Enum):
    """Prefix keyword rendered before the table list."""

    FROM = "FROM"
    INSERT = "INSERT INTO"
    UPDATE = "UPDATE"
    DELETE = "DELETE FROM"


class Join(NamedTuple):
    join_type: str
    tables: List[str]
    on: Optional[str]
    using: List[str]


class FromStatement(Statement):
    def __init__(self, mode: TableMode = TableMode.FROM):
        super().__init__()
        self._mode = mode
        self._tables: List[str] = []
        self._joins: List[Join] = []

    def get_mode(self) -> TableMode:
        return self._mode

    def add_table(self, tables: Union[str, Iterable[str]]) -> "FromStatement":
        """
        Add one or more tables to this statement.

        Supported input styles:
        - add_table("Table,Table2")
        - add_table(["Table", "Table2"])
        """
        self._tables.extend(split_list(tables))
        return self

    def add_join(
        self,
        tables: Union[str, Iterable[str]],
        on: Optional[str] = None,
        using: Optional[Union[str, Iterable[str]]] = None,
        join_type: str = "JOIN",
    ) -> "FromStatement":
        """
        Add a join to this statement.

        Args:
            tables: Table name(s), comma-separated or as a list
            on: ON condition, rendered verbatim
            using: USING column(s), comma-separated or as a list
            join_type: Join keyword, e.g. ``LEFT JOIN`` or ``CROSS JOIN``

        Returns:
            self
        """
        columns = split_list(using) if using is not None else []
        self._joins.append(Join(join_type, split_list(tables), on, columns))
        return self

    def get_tables(self) -> List[str]:
        return list(self._tables)

    def get_joins(self) -> List[Join]:
        return list(self._joins)

    def build(self) -> str:
        tables = [self.escape_identifier(table) for table in self._tables]
        tables = [table for table in tables if table]
        if not tables:
            return ""

        sql = [self._mode.value, ",".join(tables), self._build_joins()]

        return " ".join(part for part in sql if part)

    def _build_joins(self) -> str:
        joins = []
        for join in self._joins:
            tables = [self.escape_identifier(table) for table in join.tables]
            tables = [table for table in tables if table]
            if not tables:
                continue

            parts = [join.join_type, ", ".join(tables)]

            if join.on:
                parts.append(f"ON {join.on}")

            columns = [self.escape_identifier(column) for column in join.using]
            columns = [column for column in columns if column]
            if columns:
                parts.append("USING (" + ", ".join(columns) + ")")

            joins.append(" ".join(parts))

        return " ".join(join for join in joins if join)
