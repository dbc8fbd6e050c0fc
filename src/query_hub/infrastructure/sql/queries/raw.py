from typing import Any, Iterable

from .operations import Fetchable


class SqlQuery(Fetchable):
    """Raw SQL with caller-supplied values for its placeholders."""

    def __init__(self) -> None:
        super().__init__()
        self._sql = ""

    def raw(self, sql: str) -> "SqlQuery":
        self._sql = sql
        return self

    def parameters(self, values: Iterable[Any]) -> "SqlQuery":
        self._values = list(values)
        return self

    def build(self) -> str:
        return self._sql

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return (self._sql, self._values) == (other._sql, other._values)  # type: ignore[attr-defined]
