from typing import Iterable, List, Union

from .base import Statement, split_list


class SelectStatement(Statement):
    """SELECT field list, ``*`` until cleared."""

    def __init__(self) -> None:
        super().__init__()
        self._fields: List[str] = ["*"]

    def add_fields(self, fields: Union[str, Iterable[str]]) -> "SelectStatement":
        """
        Add fields to this statement.

        Supported input styles:
        - add_fields("field1,field2")
        - add_fields(["field1", "field2"])
        """
        self._fields.extend(split_list(fields))
        return self

    def clear_fields(self) -> "SelectStatement":
        self._fields = []
        return self

    def get_fields(self) -> List[str]:
        return list(self._fields)

    def build(self) -> str:
        fields = [self.escape_identifier(field) for field in self._fields]
        fields = [field for field in fields if field]

        if not fields:
            return ""

        return "SELECT " + ", ".join(fields)
