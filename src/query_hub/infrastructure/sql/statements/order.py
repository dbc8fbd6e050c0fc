from typing import Iterable, List, Optional, Tuple, Union

from .base import Statement, split_list

DIRECTIONS = ("ASC", "DESC")

OrderField = Tuple[str, Optional[str]]


class OrderStatement(Statement):
    """ORDER BY field list, or GROUP BY when ``group_by`` is set."""

    def __init__(self, group_by: bool = False):
        super().__init__()
        self._group_by = group_by
        self._fields: List[OrderField] = []

    def is_group_by(self) -> bool:
        return self._group_by

    def add_fields(
        self,
        fields: Union[str, Iterable[Union[str, Tuple[str, str]]]],
        direction: Optional[str] = None,
    ) -> "OrderStatement":
        """
        Add fields to order or group by.

        Supported input styles:
        - add_fields("uid", "ASC")
        - add_fields("uid,name")
        - add_fields(["uid", "name"], "DESC")
        - add_fields([("uid", "ASC"), ("name", "DESC")])

        Args:
            fields: Field name(s) or (field, direction) pairs
            direction: Direction applied to fields given without one

        Returns:
            self
        """
        if isinstance(fields, str):
            fields = split_list(fields)

        for field in fields:
            if isinstance(field, (list, tuple)):
                field_direction = field[1] if len(field) > 1 else direction
                self._fields.append((field[0], field_direction))
            else:
                self._fields.append((field, direction))

        return self

    def get_fields(self) -> List[OrderField]:
        return list(self._fields)

    def build(self) -> str:
        rendered = []
        for field, direction in self._fields:
            escaped = self.escape_identifier(field)
            if not escaped:
                continue

            if not self._group_by and direction and direction.upper() in DIRECTIONS:
                escaped = f"{escaped} {direction.upper()}"
            rendered.append(escaped)

        if not rendered:
            return ""

        keyword = "GROUP BY " if self._group_by else "ORDER BY "
        return keyword + ", ".join(rendered)
