from typing import Any, Dict, List, Mapping, Tuple

from .base import Statement


class ValuesStatement(Statement):
    """
    Column/value assignments rendered as ``(k1,k2) VALUES (?,?)``.

    Later calls to ``add_values`` overwrite earlier entries by key; a key keeps
    the position where it was first added.
    """

    def __init__(self) -> None:
        super().__init__()
        self._data: Dict[str, Any] = {}

    def add_values(self, values: Mapping[str, Any]) -> "ValuesStatement":
        self._data.update(values)
        return self

    def get_data(self) -> Dict[str, Any]:
        return dict(self._data)

    def _escaped_items(self) -> List[Tuple[str, Any]]:
        # keys that fail escaping are dropped together with their values
        items = [(self.escape_identifier(key), value) for key, value in self._data.items()]
        return [(key, value) for key, value in items if key]

    def build(self) -> str:
        self._params.reset()

        items = self._escaped_items()
        if not items:
            return ""

        keys = ",".join(key for key, _ in items)
        placeholders = self.parameterize_values(value for _, value in items)
        return f"({keys}) VALUES {placeholders}"


class SetStatement(ValuesStatement):
    """Column/value assignments rendered as ``SET k1 = ?, k2 = ?``."""

    def build(self) -> str:
        self._params.reset()

        items = self._escaped_items()
        if not items:
            return ""

        assignments = [f"{key} = {self.parameterize(value)}" for key, value in items]
        return "SET " + ", ".join(assignments)
