"""
Base class for clause builders.

A statement owns one fragment of a SQL query (e.g. WHERE or LIMIT) plus the
values it binds. Values are collected while building, never while mutating,
so repeated builds of unchanged state always produce the same result.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Union

from ..core.identifier import escape_identifier
from ..core.parameters import ParameterAccumulator


def split_list(items: Union[str, Iterable[str]]) -> List[str]:
    """
    Normalize a comma-separated string or an iterable into a list.

    Examples:
        >>> split_list("a, b,c")
        ['a', 'b', 'c']
        >>> split_list(["a", "b"])
        ['a', 'b']
    """
    if isinstance(items, str):
        return [item.strip() for item in items.split(",")]
    return list(items)


class Statement(ABC):
    """Clause builder rendering a single SQL fragment."""

    def __init__(self) -> None:
        self._params = ParameterAccumulator()

    @abstractmethod
    def build(self) -> str:
        """Generate the SQL fragment for this statement."""

    def get_values(self) -> List[Any]:
        """Get the values bound by the most recent build."""
        return self._params.values

    def escape_identifier(self, word: Any) -> str:
        return escape_identifier(word)

    def parameterize(self, value: Any) -> str:
        return self._params.parameterize(value)

    def parameterize_values(self, values: Iterable[Any]) -> str:
        return self._params.parameterize_values(values)

    def _state(self) -> Dict[str, Any]:
        # bound values are build output, not state
        return {key: value for key, value in vars(self).items() if key != "_params"}

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._state() == other._state()  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._state()!r})"
