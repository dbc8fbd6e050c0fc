"""
SQL parameter binding utilities.

Values are bound through positional ``?`` placeholders. Each clause builder
owns a ParameterAccumulator which is reset at the start of every render, so
the Nth placeholder emitted always corresponds to the Nth collected value.
"""

from typing import Any, Iterable, List

PLACEHOLDER = "?"


class ParameterAccumulator:
    """
    Ordered collection of values bound during a single render.

    Examples:
        >>> params = ParameterAccumulator()
        >>> params.parameterize("john")
        '?'
        >>> params.parameterize_values([1, 2, 3])
        '(?,?,?)'
        >>> params.values
        ['john', 1, 2, 3]
    """

    def __init__(self) -> None:
        self._values: List[Any] = []

    def parameterize(self, value: Any) -> str:
        """Record a value and return its placeholder."""
        self._values.append(value)
        return PLACEHOLDER

    def parameterize_values(self, values: Iterable[Any]) -> str:
        """Record every value in order and return a parenthesised placeholder list."""
        placeholders = [self.parameterize(value) for value in values]
        return "(" + ",".join(placeholders) + ")"

    def extend(self, values: Iterable[Any]) -> None:
        """Merge the values of a nested render at the current position."""
        self._values.extend(values)

    def reset(self) -> None:
        self._values = []

    @property
    def values(self) -> List[Any]:
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterAccumulator):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"ParameterAccumulator({self._values!r})"
