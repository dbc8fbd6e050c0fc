import math
from typing import Any, Optional

from ..core.identifier import is_numeric
from .base import Statement


def _to_count(value: Any) -> Optional[int]:
    """Convert ``value`` to a row count, or None if it is not a finite, non-negative number."""
    if not is_numeric(value):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    if not math.isfinite(number) or number < 0:
        return None
    return int(number)


class LimitStatement(Statement):
    """
    LIMIT clause with an optional offset.

    A non-numeric, non-finite or negative limit leaves the statement
    untouched, keeping whatever limit and offset were set before.
    """

    def __init__(self) -> None:
        super().__init__()
        self._limit: Optional[int] = None
        self._start = 0

    def set_limit(self, limit: Any, start: Any = 0) -> "LimitStatement":
        count = _to_count(limit)
        if count is None:
            return self

        self._limit = count
        self._start = _to_count(start) or 0

        return self

    def get_limit(self) -> Optional[int]:
        return self._limit

    def get_start(self) -> int:
        return self._start

    def build(self) -> str:
        if self._limit is None:
            return ""

        if self._start > 0:
            return f"LIMIT {self._start},{self._limit}"

        return f"LIMIT {self._limit}"
