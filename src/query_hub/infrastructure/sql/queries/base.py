"""
Base class for statement assemblers.

A query owns a fixed set of clause builders. ``build()`` renders them in the
query's clause order, drops empty fragments, joins the rest with single
spaces and collects the bound values of every builder in the same order.
"""

import copy
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple, TypeVar

from ..exceptions import ExecutorNotBoundError

if TYPE_CHECKING:
    from query_hub.io.connectors.executor import Executor, PreparedHandle

Q = TypeVar("Q", bound="AbstractQuery")


def join_fragments(fragments: List[str]) -> str:
    return " ".join(fragment for fragment in fragments if fragment)


class AbstractQuery(ABC):
    """Common state of all queries: the bound executor and the last build's values."""

    # attribute names of the clause builders owned by the query
    _statements: Tuple[str, ...] = ()

    def __init__(self) -> None:
        self._executor: Optional["Executor"] = None
        self._handle: Optional["PreparedHandle"] = None
        self._values: List[Any] = []

    def set_executor(self: Q, executor: "Executor") -> Q:
        """Bind the prepared-statement executor used by execution operations."""
        self._executor = executor
        return self

    def get_executor(self) -> Optional["Executor"]:
        return self._executor

    def _require_executor(self) -> "Executor":
        if self._executor is None:
            raise ExecutorNotBoundError(
                f"{type(self).__name__} has no executor; call set_executor() first"
            )
        return self._executor

    @abstractmethod
    def build(self) -> str:
        """Generate the raw SQL string for the query."""

    def get_values(self) -> List[Any]:
        """Get the values bound by the most recent build, in placeholder order."""
        return list(self._values)

    def clone(self: Q) -> Q:
        """
        Copy the query so that the copy can be changed independently.

        Every clause builder is deep-copied; the executor is shared.
        """
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        for name in self._statements:
            setattr(clone, name, copy.deepcopy(getattr(self, name)))
        clone._values = list(self._values)
        clone._handle = None
        return clone

    def __copy__(self: Q) -> Q:
        return self.clone()

    def __deepcopy__(self: Q, memo: Dict[int, Any]) -> Q:
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self._statements)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.build()
