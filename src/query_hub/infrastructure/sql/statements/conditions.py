"""
Condition types for WHERE and HAVING clauses.

Every input accepted by ``WhereStatement.add_condition`` is normalized into one
of these variants when it is registered, so rendering never has to guess the
shape of a condition.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Union

if TYPE_CHECKING:
    from ..queries.select import SelectQuery

SubqueryBuilder = Callable[["SelectQuery"], None]


@dataclass(frozen=True)
class Fragment:
    """Raw SQL fragment, emitted verbatim."""

    sql: str


@dataclass(frozen=True)
class Comparison:
    """``lhs <operator> rhs`` where lhs is an identifier or a subquery builder."""

    lhs: Union[str, SubqueryBuilder]
    operator: str
    rhs: Any


@dataclass(frozen=True)
class Between:
    field: str
    low: Any
    high: Any
    negated: bool = False


@dataclass(frozen=True)
class Exists:
    builder: SubqueryBuilder
    negated: bool = False


@dataclass(frozen=True)
class Subquery:
    """Bare subquery used as a parenthesised boolean expression."""

    builder: SubqueryBuilder


@dataclass(frozen=True)
class OrMarker:
    """Joins the next condition with OR instead of AND."""


Condition = Union[Fragment, Comparison, Between, Exists, Subquery, OrMarker]

CONDITION_TYPES = (Fragment, Comparison, Between, Exists, Subquery, OrMarker)
