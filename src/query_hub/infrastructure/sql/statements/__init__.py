"""Clause builders, one per SQL fragment."""

from .base import Statement
from .conditions import (
    Between,
    Comparison,
    Condition,
    Exists,
    Fragment,
    OrMarker,
    Subquery,
    SubqueryBuilder,
)
from .from_ import FromStatement, Join, TableMode
from .limit import LimitStatement
from .order import OrderStatement
from .select import SelectStatement
from .union import UnionStatement
from .values import SetStatement, ValuesStatement
from .where import MISSING, WhereStatement

__all__ = [
    "Statement",
    "Between",
    "Comparison",
    "Condition",
    "Exists",
    "Fragment",
    "OrMarker",
    "Subquery",
    "SubqueryBuilder",
    "FromStatement",
    "Join",
    "TableMode",
    "LimitStatement",
    "OrderStatement",
    "SelectStatement",
    "UnionStatement",
    "SetStatement",
    "ValuesStatement",
    "MISSING",
    "WhereStatement",
]
