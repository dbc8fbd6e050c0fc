"""
WHERE and HAVING clause builder.

Conditions are registered in many shapes and normalized into the variants of
``conditions.py`` at call time. Rendering turns them into one flat boolean
expression joined with AND, or with OR for the clause directly after an
``OrMarker``, binding values in the order their placeholders appear.
"""

from collections.abc import Mapping
from typing import Any, List, Sequence

from .base import Statement
from .conditions import (
    CONDITION_TYPES,
    Between,
    Comparison,
    Condition,
    Exists,
    Fragment,
    OrMarker,
    Subquery,
    SubqueryBuilder,
)

# Marks an argument the caller did not supply (None is a meaningful value)
MISSING: Any = object()

NULL_OPERATORS = ("=", "<>")

_OR = OrMarker()


class WhereStatement(Statement):
    """
    Condition tree for a WHERE (or HAVING) clause.

    Accepted shapes for ``add_condition``:

    1. Equality comparison: ``add_condition("username", "john")``
    2. Custom operator: ``add_condition("balance", 100, ">")``
    3. IN list: ``add_condition("group", ["admin", "owner"])``
    4. SQL fragment: ``add_condition("name LIKE '%john%'")``
    5. Subquery: ``add_condition(lambda query: query.where(...))``
    6. List of conditions: ``add_condition([["balance", 100, ">"], ["user_id", 5]])``
    7. Map of equality comparisons: ``add_condition({"username": "john", "user_id": 5})``
    8. List of SQL fragments: ``add_condition(["first_name LIKE 'j%'", "last_name LIKE 'd%'"])``

    A ready-made condition (e.g. ``Between(...)``) may also be passed on its own.
    """

    def __init__(self, having: bool = False):
        super().__init__()
        self._having = having
        self._conditions: List[Condition] = []

    def is_having(self) -> bool:
        """Tell whether this statement renders HAVING instead of WHERE."""
        return self._having

    def add_condition(self, field: Any, value: Any = MISSING, operator: str = "=") -> "WhereStatement":
        """
        Add a condition joined with AND.

        Args:
            field: Identifier, SQL fragment, subquery builder, condition,
                or a list/mapping of conditions
            value: Value to compare with (optional)
            operator: Comparison operator, ``=`` by default

        Returns:
            self
        """
        if value is MISSING and isinstance(field, (Mapping, list, tuple)):
            self._add_many(field)
            return self

        if value is MISSING:
            self._conditions.append(self._single(field))
        else:
            self._conditions.append(Comparison(field, operator, value))

        return self

    def add_or_condition(self, field: Any, value: Any = MISSING, operator: str = "=") -> "WhereStatement":
        """Add a condition joined with OR; takes the same arguments as add_condition."""
        self._conditions.append(_OR)
        return self.add_condition(field, value, operator)

    def add_between_condition(self, field: str, a: Any, b: Any) -> "WhereStatement":
        self._conditions.append(Between(field, a, b))
        return self

    def add_not_between_condition(self, field: str, a: Any, b: Any) -> "WhereStatement":
        self._conditions.append(Between(field, a, b, negated=True))
        return self

    def add_exists_condition(self, builder: SubqueryBuilder) -> "WhereStatement":
        self._conditions.append(Exists(builder))
        return self

    def add_not_exists_condition(self, builder: SubqueryBuilder) -> "WhereStatement":
        self._conditions.append(Exists(builder, negated=True))
        return self

    def get_conditions(self) -> List[Condition]:
        return list(self._conditions)

    def _add_many(self, conditions: Any) -> None:
        if isinstance(conditions, Mapping):
            for key, value in conditions.items():
                if isinstance(key, str):
                    self.add_condition(key, value)
                elif isinstance(value, (list, tuple)):
                    self.add_condition(*value)
                else:
                    self.add_condition(value)
            return

        for entry in conditions:
            if isinstance(entry, (list, tuple)):
                self.add_condition(*entry)
            else:
                self.add_condition(entry)

    @staticmethod
    def _single(field: Any) -> Condition:
        if isinstance(field, CONDITION_TYPES):
            return field
        if callable(field):
            return Subquery(field)
        return Fragment(field)

    def build(self) -> str:
        self._params.reset()

        clauses = []
        for condition in self._conditions:
            if isinstance(condition, OrMarker):
                clauses.append(condition)
                continue
            clause = self._build_clause(condition)
            if clause:
                clauses.append(clause)

        sql = self._join_clauses(clauses)
        if not sql:
            return ""

        return ("HAVING " if self._having else "WHERE ") + sql

    def _build_clause(self, condition: Condition) -> str:
        if isinstance(condition, Fragment):
            if condition.sql is None:
                return ""
            return str(condition.sql)

        if isinstance(condition, Exists):
            operator = "NOT EXISTS" if condition.negated else "EXISTS"
            return f"{operator} {self._build_subquery(condition.builder)}"

        if isinstance(condition, Subquery):
            return self._build_subquery(condition.builder)

        if isinstance(condition, Between):
            return self._build_between(condition)

        return self._build_comparison(condition)

    def _build_subquery(self, builder: SubqueryBuilder) -> str:
        # imported here, SelectQuery itself owns WhereStatements
        from ..queries.select import SelectQuery

        query = SelectQuery()
        query.get_select().clear_fields()
        builder(query)
        sql = query.build()
        self._params.extend(query.get_values())

        return f"({sql})"

    def _build_between(self, condition: Between) -> str:
        field = self.escape_identifier(condition.field)
        if not field:
            return ""

        operator = "NOT BETWEEN" if condition.negated else "BETWEEN"
        low = self.parameterize(condition.low)
        high = self.parameterize(condition.high)
        return f"{field} {operator} {low} AND {high}"

    def _build_comparison(self, condition: Comparison) -> str:
        if callable(condition.lhs):
            field = self._build_subquery(condition.lhs)
        else:
            field = self.escape_identifier(condition.lhs)
        if not field:
            return ""

        operator = condition.operator
        value = condition.rhs

        if value is None and operator in NULL_OPERATORS:
            return f"{field} IS NULL" if operator == "=" else f"{field} IS NOT NULL"

        if isinstance(value, (list, tuple)) and operator in NULL_OPERATORS:
            return self._build_in(field, value, operator == "=")

        return f"{field} {operator} {self.parameterize(value)}"

    def _build_in(self, field: str, values: Sequence[Any], is_in: bool) -> str:
        if not values:
            # IN () is always false; NOT IN () is always true
            return "1=0" if is_in else "1=1"

        operator = "IN" if is_in else "NOT IN"
        return f"{field} {operator} {self.parameterize_values(values)}"

    @staticmethod
    def _join_clauses(clauses: List[Any]) -> str:
        sql = ""
        joiner = ""
        for clause in clauses:
            if isinstance(clause, OrMarker):
                joiner = " OR "
                continue

            if joiner and sql:
                sql += joiner
            sql += clause
            joiner = " AND "

        return sql
