from typing import TYPE_CHECKING, List, Optional, Tuple

from .base import Statement

if TYPE_CHECKING:
    from ..queries.select import SelectQuery


class UnionStatement(Statement):
    """UNION clauses appended after the outer SELECT."""

    def __init__(self) -> None:
        super().__init__()
        self._queries: List[Tuple["SelectQuery", Optional[str]]] = []

    def add_query(self, query: "SelectQuery", union_type: Optional[str] = None) -> "UnionStatement":
        """
        Union another select query.

        Args:
            query: Query to union
            union_type: Optional union type, e.g. ``ALL`` or ``DISTINCT``

        Returns:
            self
        """
        self._queries.append((query, union_type or None))
        return self

    def get_queries(self) -> List[Tuple["SelectQuery", Optional[str]]]:
        return list(self._queries)

    def build(self) -> str:
        self._params.reset()

        parts = []
        for query, union_type in self._queries:
            keyword = f"UNION {union_type}" if union_type else "UNION"
            parts.append(f"{keyword} {query.build()}")
            self._params.extend(query.get_values())

        return " ".join(parts)
