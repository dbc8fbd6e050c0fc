"""
Infrastructure Layer

Components:
- sql: identifier escaping, parameter binding, clause builders and queries

Usage:
    from query_hub.infrastructure.sql import SelectQuery, InsertQuery
"""

__all__: list[str] = []
