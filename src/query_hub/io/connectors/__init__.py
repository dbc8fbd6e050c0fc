"""Database connectors for executing built queries.

Keep this package import lightweight: the executor only needs a DB-API
connection, while the connection manager pulls in PyMySQL and SQLAlchemy.
The manager is therefore loaded lazily.
"""

from __future__ import annotations

import importlib
from typing import Any

from .executor import (
    DBAPIExecutor,
    DBAPIPreparedStatement,
    Executor,
    PreparedHandle,
    qmark_to_format,
)

__all__ = [
    "DBAPIExecutor",
    "DBAPIPreparedStatement",
    "Executor",
    "PreparedHandle",
    "qmark_to_format",
    "ConnectionManager",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "ConnectionManager": (".connection_manager", "ConnectionManager"),
}


def __getattr__(name: str) -> Any:
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_name, attr_name = _LAZY_IMPORTS[name]
    module = importlib.import_module(module_name, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(list(globals().keys()) + list(_LAZY_IMPORTS.keys())))
