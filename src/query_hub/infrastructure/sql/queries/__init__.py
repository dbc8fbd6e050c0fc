"""Statement assemblers for SELECT, INSERT, UPDATE, DELETE and raw SQL."""

from .base import AbstractQuery
from .delete import DeleteQuery
from .insert import InsertQuery
from .raw import SqlQuery
from .select import SelectQuery
from .update import UpdateQuery

__all__ = [
    "AbstractQuery",
    "DeleteQuery",
    "InsertQuery",
    "SqlQuery",
    "SelectQuery",
    "UpdateQuery",
]
