"""
Execution operations shared by queries.

The built SQL and values are handed to the bound executor. A failed execution
is reported as ``False`` by every operation, never as an exception; errors
raised by the executor itself (e.g. ``PrepareError``) propagate unchanged.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Literal, Union

from .base import AbstractQuery

if TYPE_CHECKING:
    from query_hub.io.connectors.executor import PreparedHandle


class Executable(AbstractQuery):
    def execute(self) -> Union["PreparedHandle", Literal[False]]:
        """
        Execute the query with the bound executor.

        Returns:
            The executed statement handle, or False if execution failed

        Raises:
            ExecutorNotBoundError: If no executor was bound
            PrepareError: If the executor cannot prepare the SQL
        """
        executor = self._require_executor()
        handle = executor.prepare(self.build())

        if not handle.execute(self.get_values()):
            self._handle = None
            return False

        self._handle = handle
        return handle

    def row_count(self) -> int:
        """Get the number of rows affected by the last execution, 0 if it failed."""
        if self._handle is None:
            return 0
        return self._handle.row_count()


class Fetchable(Executable):
    def one(self) -> Union[Dict[str, Any], None, Literal[False]]:
        """Execute and fetch the first row, None when there are no rows."""
        handle = self.execute()
        if handle is False:
            return False
        return handle.fetch_one()

    def all(self) -> Union[List[Dict[str, Any]], Literal[False]]:
        """Execute and fetch every row."""
        handle = self.execute()
        if handle is False:
            return False
        return handle.fetch_all()

    def column(self, index: int = 0) -> Union[List[Any], Literal[False]]:
        """Execute and fetch one column of every row."""
        handle = self.execute()
        if handle is False:
            return False
        return [list(row.values())[index] for row in handle.fetch_all()]

    def scalar(self, index: int = 0) -> Any:
        """Execute and fetch one column of the first row."""
        handle = self.execute()
        if handle is False:
            return False
        return handle.fetch_column(index)
