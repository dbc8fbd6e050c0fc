"""Pytest configuration and shared fixtures.

An optional .env.test file at the repository root is loaded before any
query_hub import, so settings-driven tests can be pointed at local files
without touching the real environment.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

_TEST_ENV_FILE = Path(__file__).parent.parent / ".env.test"
if _TEST_ENV_FILE.exists():
    load_dotenv(_TEST_ENV_FILE, override=True)

import sqlite3
from typing import Generator
from unittest.mock import MagicMock, Mock

import pytest

from query_hub.config.settings import get_settings
from query_hub.infrastructure.sql import QueryBuilder
from query_hub.io.connectors.executor import DBAPIExecutor


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Make every test start from a freshly loaded Settings instance."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_handle() -> Mock:
    """Prepared statement handle whose execution succeeds."""
    handle = Mock()
    handle.execute.return_value = True
    handle.row_count.return_value = 0
    return handle


@pytest.fixture
def mock_executor(mock_handle: Mock) -> MagicMock:
    """Executor that prepares every statement into ``mock_handle``."""
    executor = MagicMock()
    executor.prepare.return_value = mock_handle
    return executor


@pytest.fixture
def sqlite_connection() -> Generator[sqlite3.Connection, None, None]:
    """In-memory SQLite database seeded with a small Users table."""
    connection = sqlite3.connect(":memory:")
    connection.executescript(
        """
        CREATE TABLE Users (
            uid INTEGER PRIMARY KEY,
            first_name TEXT,
            last_name TEXT,
            balance INTEGER,
            disabled INTEGER DEFAULT 0
        );
        INSERT INTO Users VALUES (1, 'john', 'doe', 100, 0);
        INSERT INTO Users VALUES (2, 'jane', 'doe', 250, 0);
        INSERT INTO Users VALUES (3, 'jim', 'beam', 50, 1);
        """
    )
    yield connection
    connection.close()


@pytest.fixture
def sqlite_db(sqlite_connection: sqlite3.Connection) -> QueryBuilder:
    """QueryBuilder bound to the seeded SQLite database."""
    return QueryBuilder(DBAPIExecutor(sqlite_connection, paramstyle=sqlite3.paramstyle))
