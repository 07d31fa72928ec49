"""Base repository class."""

from typing import Any

import duckdb
from loguru import logger

from app.errors import StorageFault
from app.repositories.db import get_db


class BaseRepository:
    """Base repository with common functionality."""

    def __init__(self, read_only: bool = False, conn: duckdb.DuckDBPyConnection | None = None):
        self._db = conn if conn is not None else get_db(read_only)
        self._read_only = read_only
        logger.debug("{} initialized", self.__class__.__name__)

    def _require_writable(self, operation: str) -> None:
        if self._read_only:
            raise StorageFault(f"Cannot {operation} in read-only mode")

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        try:
            if params:
                return self._db.execute(query, params)
            return self._db.execute(query)
        except duckdb.Error as e:
            raise StorageFault(f"Database error: {e}") from e

    def register(self, name: str, frame: Any) -> None:
        """Expose a DataFrame to SQL as a view."""
        try:
            self._db.register(name, frame)
        except duckdb.Error as e:
            raise StorageFault(f"Cannot register {name}: {e}") from e

    def unregister(self, name: str) -> None:
        """Drop a registered view. Failures are logged so an error in flight is not replaced."""
        try:
            self._db.unregister(name)
        except duckdb.Error as e:
            logger.warning("Failed to unregister {}: {}", name, e)

    def rollback(self) -> None:
        """Abort the open transaction. Failures are logged so the causing error propagates."""
        try:
            self._db.execute("ROLLBACK")
        except duckdb.Error as e:
            logger.error("Rollback failed: {}", e)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()
