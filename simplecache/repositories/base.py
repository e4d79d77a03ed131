"""Base repository class."""

from typing import Any

import duckdb
from loguru import logger


class BaseRepository:
    """Base repository over an optional DuckDB connection."""

    def __init__(self, conn: duckdb.DuckDBPyConnection | None = None):
        self._db: duckdb.DuckDBPyConnection | None = None
        if conn is not None:
            self.set_connection(conn)
        logger.debug("{} initialized", self.__class__.__name__)

    @property
    def connection(self) -> duckdb.DuckDBPyConnection | None:
        return self._db

    def set_connection(self, conn: Any) -> bool:
        """Attach a DuckDB connection. Returns False for anything else."""
        if isinstance(conn, duckdb.DuckDBPyConnection):
            self._db = conn
            return True
        logger.warning("{}: rejected connection of type {}", self.__class__.__name__, type(conn).__name__)
        return False

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        if params:
            return self._db.execute(query, params)
        return self._db.execute(query)

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()
