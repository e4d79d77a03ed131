"""Cache table schema bootstrap."""

from enum import Enum

import duckdb
from loguru import logger

from simplecache.errors import DatabaseNotReady
from simplecache.models.cache import CACHE_UNIQUE_KEY_DDL, CACHE_UPGRADE_DDL, cache_ddl
from simplecache.repositories.identifiers import validate_identifier


class SchemaState(Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


class CacheSchema:
    """Creates the cache table once; moves Uninitialized -> Ready and stays there."""

    def __init__(self, conn: duckdb.DuckDBPyConnection | None, table: str, key: str, payload: str):
        self._db = conn
        self.table = table
        self.key = key
        self.payload = payload
        self.state = SchemaState.UNINITIALIZED

    @property
    def ready(self) -> bool:
        return self.state is SchemaState.READY

    def ensure_ready(self) -> None:
        """Create the cache table if needed (idempotent)."""
        if self.ready:
            return

        if self._db is None:
            raise DatabaseNotReady("Backing database not initialized: no connection")

        for token in (self.table, self.key, self.payload):
            if not validate_identifier(token, self._db):
                raise DatabaseNotReady(f"Backing database not initialized: `{token}` is not a valid name")

        try:
            for ddl in cache_ddl(self.table, self.key, self.payload):
                self._db.execute(ddl)
            self._upgrade()
        except duckdb.Error as e:
            raise DatabaseNotReady(f"Backing database not initialized: {e}") from e

        self.state = SchemaState.READY
        logger.info("Cache table ready: {}", self.table)

    def _upgrade(self) -> None:
        """Bring tables from older layouts up to date (expire column, unique key)."""
        # Resolve the table the way every later statement will (case-insensitive)
        cursor = self._db.execute(f'SELECT * FROM "{self.table}" LIMIT 0')
        if "expire" not in {d[0].lower() for d in cursor.description}:
            self._db.execute(CACHE_UPGRADE_DDL.format(table=self.table))
            logger.info("Cache table upgraded: {} (added expire)", self.table)

        self._db.execute(CACHE_UNIQUE_KEY_DDL.format(table=self.table, key=self.key))
