"""Cache repository - key/value rows with per-row expiration."""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

import duckdb
from loguru import logger

from simplecache.errors import CacheWriteFailed, DatabaseNotReady, InvalidIdentifier, StorageError
from simplecache.models.cache import CacheEntry, Expiry
from simplecache.models.config import CacheConfig
from simplecache.repositories.base import BaseRepository
from simplecache.repositories.db import get_db, open_db
from simplecache.repositories.identifiers import validate_identifier
from simplecache.repositories.schema import CacheSchema
from simplecache.serializers import JsonSerializer, Serializer

# Default cache lifetime (1 hour)
DEFAULT_LIFETIME = 3600

# Lifetime of data that never expires
IMMORTAL_LIFETIME = 0


def utcnow() -> datetime:
    """Current UTC time, naive (DuckDB TIMESTAMP)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class CacheRepository(BaseRepository):
    """Key/value cache backed by a DuckDB table.

    Values are serialized to text and stored one row per key. Every write
    stores an absolute expiration computed from the explicit lifetime, or from
    the default lifetime when none is given; a lifetime of IMMORTAL_LIFETIME
    stores no expiration at all. The table is created lazily on first access.
    """

    def __init__(
        self,
        conn: duckdb.DuckDBPyConnection | None = None,
        table: str | None = None,
        key_column: str | None = None,
        payload_column: str | None = None,
        purge: bool = False,
        lifetime: int = DEFAULT_LIFETIME,
        serializer: Serializer | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._table = "cache"
        self._key = "key"
        self._payload = "cache"
        self._lifetime = DEFAULT_LIFETIME
        self._schema: CacheSchema | None = None
        self._serializer = serializer or JsonSerializer()
        self._clock = clock or utcnow
        super().__init__(conn)

        if table:
            self.set_table_name(table)
        if key_column:
            self.set_key_name(key_column)
        if payload_column:
            self.set_payload_name(payload_column)
        self.set_default_lifetime(lifetime)

        if purge:
            self.purge_expired()

    @classmethod
    def from_config(
        cls,
        config: CacheConfig,
        conn: duckdb.DuckDBPyConnection | None = None,
        **kwargs: Any,
    ) -> "CacheRepository":
        """Build a cache from config, on the shared connection by default."""
        return cls(
            conn if conn is not None else get_db(),
            table=config.table,
            key_column=config.key_column,
            payload_column=config.payload_column,
            lifetime=config.default_lifetime_seconds,
            **kwargs,
        )

    # --- Configuration ---

    @property
    def table(self) -> str:
        return self._table

    @property
    def key_column(self) -> str:
        return self._key

    @property
    def payload_column(self) -> str:
        return self._payload

    @property
    def default_lifetime(self) -> int:
        return self._lifetime

    @property
    def ready(self) -> bool:
        return self._schema is not None and self._schema.ready

    def set_connection(self, conn: Any) -> bool:
        if super().set_connection(conn):
            self._schema = None
            return True
        return False

    def connect(self, path: str | None = None) -> bool:
        """Open a dedicated connection to a database file."""
        return self.set_connection(open_db(path))

    def validate_token(self, token: str) -> bool:
        """Check a table/column name is safe to use in SQL."""
        return validate_identifier(token, self._db)

    def set_table_name(self, table: str) -> bool:
        return self._set_identifier("_table", table, "table")

    def set_key_name(self, key: str) -> bool:
        return self._set_identifier("_key", key, "field")

    def set_payload_name(self, payload: str) -> bool:
        return self._set_identifier("_payload", payload, "field")

    def _set_identifier(self, attr: str, token: str, kind: str) -> bool:
        if self._db is None:
            logger.warning("Cannot set {} name `{}` without a connection", kind, token)
            return False
        if not self.validate_token(token):
            raise InvalidIdentifier(f"`{token}` is not a valid {kind} name")
        if getattr(self, attr) != token:
            setattr(self, attr, token)
            # Renaming targets another table, it does not rename the old one
            self._schema = None
        return True

    def set_default_lifetime(self, seconds: int = DEFAULT_LIFETIME) -> None:
        """Lifetime for writes without an explicit one. Negative means 0 (immortal)."""
        self._lifetime = max(0, int(seconds))

    # --- Schema ---

    def ensure_ready(self) -> None:
        """Create the cache table if it does not exist yet."""
        if self._schema is None:
            self._schema = CacheSchema(self._db, self._table, self._key, self._payload)
        self._schema.ensure_ready()

    def build_cache(
        self,
        table: str | None = None,
        key_column: str | None = None,
        payload_column: str | None = None,
    ) -> bool:
        """Optionally rename, then create the cache table. False on failure."""
        if self._db is None:
            return False
        if table is not None:
            self.set_table_name(table)
        if key_column is not None:
            self.set_key_name(key_column)
        if payload_column is not None:
            self.set_payload_name(payload_column)

        try:
            self.ensure_ready()
        except DatabaseNotReady as e:
            logger.warning("Cache table not built: {}", e.message)
            return False
        return True

    # --- Cache operations ---

    def get(self, key: str, default: Any = None) -> Any:
        """Get fresh cached data, or default on a miss."""
        self.ensure_ready()
        row = self._fetchone(
            f"""
            SELECT "{self._payload}" FROM "{self._table}"
            WHERE "{self._key}" = ? AND (expire IS NULL OR expire > ?)
            ORDER BY "timestamp" DESC
            LIMIT 1
            """,
            [key, self._clock()],
        )
        if row is None:
            logger.debug("Cache miss: {}", key)
            return default

        logger.debug("Cache hit: {}", key)
        return self._serializer.loads(row[0])

    def set(self, key: str, value: Any, lifetime: int | None = None) -> bool:
        """Store data, replacing any existing row for the key."""
        self.ensure_ready()
        payload = self._serializer.dumps(value)
        now = self._clock()
        expire = self._expiration(now, lifetime)

        try:
            self.execute(
                f"""
                INSERT INTO "{self._table}" ("{self._key}", "{self._payload}", expire, "timestamp")
                VALUES (?, ?, ?, ?)
                ON CONFLICT ("{self._key}") DO UPDATE SET
                    "{self._payload}" = excluded."{self._payload}",
                    expire = excluded.expire,
                    "timestamp" = excluded."timestamp"
                """,
                [key, payload, expire, now],
            )
        except duckdb.Error as e:
            raise CacheWriteFailed(f"Could not write cache data for `{key}`: {e}") from e

        logger.debug("Cache saved: {} (expire={})", key, expire)
        return True

    def delete(self, key: str) -> bool:
        """Remove cached data. Removing a missing key succeeds."""
        self.ensure_ready()
        self._run(f'DELETE FROM "{self._table}" WHERE "{self._key}" = ?', [key])
        logger.debug("Cache deleted: {}", key)
        return True

    def purge_expired(self, include_default_lifetime: bool = False) -> bool:
        """Delete rows whose stored expiration has passed.

        With include_default_lifetime, rows without an expiration that are
        older than the current default lifetime are deleted too.
        """
        self.ensure_ready()
        now = self._clock()
        query = f'DELETE FROM "{self._table}" WHERE (expire IS NOT NULL AND expire < ?)'
        params: list = [now]
        if include_default_lifetime and self._lifetime != IMMORTAL_LIFETIME:
            query += ' OR (expire IS NULL AND "timestamp" < ?)'
            params.append(now - timedelta(seconds=self._lifetime))

        row = self._run(query, params).fetchone()
        logger.info("Purged {} expired rows from {}", row[0] if row else 0, self._table)
        return True

    def exists(self, key: str) -> bool:
        """Check if the key has fresh data."""
        self.ensure_ready()
        row = self._fetchone(
            f"""
            SELECT COUNT(*) FROM "{self._table}"
            WHERE "{self._key}" = ? AND (expire IS NULL OR expire > ?)
            """,
            [key, self._clock()],
        )
        return row[0] > 0

    def get_entry(self, key: str) -> CacheEntry | None:
        """Raw row for the key, fresh or not."""
        self.ensure_ready()
        row = self._fetchone(
            f"""
            SELECT id, "{self._key}", "{self._payload}", expire, "timestamp" FROM "{self._table}"
            WHERE "{self._key}" = ?
            ORDER BY "timestamp" DESC
            LIMIT 1
            """,
            [key],
        )
        if row is None:
            return None
        return CacheEntry(id=row[0], key=row[1], payload=row[2], expire=row[3], timestamp=row[4])

    def get_timestamp(self, key: str) -> datetime | None:
        """When the row was last written, or None if there is no row."""
        entry = self.get_entry(key)
        return entry.timestamp if entry else None

    def get_expiration(self, key: str) -> datetime | Expiry | None:
        """Stored expiration, Expiry.NEVER if immortal, None if there is no row."""
        entry = self.get_entry(key)
        if entry is None:
            return None
        return Expiry.NEVER if entry.immortal else entry.expire

    # --- Helpers ---

    def _expiration(self, now: datetime, lifetime: int | None) -> datetime | None:
        lifetime = self._lifetime if lifetime is None else int(lifetime)
        if lifetime == IMMORTAL_LIFETIME:
            return None
        return now + timedelta(seconds=lifetime)

    def _run(self, query: str, params: list) -> Any:
        try:
            return self.execute(query, params)
        except duckdb.Error as e:
            raise StorageError(f"Query on `{self._table}` failed: {e}") from e

    def _fetchone(self, query: str, params: list) -> Any:
        try:
            return self.fetchone(query, params)
        except duckdb.Error as e:
            raise StorageError(f"Query on `{self._table}` failed: {e}") from e
