"""Cache table - one row per key, payload stored as text."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from simplecache.models.base import BaseEntity

CACHE_SEQUENCE_DDL = 'CREATE SEQUENCE IF NOT EXISTS "{table}_id_seq"'

CACHE_DDL = """
CREATE TABLE IF NOT EXISTS "{table}" (
    id BIGINT PRIMARY KEY DEFAULT nextval('"{table}_id_seq"'),
    "{key}" VARCHAR NOT NULL UNIQUE,
    "{payload}" VARCHAR NOT NULL,
    expire TIMESTAMP DEFAULT NULL,
    "timestamp" TIMESTAMP NOT NULL DEFAULT current_timestamp
)
"""

# Older cache tables were created without a per-row expiration
CACHE_UPGRADE_DDL = 'ALTER TABLE "{table}" ADD COLUMN IF NOT EXISTS expire TIMESTAMP DEFAULT NULL'

# Older cache tables allowed several rows per key
CACHE_UNIQUE_KEY_DDL = 'CREATE UNIQUE INDEX IF NOT EXISTS "{table}_{key}_uq" ON "{table}" ("{key}")'


def cache_ddl(table: str, key: str, payload: str) -> list[str]:
    """Statements that create a cache table, in order."""
    return [
        CACHE_SEQUENCE_DDL.format(table=table),
        CACHE_DDL.format(table=table, key=key, payload=payload),
    ]


class Expiry(Enum):
    """Expiration sentinel for rows that never expire on their own."""

    NEVER = "never"


@dataclass
class CacheEntry(BaseEntity):
    """A single cache row."""

    key: str
    payload: str
    timestamp: datetime
    expire: datetime | None = None
    id: int | None = None

    @property
    def immortal(self) -> bool:
        return self.expire is None

    def is_fresh(self, now: datetime) -> bool:
        """Stored expiration is authoritative; no expiration means immortal."""
        return self.expire is None or self.expire > now
