"""Shared fixtures: in-memory database and a controllable clock."""

from datetime import datetime, timedelta

import duckdb
import pytest

from simplecache import CacheRepository, HierarchicalCache


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def conn():
    conn = duckdb.connect(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(conn, clock) -> CacheRepository:
    return CacheRepository(conn, clock=clock)


@pytest.fixture
def hcache(cache) -> HierarchicalCache:
    return HierarchicalCache(cache)


@pytest.fixture
def count_rows(conn):
    """Count rows straight from the table, bypassing the cache."""

    def count(table: str = "cache", key_column: str = "key", key: str | None = None) -> int:
        if key is None:
            return conn.execute(f'SELECT COUNT(*) FROM "{table}"').fetchone()[0]
        return conn.execute(f'SELECT COUNT(*) FROM "{table}" WHERE "{key_column}" = ?', [key]).fetchone()[0]

    return count
