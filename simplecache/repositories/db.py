"""DuckDB connection management."""

import threading

import duckdb
from loguru import logger

from simplecache.settings import DB_PATH

_local = threading.local()

# Characters a MySQL-style real_escape_string rewrites
_ESCAPES = {
    "\\": "\\\\",
    "\x00": "\\0",
    "\n": "\\n",
    "\r": "\\r",
    "'": "\\'",
    '"': '\\"',
    "\x1a": "\\Z",
}


def escape_string(value: str) -> str:
    """Escape a string the way the storage layer escapes literals."""
    return "".join(_ESCAPES.get(ch, ch) for ch in value)


def open_db(path: str | None = None, read_only: bool = False) -> duckdb.DuckDBPyConnection:
    """Open a new connection (not shared)."""
    path = path or DB_PATH
    conn = duckdb.connect(path, read_only=read_only)
    logger.debug("DB connected: {} (read_only={})", path, read_only)
    return conn


def get_db(read_only: bool = False, path: str | None = None) -> duckdb.DuckDBPyConnection:
    """Get thread-local connection."""
    if not hasattr(_local, "conn") or _local.conn is None:
        _local.conn = open_db(path, read_only=read_only)
    return _local.conn


def close_db() -> None:
    """Close thread-local connection."""
    if hasattr(_local, "conn") and _local.conn:
        _local.conn.close()
        _local.conn = None
        logger.debug("DB connection closed")

