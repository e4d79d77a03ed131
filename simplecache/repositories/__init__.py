"""Repositories package - data access layer for the cache database."""

from simplecache.repositories.base import BaseRepository
from simplecache.repositories.cache import DEFAULT_LIFETIME, IMMORTAL_LIFETIME, CacheRepository
from simplecache.repositories.db import (
    close_db,
    escape_string,
    get_db,
    open_db,
)
from simplecache.repositories.hierarchical import HierarchicalCache
from simplecache.repositories.identifiers import validate_identifier
from simplecache.repositories.schema import CacheSchema, SchemaState

__all__ = [
    # DB
    "get_db",
    "open_db",
    "close_db",
    "escape_string",
    # Base
    "BaseRepository",
    # Schema
    "validate_identifier",
    "CacheSchema",
    "SchemaState",
    # Cache
    "CacheRepository",
    "HierarchicalCache",
    "DEFAULT_LIFETIME",
    "IMMORTAL_LIFETIME",
]
