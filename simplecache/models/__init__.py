"""Models package - DDL, entities and configuration."""

from simplecache.models.base import BaseEntity
from simplecache.models.cache import (
    CACHE_DDL,
    CACHE_SEQUENCE_DDL,
    CACHE_UNIQUE_KEY_DDL,
    CACHE_UPGRADE_DDL,
    CacheEntry,
    Expiry,
    cache_ddl,
)
from simplecache.models.config import CacheConfig

__all__ = [
    "BaseEntity",
    # Cache table
    "CACHE_DDL",
    "CACHE_SEQUENCE_DDL",
    "CACHE_UNIQUE_KEY_DDL",
    "CACHE_UPGRADE_DDL",
    "cache_ddl",
    "CacheEntry",
    "Expiry",
    # Config
    "CacheConfig",
]
