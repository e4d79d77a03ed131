"""Persistent key/value cache with per-entry expiration and hierarchical keys."""

from simplecache.errors import (
    CacheError,
    CacheWriteFailed,
    DatabaseNotReady,
    InvalidIdentifier,
    StorageError,
)
from simplecache.models import CacheConfig, CacheEntry, Expiry
from simplecache.repositories import (
    DEFAULT_LIFETIME,
    IMMORTAL_LIFETIME,
    CacheRepository,
    HierarchicalCache,
)
from simplecache.serializers import JsonSerializer, PickleSerializer, Serializer

__all__ = [
    "CacheRepository",
    "HierarchicalCache",
    "CacheConfig",
    "CacheEntry",
    "Expiry",
    "DEFAULT_LIFETIME",
    "IMMORTAL_LIFETIME",
    # Serialization
    "Serializer",
    "JsonSerializer",
    "PickleSerializer",
    # Errors
    "CacheError",
    "InvalidIdentifier",
    "DatabaseNotReady",
    "CacheWriteFailed",
    "StorageError",
]
