"""Hierarchical keys over a CacheRepository."""

from datetime import datetime
from typing import Any

import duckdb
from loguru import logger

from simplecache.models.cache import Expiry
from simplecache.models.config import CacheConfig
from simplecache.repositories.cache import CacheRepository

DEFAULT_DELIMITER = "/"
DEFAULT_PLACEHOLDER = "_"


class HierarchicalCache:
    """Cache whose keys live under a path-like base, `base/key`.

    Layers are pushed onto and popped off the base. Literal delimiters inside
    a layer or key are replaced by the placeholder so that one layer can never
    read as several.
    """

    def __init__(
        self,
        cache: CacheRepository,
        base: str | None = None,
        delimiter: str | None = None,
        placeholder: str | None = None,
    ):
        self._cache = cache
        self._delimiter = DEFAULT_DELIMITER
        self._placeholder = DEFAULT_PLACEHOLDER

        delimiter = DEFAULT_DELIMITER if delimiter is None else delimiter
        placeholder = DEFAULT_PLACEHOLDER if placeholder is None else placeholder
        if delimiter and placeholder and delimiter != placeholder:
            self._delimiter = delimiter
            self._placeholder = placeholder
        else:
            logger.warning("Rejected delimiter {!r} / placeholder {!r}, using defaults", delimiter, placeholder)

        self._base = self._delimiter if base is None else str(base)

    @classmethod
    def from_config(
        cls,
        config: CacheConfig,
        conn: duckdb.DuckDBPyConnection | None = None,
        **kwargs: Any,
    ) -> "HierarchicalCache":
        return cls(
            CacheRepository.from_config(config, conn, **kwargs),
            base=config.base,
            delimiter=config.delimiter,
            placeholder=config.placeholder,
        )

    @property
    def cache(self) -> CacheRepository:
        return self._cache

    @property
    def base(self) -> str:
        return self._base

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def placeholder(self) -> str:
        return self._placeholder

    def set_delimiter(self, delimiter: str) -> bool:
        """Change the layer delimiter. Must be non-empty and not the placeholder.

        A base still at the root (the old delimiter) moves to the new root;
        any other base is kept as is.
        """
        if delimiter and delimiter != self._placeholder:
            if self._base == self._delimiter:
                self._base = delimiter
            self._delimiter = delimiter
            return True
        logger.warning("Rejected delimiter {!r} (placeholder is {!r})", delimiter, self._placeholder)
        return False

    def set_placeholder(self, placeholder: str) -> bool:
        """Change the placeholder. Must be non-empty and not the delimiter."""
        if placeholder and placeholder != self._delimiter:
            self._placeholder = placeholder
            return True
        logger.warning("Rejected placeholder {!r} (delimiter is {!r})", placeholder, self._delimiter)
        return False

    # --- Keys ---

    def escape_segment(self, segment: str) -> str:
        """Make a segment a single layer."""
        return str(segment).replace(self._delimiter, self._placeholder)

    def resolved_key(self, key: str) -> str:
        """Build the hierarchical key `base/key`."""
        return self._base + self._delimiter + self.escape_segment(key)

    def push(self, segment: str) -> str:
        """Add a layer to the base. Returns the new base."""
        self._base += self._delimiter + self.escape_segment(segment)
        return self._base

    def pop(self) -> str | None:
        """Remove the last layer from the base and return it.

        Returns None, leaving the base alone, when there is nothing to pop:
        the base is empty or is the bare delimiter (root).
        """
        if not self._base or self._base == self._delimiter:
            return None

        layers = self._base.split(self._delimiter)
        layer = layers.pop()
        self._base = self._delimiter.join(layers)
        return layer

    # --- Cache operations ---

    def get(self, key: str, default: Any = None) -> Any:
        return self._cache.get(self.resolved_key(key), default)

    def set(self, key: str, value: Any, lifetime: int | None = None) -> bool:
        return self._cache.set(self.resolved_key(key), value, lifetime)

    def delete(self, key: str) -> bool:
        return self._cache.delete(self.resolved_key(key))

    def exists(self, key: str) -> bool:
        return self._cache.exists(self.resolved_key(key))

    def get_timestamp(self, key: str) -> datetime | None:
        return self._cache.get_timestamp(self.resolved_key(key))

    def get_expiration(self, key: str) -> datetime | Expiry | None:
        return self._cache.get_expiration(self.resolved_key(key))

    def purge_expired(self, include_default_lifetime: bool = False) -> bool:
        return self._cache.purge_expired(include_default_lifetime)

    def set_default_lifetime(self, seconds: int) -> None:
        self._cache.set_default_lifetime(seconds)
