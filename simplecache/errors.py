"""Cache errors."""


class CacheError(Exception):
    """Base class for all cache errors."""

    def __init__(self, message: str = "Cache error"):
        self.message = message
        super().__init__(self.message)


class InvalidIdentifier(CacheError):
    """Table or column name is not safe to interpolate into SQL."""

    def __init__(self, message: str = "Invalid identifier"):
        super().__init__(message)


class DatabaseNotReady(CacheError):
    """Backing table could not be created or reached."""

    def __init__(self, message: str = "Backing database not initialized"):
        super().__init__(message)


class CacheWriteFailed(CacheError):
    """Storage rejected a cache write."""

    def __init__(self, message: str = "Could not write cache data"):
        super().__init__(message)


class StorageError(CacheError):
    """Any other backend failure on read, delete or purge."""

    def __init__(self, message: str = "Storage error"):
        super().__init__(message)
