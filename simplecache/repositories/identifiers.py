"""Identifier validation for table and column names."""

import duckdb

from simplecache.repositories.db import escape_string


def validate_identifier(token: str, conn: duckdb.DuckDBPyConnection | None) -> bool:
    """Check a name survives the storage escaping primitive unchanged.

    Identifiers cannot be bound as parameters, so they are interpolated into
    statements only after passing this check. Without a connection nothing is
    considered valid.
    """
    if conn is None:
        return False
    if not isinstance(token, str) or not token:
        return False
    return escape_string(token) == token
