"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("SIMPLECACHE_DB_PATH", "simplecache.duckdb")

# Cache table
CACHE_TABLE = os.getenv("SIMPLECACHE_TABLE", "cache")
CACHE_KEY_COLUMN = os.getenv("SIMPLECACHE_KEY_COLUMN", "key")
CACHE_PAYLOAD_COLUMN = os.getenv("SIMPLECACHE_PAYLOAD_COLUMN", "cache")
CACHE_DEFAULT_LIFETIME = int(os.getenv("SIMPLECACHE_DEFAULT_LIFETIME", "3600"))

# Hierarchy
HIERARCHY_BASE = os.getenv("SIMPLECACHE_HIERARCHY_BASE")
HIERARCHY_DELIMITER = os.getenv("SIMPLECACHE_HIERARCHY_DELIMITER", "/")
HIERARCHY_PLACEHOLDER = os.getenv("SIMPLECACHE_HIERARCHY_PLACEHOLDER", "_")

# Logging
LOG_DIR = Path(os.getenv("SIMPLECACHE_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("SIMPLECACHE_LOG_LEVEL", "INFO")
