"""SQLite engine helpers for the display-name cache.

Purpose
-------
Open connections with consistent PRAGMA settings and create the cache schema.

External dependencies
---------------------
- Standard library only (``sqlite3``). No side effects at import time.

Reliability
-----------
- WAL journaling and NORMAL synchronous mode.
- ``busy_timeout`` from ``provider_catalog.config.defaults``.
- ``detect_types`` is not used: ``created_at`` is stored and returned as ISO
  8601 text and parsed explicitly (see ``helpers``).
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Optional

from ...config.defaults import (
    CACHE_DEFAULT_PATH,
    SQLITE_BUSY_TIMEOUT_MS,
    SQLITE_JOURNAL_MODE,
    SQLITE_SYNCHRONOUS,
)

MEMORY_DB = ":memory:"

# ``description_hash`` keeps the column name of existing cache files; it
# holds the full metadata fingerprint.
SCHEMA = """
CREATE TABLE IF NOT EXISTS display_name_cache (
    model_id TEXT NOT NULL,
    description_hash TEXT NOT NULL,
    display_name TEXT NOT NULL,
    created_at TIMESTAMP NOT NULL,
    PRIMARY KEY (model_id, description_hash)
);

CREATE INDEX IF NOT EXISTS idx_model_id ON display_name_cache(model_id);
CREATE INDEX IF NOT EXISTS idx_created_at ON display_name_cache(created_at);
"""


def get_db_path(db_path: Optional[str] = None) -> str:
    """Return the database location as a string.

    ``None`` selects ``CACHE_DEFAULT_PATH``; ``":memory:"`` is passed through;
    other values go through ``Path.expanduser()``.
    """
    if db_path == MEMORY_DB:
        return db_path
    return str(Path(db_path or CACHE_DEFAULT_PATH).expanduser())


def create_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Open a SQLite connection and apply PRAGMA settings.

    The parent directory of a file database is created if missing.

    Raises
    ------
    sqlite3.Error
        When the file cannot be opened or the PRAGMAs fail.
    """
    path = get_db_path(db_path)
    if path != MEMORY_DB:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(path)
    conn.row_factory = sqlite3.Row
    conn.execute(f"PRAGMA journal_mode={SQLITE_JOURNAL_MODE};")
    conn.execute(f"PRAGMA synchronous={SQLITE_SYNCHRONOUS};")
    conn.execute(f"PRAGMA busy_timeout={SQLITE_BUSY_TIMEOUT_MS};")  # ms
    return conn


def init_schema(conn: sqlite3.Connection) -> None:
    """Create the cache table and its indexes if missing, then commit."""
    conn.executescript(SCHEMA)
    conn.commit()


__all__ = ["MEMORY_DB", "SCHEMA", "get_db_path", "create_connection", "init_schema"]
