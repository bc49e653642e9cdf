"""SQLite-backed display-name cache.

Maps ``(model_id, fingerprint)`` to a generated display name so later runs
skip the generation call for variants whose metadata has not changed.

Write policy
------------
Only externally generated names are stored. Fallback names (the raw
identifier) are never written: caching them would suppress generation for
that variant even after the generation service becomes available again.

Failure Modes
-------------
- Opening the store raises ``CatalogError(STORAGE)``; the run cannot proceed.
- ``get`` logs storage errors and reports a miss.
- ``set``, ``clean_old_entries`` and ``stats`` raise ``CatalogError(STORAGE)``;
  callers decide whether the failure matters (the namers only log it).

Concurrency
-----------
One connection, one writer, used sequentially for a whole run. The age sweep
runs before any resolution so it can only remove rows older than the cutoff,
never rows written during the same run.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from ...base.dto import CatalogModel
from ...base.errors import CatalogError, ErrorCode
from ...base.logging import LogContext, get_logger, log_event
from ...naming.fingerprint import cache_key
from ..interfaces.stores import CacheEntry
from .engine import create_connection, init_schema
from .helpers import _entry_from_row, _format_timestamp, utcnow

_logger = get_logger("catalog.cache")


class DisplayNameCache:
    """Persistent ``DisplayNameStore`` over a single SQLite connection.

    Parameters
    ----------
    conn:
        Open connection with the cache schema initialized. Prefer
        :meth:`open` which does both.
    clock:
        Returns the current aware UTC time; injectable for tests.
    """

    def __init__(self, conn: sqlite3.Connection, *, clock: Callable[[], datetime] = utcnow) -> None:
        self._conn = conn
        self._clock = clock

    @classmethod
    def open(cls, db_path: Optional[str] = None, *, clock: Callable[[], datetime] = utcnow) -> "DisplayNameCache":
        """Open (creating if needed) the cache database at ``db_path``.

        Raises
        ------
        CatalogError
            ``STORAGE`` when the file cannot be opened or initialized.
        """
        try:
            conn = create_connection(db_path)
        except (sqlite3.Error, OSError) as e:
            raise CatalogError(ErrorCode.STORAGE, f"failed to open cache database: {e}", source="cache", raw=e) from e
        try:
            init_schema(conn)
        except sqlite3.Error as e:
            conn.close()
            raise CatalogError(ErrorCode.STORAGE, f"failed to initialize cache schema: {e}", source="cache", raw=e) from e
        return cls(conn, clock=clock)

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "DisplayNameCache":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def get(self, model: CatalogModel) -> Optional[str]:
        """Return the cached display name for ``model`` or ``None``.

        Storage errors are logged and treated as a miss.
        """
        key = cache_key(model)
        try:
            row = self._conn.execute(
                "SELECT display_name FROM display_name_cache WHERE model_id = ? AND description_hash = ?",
                (key.model_id, key.fingerprint),
            ).fetchone()
        except sqlite3.Error as e:
            log_event(
                _logger,
                "cache.read_failed",
                LogContext(model_id=key.model_id, fingerprint=key.fingerprint),
                level=logging.WARNING,
                error=str(e),
                error_code=ErrorCode.STORAGE.value,
            )
            return None
        return row[0] if row else None

    def set(self, model: CatalogModel, display_name: str) -> None:
        """Insert or replace the display name for ``model``; last write wins.

        Raises
        ------
        CatalogError
            ``STORAGE`` when the row cannot be written.
        """
        key = cache_key(model)
        try:
            self._conn.execute(
                """
                INSERT OR REPLACE INTO display_name_cache
                    (model_id, description_hash, display_name, created_at)
                VALUES (?, ?, ?, ?)
                """,
                (key.model_id, key.fingerprint, display_name, _format_timestamp(self._clock())),
            )
            self._conn.commit()
        except sqlite3.Error as e:
            raise CatalogError(
                ErrorCode.STORAGE,
                f"failed to cache display name: {e}",
                source="cache",
                model_id=model.id,
                raw=e,
            ) from e

    def clean_old_entries(self, max_age: timedelta) -> int:
        """Delete entries created before ``now - max_age``.

        Returns
        -------
        int
            Number of rows removed.

        Raises
        ------
        CatalogError
            ``STORAGE`` when the delete fails.
        """
        cutoff = _format_timestamp(self._clock() - max_age)
        try:
            cur = self._conn.execute("DELETE FROM display_name_cache WHERE created_at < ?", (cutoff,))
            self._conn.commit()
        except sqlite3.Error as e:
            raise CatalogError(ErrorCode.STORAGE, f"failed to clean old cache entries: {e}", source="cache", raw=e) from e
        removed = cur.rowcount if cur.rowcount is not None and cur.rowcount > 0 else 0
        if removed:
            log_event(_logger, "cache.clean", removed=removed, cutoff=cutoff)
        return removed

    def stats(self) -> int:
        """Return the total number of cached entries (observability only)."""
        try:
            row = self._conn.execute("SELECT COUNT(*) FROM display_name_cache").fetchone()
        except sqlite3.Error as e:
            raise CatalogError(ErrorCode.STORAGE, f"failed to read cache stats: {e}", source="cache", raw=e) from e
        return int(row[0])

    def entries(self, model_id: Optional[str] = None) -> List[CacheEntry]:
        """Return stored entries, optionally restricted to one identifier.

        Ordered by identifier then fingerprint.
        """
        sql = "SELECT model_id, description_hash, display_name, created_at FROM display_name_cache"
        params: tuple = ()
        if model_id is not None:
            sql += " WHERE model_id = ?"
            params = (model_id,)
        sql += " ORDER BY model_id, description_hash"
        try:
            rows = self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise CatalogError(ErrorCode.STORAGE, f"failed to list cache entries: {e}", source="cache", raw=e) from e
        return [_entry_from_row(r) for r in rows]


__all__ = ["DisplayNameCache"]
