"""Timestamp and row helpers for the SQLite cache.

Timestamps are written as timezone-aware UTC ISO 8601 text with fixed
microsecond precision, so lexical order in SQL equals chronological order
and the age sweep can compare ``created_at`` against a cutoff string.
"""

from __future__ import annotations

from contextlib import suppress
from datetime import datetime, timezone
from typing import Any

from ..interfaces.stores import CacheEntry


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _format_timestamp(value: datetime) -> str:
    """Render an aware datetime as UTC ISO 8601 with microseconds.

    Raises
    ------
    ValueError
        If ``value`` is naive.
    """
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        raise ValueError("Datetime must be timezone-aware")
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


def _parse_created_at(raw: Any) -> datetime:
    """Parse a stored timestamp into an aware UTC ``datetime``.

    Naive values are assumed to be UTC; malformed values map to the epoch so
    a damaged row is swept by the next age-based cleanup.
    """
    if isinstance(raw, datetime):
        return raw if raw.tzinfo else raw.replace(tzinfo=timezone.utc)
    if isinstance(raw, str):
        with suppress(ValueError, TypeError):
            dt = datetime.fromisoformat(raw)
            return dt.astimezone(timezone.utc) if dt.tzinfo else dt.replace(tzinfo=timezone.utc)
    return datetime.fromtimestamp(0, tz=timezone.utc)


def _entry_from_row(r: Any) -> CacheEntry:
    """Convert a ``display_name_cache`` row into a :class:`CacheEntry`."""
    return CacheEntry(
        model_id=r[0],
        fingerprint=r[1],
        display_name=r[2],
        created_at=_parse_created_at(r[3]),
    )


__all__ = ["utcnow"]
