"""Store protocol and DTOs for the display-name cache.

The namers depend only on :class:`DisplayNameStore`; the SQLite
implementation lives under ``persistence/sqlite/`` and tests may pass any
object with the same two methods (for example an in-memory dict wrapper).

Failure semantics:
- ``get`` never raises; a storage failure reads as a miss.
- ``set`` raises :class:`~provider_catalog.base.errors.CatalogError` with
  code ``STORAGE`` when the write cannot be persisted. Callers treat that as
  non-fatal.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol

from ...base.dto import CatalogModel


@dataclass(frozen=True)
class CacheEntry:
    """One persisted display name.

    Attributes
    ----------
    model_id: Catalog identifier.
    fingerprint: Metadata fingerprint of the variant.
    display_name: Generated name.
    created_at: UTC timestamp of the (last) write.
    """

    model_id: str
    fingerprint: str
    display_name: str
    created_at: datetime


class DisplayNameStore(Protocol):
    """Key-value store mapping a model variant to its display name."""

    def get(self, model: CatalogModel) -> Optional[str]:
        """Return the cached name for ``model``'s cache key, or ``None``."""
        ...

    def set(self, model: CatalogModel, display_name: str) -> None:
        """Upsert ``display_name`` under ``model``'s cache key."""
        ...


__all__ = ["CacheEntry", "DisplayNameStore"]
