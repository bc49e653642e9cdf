"""Cache read/write and failure reporting shared by both namers."""
from __future__ import annotations

import logging
from typing import Optional

from ..base.dto import CatalogModel
from ..base.errors import CatalogError
from ..base.logging import LogContext, get_logger, log_event
from ..persistence.interfaces import DisplayNameStore
from .fingerprint import cache_key
from .notify import Notifier

_logger = get_logger("catalog.naming")


def model_context(model: CatalogModel) -> LogContext:
    key = cache_key(model)
    return LogContext(model_id=key.model_id, fingerprint=key.fingerprint, provider=model.provider or None)


def lookup(store: DisplayNameStore, model: CatalogModel) -> Optional[str]:
    """Cached name for ``model`` or ``None``; empty names count as a miss."""
    name = store.get(model)
    if name:
        log_event(_logger, "cache.hit", model_context(model), level=logging.DEBUG, display_name=name)
        return name
    log_event(_logger, "cache.miss", model_context(model), level=logging.DEBUG)
    return None


def write_through(store: DisplayNameStore, model: CatalogModel, name: str) -> None:
    """Persist a generated name; a storage failure is logged, not raised."""
    try:
        store.set(model, name)
    except CatalogError as e:
        log_event(
            _logger,
            "cache.write_failed",
            model_context(model),
            level=logging.WARNING,
            error=e.message,
            error_code=e.code.value,
        )
        return
    log_event(_logger, "cache.write", model_context(model), display_name=name)


def report_failure(notifier: Notifier, error: CatalogError, what: str) -> None:
    """Log a generation failure and forward it to the notifier."""
    log_event(
        _logger,
        "generation.failed",
        LogContext(model_id=error.model_id),
        level=logging.WARNING,
        what=what,
        error=error.message,
        error_code=error.code.value,
    )
    notifier.notify(f"APIpie {what} failed ({error.code.value}): {error.message}")


__all__ = ["model_context", "lookup", "write_through", "report_failure"]
