"""Display name for a model whose identifier is unique in the catalog.

Precedence is an explicit chain: cache, then generation, then the raw
identifier. Only the generation step writes to the cache.
"""
from __future__ import annotations

from typing import Optional

from ..base.dto import CatalogModel
from ..base.errors import CatalogError
from ..base.logging import get_logger, log_event
from ..base.resilience import Strategy, first_result
from ..persistence.interfaces import DisplayNameStore
from .common import lookup, model_context, report_failure, write_through
from .generator import DisplayNameGenerator
from .notify import Notifier

_logger = get_logger("catalog.naming.single")

WHAT = "display name generation"


def _generated(
    model: CatalogModel,
    store: DisplayNameStore,
    generator: DisplayNameGenerator,
    notifier: Notifier,
) -> Optional[str]:
    try:
        name = generator.generate_name(model.id, model.description)
    except CatalogError as e:
        report_failure(notifier, e, WHAT)
        return None
    write_through(store, model, name)
    return name


def resolve_one(
    model: CatalogModel,
    *,
    store: DisplayNameStore,
    generator: DisplayNameGenerator,
    notifier: Notifier,
) -> str:
    """Return the display name for ``model``; never raises on generation failure."""
    hit = first_result(
        [
            Strategy("cache", lambda: lookup(store, model)),
            Strategy("generation", lambda: _generated(model, store, generator, notifier)),
            Strategy("identifier", lambda: model.id),
        ]
    )
    # The identifier strategy always yields, so ``hit`` is never None.
    source, name = hit  # type: ignore[misc]
    log_event(_logger, "name.resolved", model_context(model), source=source, display_name=name)
    return name


__all__ = ["resolve_one"]
