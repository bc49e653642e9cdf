"""Display names for several catalog entries sharing one identifier.

All uncached members are named in a single batch call so the generator can
see the variants side by side and pick distinguishing names. Members the
reply does not cover (or covers with an invalid name) fall back to their
identifier, uncached.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..base.dto import CatalogModel
from ..base.errors import CatalogError
from ..base.logging import LogContext, get_logger, log_event
from ..persistence.interfaces import DisplayNameStore
from .common import lookup, report_failure, write_through
from .fingerprint import CacheKey, cache_key
from .generator import DisplayNameGenerator
from .notify import Notifier
from .parsing import names_by_index

_logger = get_logger("catalog.naming.group")

WHAT = "group display name generation"


def _batch_reply(
    uncached: Sequence[CatalogModel],
    generator: DisplayNameGenerator,
    notifier: Notifier,
) -> Optional[str]:
    try:
        return generator.generate_group_reply(uncached)
    except CatalogError as e:
        report_failure(notifier, e, WHAT)
        return None


def resolve_group(
    models: Sequence[CatalogModel],
    *,
    store: DisplayNameStore,
    generator: DisplayNameGenerator,
    notifier: Notifier,
) -> Dict[CacheKey, str]:
    """Resolve names for ``models`` (same identifier) keyed by cache key.

    No external call is made when every member is cached. A failed batch
    call is not retried; every uncached member then uses its identifier.
    """
    result: Dict[CacheKey, str] = {}
    uncached: List[CatalogModel] = []
    for model in models:
        name = lookup(store, model)
        if name is None:
            uncached.append(model)
        else:
            result[cache_key(model)] = name

    if not uncached:
        return result

    ctx = LogContext(model_id=uncached[0].id)
    log_event(_logger, "group.start", ctx, members=len(models), uncached=len(uncached))

    generated: Dict[int, str] = {}
    reply = _batch_reply(uncached, generator, notifier)
    if reply is not None:
        generated = names_by_index(reply, len(uncached))
        for index, name in sorted(generated.items()):
            model = uncached[index]
            result[cache_key(model)] = name
            write_through(store, model, name)

    for model in uncached:
        result.setdefault(cache_key(model), model.id)

    log_event(
        _logger,
        "group.parsed",
        ctx,
        generated=len(generated),
        fallback=len(uncached) - len(generated),
    )
    return result


__all__ = ["resolve_group"]
