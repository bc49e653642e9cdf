"""Resolution driver: group the catalog by identifier and name every variant.

The store, generator and notifier are explicit dependencies of
:class:`NameResolver`; nothing here reaches for a process-wide cache.
Groups are processed one after another in catalog order.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from ..base.dto import CatalogModel
from ..base.logging import get_logger, log_event
from ..persistence.interfaces import DisplayNameStore
from .fingerprint import CacheKey, cache_key
from .generator import DisplayNameGenerator
from .group import resolve_group
from .notify import Notifier
from .single import resolve_one

_logger = get_logger("catalog.naming.resolver")


def group_by_id(models: Iterable[CatalogModel]) -> Dict[str, List[CatalogModel]]:
    """Bucket models by identifier, keeping first-seen order of identifiers and members."""
    groups: Dict[str, List[CatalogModel]] = {}
    for model in models:
        groups.setdefault(model.id, []).append(model)
    return groups


class NameResolver:
    """Display-name resolution over injected collaborators.

    Parameters:
        store: Cache consulted before, and written after, generation.
        generator: External display-name generator.
        notifier: Receives generation failure reports.
    """

    def __init__(self, store: DisplayNameStore, generator: DisplayNameGenerator, notifier: Notifier) -> None:
        self.store = store
        self.generator = generator
        self.notifier = notifier

    def resolve_one(self, model: CatalogModel) -> str:
        return resolve_one(model, store=self.store, generator=self.generator, notifier=self.notifier)

    def resolve_group(self, models: Sequence[CatalogModel]) -> Dict[CacheKey, str]:
        return resolve_group(models, store=self.store, generator=self.generator, notifier=self.notifier)

    def resolve_all(self, models: Iterable[CatalogModel]) -> Dict[CacheKey, str]:
        """Return a name for every model, keyed by its cache key.

        Singleton groups go through :meth:`resolve_one`; larger groups through
        :meth:`resolve_group`. Keys embed the fingerprint, so groups never
        collide when merged.
        """
        names: Dict[CacheKey, str] = {}
        groups = group_by_id(models)
        for model_id, members in groups.items():
            if len(members) == 1:
                names[cache_key(members[0])] = self.resolve_one(members[0])
                continue
            log_event(_logger, "group.dispatch", model_id=model_id, variants=len(members))
            names.update(self.resolve_group(members))
        log_event(_logger, "resolve.complete", groups=len(groups), names=len(names))
        return names


def resolve_all(
    models: Iterable[CatalogModel],
    *,
    store: DisplayNameStore,
    generator: DisplayNameGenerator,
    notifier: Notifier,
) -> Dict[CacheKey, str]:
    """Functional form of :meth:`NameResolver.resolve_all`."""
    return NameResolver(store, generator, notifier).resolve_all(models)


__all__ = ["NameResolver", "group_by_id", "resolve_all"]
