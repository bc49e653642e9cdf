"""Display-name resolution: fingerprints, generation, parsing and the namers.

Public API (re-exported):
    - ``CacheKey``, ``cache_key``, ``fingerprint``
    - ``DisplayNameGenerator``
    - ``GitHubActionsNotifier``, ``RecordingNotifier``
    - ``resolve_one``, ``resolve_group``, ``resolve_all``, ``NameResolver``
"""

from .fingerprint import CacheKey, cache_key, fingerprint
from .generator import DisplayNameGenerator
from .notify import GitHubActionsNotifier, Notifier, RecordingNotifier
from .single import resolve_one
from .group import resolve_group
from .resolver import NameResolver, group_by_id, resolve_all

__all__ = [
    "CacheKey",
    "cache_key",
    "fingerprint",
    "DisplayNameGenerator",
    "GitHubActionsNotifier",
    "Notifier",
    "RecordingNotifier",
    "resolve_one",
    "resolve_group",
    "resolve_all",
    "NameResolver",
    "group_by_id",
]
