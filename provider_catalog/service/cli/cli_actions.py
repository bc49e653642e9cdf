"""CLI action handlers.

Purpose
-------
Run the catalog pipeline for ``generate`` and the cache maintenance
subcommands. This module has no top-level side effects and is safe to import
in tests.

Fatal Errors
------------
Settings validation, opening the cache, fetching the catalog and writing the
output abort the run: the failure is logged as ``run.failed`` and the handler
returns 1. Generation and cache-write failures never reach this layer; the
namers fall back and notify.
"""

from __future__ import annotations

import argparse
import logging
from datetime import timedelta
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from ...apipie.catalog import is_text_model
from ...apipie.get_apipie_models import fetch_models
from ...apipie.provider_config import build_provider, write_provider
from ...base.dto import CatalogModel
from ...base.errors import CatalogError
from ...base.logging import configure_logger, get_logger, log_event
from ...config import CatalogSettings, get_catalog_config
from ...naming import DisplayNameGenerator, GitHubActionsNotifier, resolve_all
from ...persistence.sqlite import DisplayNameCache

_logger = get_logger("catalog.cli")

FetchFn = Callable[[Optional[str], Optional[str]], List[CatalogModel]]


def _configure_logging(args: argparse.Namespace) -> None:
    configure_logger(json_mode=getattr(args, "json_logs", True), file_path=getattr(args, "log_file", None))


def _fail(command: str, error: Exception) -> int:
    fields: Dict[str, Any] = {"command": command, "error": str(error)}
    if isinstance(error, CatalogError):
        fields |= {"error_code": error.code.value, "source": error.source}
    log_event(_logger, "run.failed", level=logging.ERROR, **fields)
    return 1


def load_settings(args: argparse.Namespace) -> CatalogSettings:
    """Merge CLI flags over file and environment settings."""
    overrides = {
        "cache_path": getattr(args, "cache", None),
        "output_path": getattr(args, "output", None),
        "cache_max_age_days": getattr(args, "max_age_days", None),
    }
    return get_catalog_config(overrides)


def _sweep(cache: DisplayNameCache, max_age_days: int) -> int:
    """Age sweep before resolution; a failure is logged and the run continues."""
    try:
        return cache.clean_old_entries(timedelta(days=max_age_days))
    except CatalogError as e:
        log_event(_logger, "cache.clean_failed", level=logging.WARNING, error=e.message, error_code=e.code.value)
        return 0


def _log_stats(cache: DisplayNameCache, phase: str) -> None:
    try:
        count = cache.stats()
    except CatalogError as e:
        log_event(_logger, "cache.stats_failed", level=logging.WARNING, phase=phase, error=e.message)
        return
    log_event(_logger, "cache.stats", phase=phase, entries=count)


def handle_generate(args: argparse.Namespace, fetch_models_fn: Optional[FetchFn] = None) -> int:
    """Run the full pipeline and write the provider config.

    Parameters
    ----------
    args: argparse.Namespace
        Parsed ``generate`` arguments.
    fetch_models_fn: Optional[FetchFn]
        Catalog fetcher taking ``(api_key, base_url)``; defaults to
        :func:`fetch_models`.

    Returns
    -------
    int
        0 on success, 1 on a fatal error.
    """
    _configure_logging(args)
    try:
        cfg = load_settings(args)
    except ValidationError as e:
        return _fail("generate", e)
    log_event(_logger, "run.start", cache_path=cfg.cache_path, output_path=cfg.output_path)

    try:
        cache = DisplayNameCache.open(cfg.cache_path)
    except CatalogError as e:
        return _fail("generate", e)

    with cache:
        removed = _sweep(cache, cfg.cache_max_age_days)
        _log_stats(cache, "start")
        try:
            catalog = (fetch_models_fn or fetch_models)(cfg.catalog_api_key, cfg.base_url)
        except CatalogError as e:
            return _fail("generate", e)

        models = [m for m in catalog if is_text_model(m)]
        generator = DisplayNameGenerator(cfg.display_name_api_key, cfg.base_url, model=cfg.display_name_model)
        notifier = GitHubActionsNotifier(cfg.notify_user)
        names = resolve_all(models, store=cache, generator=generator, notifier=notifier)

        provider = build_provider(models, names)
        for record in provider["models"]:
            print(f"Added model {record['id']} ({record['name']}) with context window {record['context_window']}")
        try:
            path = write_provider(provider, cfg.output_path)
        except CatalogError as e:
            return _fail("generate", e)
        _log_stats(cache, "end")

    log_event(
        _logger,
        "run.complete",
        models=len(provider["models"]),
        catalog_entries=len(catalog),
        cache_removed=removed,
        output_path=str(path),
    )
    print(f"Generated APIpie provider config with {len(provider['models'])} models at {path}")
    return 0


def handle_cache_stats(args: argparse.Namespace) -> int:
    """Print the number of cached display names."""
    _configure_logging(args)
    try:
        cfg = load_settings(args)
        with DisplayNameCache.open(cfg.cache_path) as cache:
            count = cache.stats()
    except (CatalogError, ValidationError) as e:
        return _fail("cache-stats", e)
    print(f"Cache entries: {count}")
    return 0


def handle_cache_clean(args: argparse.Namespace) -> int:
    """Remove entries older than the configured age and print how many went."""
    _configure_logging(args)
    try:
        cfg = load_settings(args)
        with DisplayNameCache.open(cfg.cache_path) as cache:
            removed = cache.clean_old_entries(timedelta(days=cfg.cache_max_age_days))
    except (CatalogError, ValidationError) as e:
        return _fail("cache-clean", e)
    print(f"Removed {removed} cache entries older than {cfg.cache_max_age_days} days")
    return 0


__all__ = ["load_settings", "handle_generate", "handle_cache_stats", "handle_cache_clean"]
