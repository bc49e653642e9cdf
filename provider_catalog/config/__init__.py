"""Unified configuration layer.

Sources are merged in a predictable order (later wins):
    1. Built-in defaults (:mod:`provider_catalog.config.defaults`)
    2. Optional external config file (JSON or YAML) named by CATALOG_CONFIG_FILE
    3. Environment variables (see :data:`provider_catalog.config.env.ENV_MAP`)
    4. In-code overrides passed to :func:`get_catalog_config`

A ``.env`` file (path from DOTENV_FILE, default ``.env``) is read once before
environment variables are consulted; it only fills variables that are unset
or hold placeholder values.

External Config File
--------------------
Flat mapping using the same keys as :class:`CatalogSettings`, e.g.::

    base_url: https://apipie.ai/v1
    cache_path: cmd/apipie/cache.db
    cache_max_age_days: 14

Public API
----------
* get_catalog_config(overrides: dict | None = None) -> CatalogSettings
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field

from .env import env_overrides, is_placeholder
from .defaults import (
    APIPIE_DEFAULT_BASE_URL,
    CACHE_DEFAULT_MAX_AGE_DAYS,
    CACHE_DEFAULT_PATH,
    DISPLAY_NAME_DEFAULT_MODEL,
    OUTPUT_DEFAULT_PATH,
)


class CatalogSettings(BaseModel):
    """Resolved settings for one run.

    Attributes:
        base_url: APIpie API root used for both the catalog and generation.
        catalog_api_key: Optional key sent with the catalog fetch.
        display_name_api_key: Credential for display-name generation; when
            absent, every model falls back to its identifier.
        display_name_model: Model asked to generate display names.
        notify_user: GitHub user mentioned in failure annotations.
        cache_path: SQLite file backing the display-name cache.
        cache_max_age_days: Age after which cache entries are swept.
        output_path: Destination of the generated provider config.
    """

    base_url: str = APIPIE_DEFAULT_BASE_URL
    catalog_api_key: Optional[str] = None
    display_name_api_key: Optional[str] = None
    display_name_model: str = DISPLAY_NAME_DEFAULT_MODEL
    notify_user: Optional[str] = None
    cache_path: str = CACHE_DEFAULT_PATH
    cache_max_age_days: int = Field(default=CACHE_DEFAULT_MAX_AGE_DAYS, gt=0)
    output_path: str = OUTPUT_DEFAULT_PATH


_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Parse KEY=VALUE lines from the dotenv file into ``os.environ``.

    Comments and blank lines are skipped. Existing variables are only
    replaced when their current value is a placeholder.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("CATALOG_CONFIG_FILE")
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    data: Any
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def reset_config_cache() -> None:
    """Forget the parsed config file and dotenv state (tests)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


def get_catalog_config(overrides: Optional[Dict[str, Any]] = None) -> CatalogSettings:
    """Return merged settings.

    Merge order (later wins): defaults -> external file -> env vars -> overrides.
    ``None`` values in ``overrides`` are ignored so CLI flags that were not
    given do not mask lower layers.

    Raises:
        pydantic.ValidationError: when a merged value has the wrong shape
            (e.g. a non-numeric ``cache_max_age_days``).
    """
    _load_dotenv_once()
    cfg: Dict[str, Any] = {}
    cfg |= {k: v for k, v in _load_external_config().items() if k in CatalogSettings.model_fields}
    cfg |= env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return CatalogSettings(**cfg)


__all__ = [
    "CatalogSettings",
    "get_catalog_config",
    "reset_config_cache",
]
