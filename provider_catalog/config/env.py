"""provider_catalog.config.env
==========================

Mapping from configuration keys to the environment variables that set them.

Design Notes
------------
- ``ENV_MAP`` is the single source of truth for variable names.
- Values that look like placeholders (``changeme``, ``example`` ...) are
  treated as unset so a template ``.env`` never enables a broken credential.
- Helpers never raise on unknown keys or unset variables.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

ENV_MAP: Dict[str, str] = {
    "catalog_api_key": "APIPIE_API_KEY",
    "display_name_api_key": "APIPIE_DISPLAY_NAME_API_KEY",
    "notify_user": "APIPIE_API_KEY_NOTIFY_USER",
    "base_url": "APIPIE_BASE_URL",
    "display_name_model": "APIPIE_DISPLAY_NAME_MODEL",
    "cache_path": "APIPIE_CACHE_PATH",
    "output_path": "APIPIE_OUTPUT_PATH",
    "cache_max_age_days": "APIPIE_CACHE_MAX_AGE_DAYS",
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if ``val`` looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_' (case-insensitive, surrounding spaces ignored).
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_env_var_name(key: str) -> Optional[str]:
    """Return the environment variable name for a config key, if mapped."""
    return ENV_MAP.get(key) if key else None


def resolve_env(key: str) -> Optional[str]:
    """Return the non-empty, non-placeholder env value for ``key``, or None."""
    name = get_env_var_name(key)
    if not name:
        return None
    val = os.environ.get(name)
    if not val or is_placeholder(val):
        return None
    return val


def env_overrides() -> Dict[str, str]:
    """Return every mapped key that currently has a usable env value."""
    out: Dict[str, str] = {}
    for key in ENV_MAP:
        if (val := resolve_env(key)) is not None:
            out[key] = val
    return out


__all__ = [
    "ENV_MAP",
    "is_placeholder",
    "get_env_var_name",
    "resolve_env",
    "env_overrides",
]
