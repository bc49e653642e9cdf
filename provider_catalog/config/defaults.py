"""provider_catalog.config.defaults
================================

Central place for the small, stable default values used across the package.
Everything here can be overridden through the external config file or
environment variables (see :mod:`provider_catalog.config`).

This module imports nothing from the rest of the package to avoid circular
imports; only plain constants live here.
"""

from __future__ import annotations

# ---- APIpie endpoints ----
APIPIE_DEFAULT_BASE_URL = "https://apipie.ai/v1"
APIPIE_MODELS_PATH = "/models/detailed"
APIPIE_CHAT_PATH = "/chat/completions"
APIPIE_USER_AGENT = "Catwalk-Client/1.0"

# ---- Display-name generation ----
DISPLAY_NAME_DEFAULT_MODEL = "claude-sonnet-4"
DISPLAY_NAME_TEMPERATURE = 0.1
DISPLAY_NAME_SINGLE_MAX_TOKENS = 100
DISPLAY_NAME_GROUP_MAX_TOKENS = 300
# Accepted generated names are 1..60 bytes of UTF-8 (prompts ask for < 50 characters).
DISPLAY_NAME_MAX_LENGTH = 60
DISPLAY_NAME_PROMPT_LIMIT = 50

# ---- Cache ----
CACHE_DEFAULT_PATH = "cmd/apipie/cache.db"
CACHE_DEFAULT_MAX_AGE_DAYS = 30

# ---- Output ----
OUTPUT_DEFAULT_PATH = "internal/providers/configs/apipie.json"

# ---- Provider record ----
PROVIDER_NAME = "APIpie"
PROVIDER_ID = "apipie"
PROVIDER_API_KEY_REF = "$APIPIE_API_KEY"  # pragma: allowlist secret - env reference, not a secret
PROVIDER_TYPE = "openai"
PROVIDER_DEFAULT_LARGE_MODEL = "claude-sonnet-4"
PROVIDER_DEFAULT_SMALL_MODEL = "claude-3-5-haiku"

# ---- SQLite config (infrastructure) ----
SQLITE_BUSY_TIMEOUT_MS = 5000
SQLITE_JOURNAL_MODE = "WAL"
SQLITE_SYNCHRONOUS = "NORMAL"


__all__ = [
    "APIPIE_DEFAULT_BASE_URL",
    "APIPIE_MODELS_PATH",
    "APIPIE_CHAT_PATH",
    "APIPIE_USER_AGENT",
    "DISPLAY_NAME_DEFAULT_MODEL",
    "DISPLAY_NAME_TEMPERATURE",
    "DISPLAY_NAME_SINGLE_MAX_TOKENS",
    "DISPLAY_NAME_GROUP_MAX_TOKENS",
    "DISPLAY_NAME_MAX_LENGTH",
    "DISPLAY_NAME_PROMPT_LIMIT",
    "CACHE_DEFAULT_PATH",
    "CACHE_DEFAULT_MAX_AGE_DAYS",
    "OUTPUT_DEFAULT_PATH",
    "PROVIDER_NAME",
    "PROVIDER_ID",
    "PROVIDER_API_KEY_REF",
    "PROVIDER_TYPE",
    "PROVIDER_DEFAULT_LARGE_MODEL",
    "PROVIDER_DEFAULT_SMALL_MODEL",
    "SQLITE_BUSY_TIMEOUT_MS",
    "SQLITE_JOURNAL_MODE",
    "SQLITE_SYNCHRONOUS",
]
