"""Centralized timeout values for outbound HTTP calls.

Both network calls the tool makes (catalog fetch, display-name generation)
read their client-side timeout from :func:`get_timeout_config`, so a stalled
dependency cannot hang a run. A timeout during generation is treated as a
generation failure and is not retried within the run.

Supported environment variables (all optional, positive floats):
    CATALOG_HTTP_TIMEOUT_SECONDS      per-request timeout (default 30)
    CATALOG_CONNECT_TIMEOUT_SECONDS   connect phase timeout (default 10)
"""
from __future__ import annotations

from dataclasses import dataclass
import os


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Overall budget for one HTTP request.
        connect_timeout_seconds: Budget for establishing the connection.
    """

    http_timeout_seconds: float = 30.0
    connect_timeout_seconds: float = 10.0


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Read ``name`` as a positive float, falling back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`.

    The cache is refreshed when the relevant environment variables change,
    which keeps ``monkeypatch.setenv`` usable in tests.
    """
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - module cache
    guard = "/".join(
        [
            os.getenv("CATALOG_HTTP_TIMEOUT_SECONDS", ""),
            os.getenv("CATALOG_CONNECT_TIMEOUT_SECONDS", ""),
        ]
    )
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float("CATALOG_HTTP_TIMEOUT_SECONDS", 30.0),
        connect_timeout_seconds=_parse_env_float("CATALOG_CONNECT_TIMEOUT_SECONDS", 10.0),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
