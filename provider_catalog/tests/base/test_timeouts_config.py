from __future__ import annotations

from provider_catalog.base.timeouts import TimeoutConfig, get_timeout_config


def test_defaults(monkeypatch):
    monkeypatch.delenv("CATALOG_HTTP_TIMEOUT_SECONDS", raising=False)
    monkeypatch.delenv("CATALOG_CONNECT_TIMEOUT_SECONDS", raising=False)
    assert get_timeout_config() == TimeoutConfig(30.0, 10.0)  # nosec B101


def test_env_overrides_refresh_cache(monkeypatch):
    monkeypatch.setenv("CATALOG_HTTP_TIMEOUT_SECONDS", "5")
    assert get_timeout_config().http_timeout_seconds == 5.0  # nosec B101
    monkeypatch.setenv("CATALOG_HTTP_TIMEOUT_SECONDS", "7.5")
    assert get_timeout_config().http_timeout_seconds == 7.5  # nosec B101


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("CATALOG_HTTP_TIMEOUT_SECONDS", "soon")
    monkeypatch.setenv("CATALOG_CONNECT_TIMEOUT_SECONDS", "-1")
    cfg = get_timeout_config()
    assert cfg.http_timeout_seconds == 30.0  # nosec B101
    assert cfg.connect_timeout_seconds == 10.0  # nosec B101
