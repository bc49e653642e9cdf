"""Configuration merge order: defaults -> config file -> env -> overrides."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from provider_catalog.config import get_catalog_config, reset_config_cache
from provider_catalog.config.defaults import CACHE_DEFAULT_PATH, OUTPUT_DEFAULT_PATH
from provider_catalog.config.env import is_placeholder, resolve_env


def test_defaults_when_nothing_is_set():
    cfg = get_catalog_config()
    assert cfg.base_url == "https://apipie.ai/v1"  # nosec B101 - asserts are appropriate in tests
    assert cfg.cache_path == CACHE_DEFAULT_PATH  # nosec B101
    assert cfg.output_path == OUTPUT_DEFAULT_PATH  # nosec B101
    assert cfg.cache_max_age_days == 30  # nosec B101
    assert cfg.display_name_api_key is None  # nosec B101
    assert cfg.display_name_model == "claude-sonnet-4"  # nosec B101


def test_yaml_file_then_env_then_overrides(tmp_path, monkeypatch):
    cfg_file = tmp_path / "catalog.yaml"
    cfg_file.write_text(
        "cache_path: from-file.db\noutput_path: from-file.json\ncache_max_age_days: 7\nunknown_key: 1\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("CATALOG_CONFIG_FILE", str(cfg_file))
    monkeypatch.setenv("APIPIE_OUTPUT_PATH", "from-env.json")
    reset_config_cache()

    cfg = get_catalog_config({"cache_max_age_days": 3, "cache_path": None})
    assert cfg.cache_path == "from-file.db"  # nosec B101
    assert cfg.output_path == "from-env.json"  # nosec B101
    assert cfg.cache_max_age_days == 3  # nosec B101


def test_json_file_is_accepted(tmp_path, monkeypatch):
    cfg_file = tmp_path / "catalog.json"
    cfg_file.write_text(json.dumps({"display_name_model": "gpt-4o"}), encoding="utf-8")
    monkeypatch.setenv("CATALOG_CONFIG_FILE", str(cfg_file))
    reset_config_cache()
    assert get_catalog_config().display_name_model == "gpt-4o"  # nosec B101


def test_placeholder_credentials_are_unset(monkeypatch):
    monkeypatch.setenv("APIPIE_DISPLAY_NAME_API_KEY", "changeme")
    monkeypatch.setenv("APIPIE_API_KEY", "real-key")
    cfg = get_catalog_config()
    assert cfg.display_name_api_key is None  # nosec B101
    assert cfg.catalog_api_key == "real-key"  # nosec B101  # pragma: allowlist secret


def test_dotenv_replaces_placeholders_only(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\nAPIPIE_API_KEY_NOTIFY_USER='octocat'\nAPIPIE_BASE_URL=https://proxy.test/v1\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("DOTENV_FILE", str(env_file))
    monkeypatch.setenv("APIPIE_BASE_URL", "https://set.test/v1")
    # Placeholder values are replaced by the dotenv file; monkeypatch restores
    # the variable afterwards.
    monkeypatch.setenv("APIPIE_API_KEY_NOTIFY_USER", "placeholder")
    reset_config_cache()
    cfg = get_catalog_config()
    assert cfg.notify_user == "octocat"  # nosec B101
    assert cfg.base_url == "https://set.test/v1"  # nosec B101


def test_invalid_max_age_is_rejected(monkeypatch):
    monkeypatch.setenv("APIPIE_CACHE_MAX_AGE_DAYS", "0")
    with pytest.raises(ValidationError):
        get_catalog_config()


def test_env_helpers():
    assert is_placeholder("your-key-placeholder")  # nosec B101
    assert is_placeholder("TEST_abc")  # nosec B101
    assert not is_placeholder("sk-live")  # nosec B101
    assert not is_placeholder(None)  # nosec B101
    assert resolve_env("not_a_key") is None  # nosec B101
