"""Shared fixtures for the provider catalog test suite.

- Every test runs with the APIpie environment variables cleared, no config
  file and no ``.env`` so settings come from defaults unless a test sets them.
- ``make_model`` builds validated catalog entries with text-model defaults.
- ``cache`` is a real SQLite cache under ``tmp_path``.
- ``make_generator`` returns a scripted stand-in for the generation client.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterator, List, Optional, Sequence

import pytest

from provider_catalog.base.dto import CatalogModel
from provider_catalog.base.http import close_all_clients
from provider_catalog.config import reset_config_cache
from provider_catalog.config.env import ENV_MAP
from provider_catalog.persistence.sqlite import DisplayNameCache


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    for name in ENV_MAP.values():
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("CATALOG_CONFIG_FILE", raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "absent.env"))
    reset_config_cache()
    yield
    reset_config_cache()
    close_all_clients()


@pytest.fixture()
def make_model():
    """Factory for catalog entries; keyword arguments override the defaults."""

    def _make(model_id: str = "gpt-4", **fields: Any) -> CatalogModel:
        data = {
            "id": model_id,
            "model": model_id,
            "type": "llm",
            "enabled": 1,
            "available": 1,
            "description": f"{model_id} description",
        }
        data.update(fields)
        return CatalogModel.model_validate(data)

    return _make


class FakeClock:
    """Settable aware-UTC clock for age-based eviction."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 1, 31, 12, 0, tzinfo=timezone.utc))


@pytest.fixture()
def cache(tmp_path, clock) -> Iterator[DisplayNameCache]:
    store = DisplayNameCache.open(str(tmp_path / "cache.db"), clock=clock)
    yield store
    store.close()


class FakeGenerator:
    """Scripted generation client.

    ``name`` answers single calls, ``reply`` answers batch calls and
    ``error`` (a ``CatalogError``) makes every call fail.
    """

    def __init__(self, name: Optional[str] = None, reply: str = "", error: Optional[Exception] = None) -> None:
        self.name = name
        self.reply = reply
        self.error = error
        self.single_calls: List[str] = []
        self.group_calls: List[List[CatalogModel]] = []

    def generate_name(self, model_id: str, description: str) -> str:
        self.single_calls.append(model_id)
        if self.error is not None:
            raise self.error
        return self.name or model_id.upper()

    def generate_group_reply(self, models: Sequence[CatalogModel]) -> str:
        self.group_calls.append(list(models))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture()
def make_generator():
    return FakeGenerator
