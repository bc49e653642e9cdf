"""Display-name cache behaviour over a real SQLite file."""

from __future__ import annotations

import sqlite3
from datetime import timedelta

import pytest

from provider_catalog.base.errors import CatalogError, ErrorCode
from provider_catalog.naming.fingerprint import fingerprint
from provider_catalog.persistence.sqlite import DisplayNameCache


def test_round_trip(cache, make_model):
    m = make_model("gpt-4", provider="openai")
    assert cache.get(m) is None  # nosec B101 - asserts are appropriate in unit tests
    cache.set(m, "GPT-4 (OpenAI)")
    assert cache.get(m) == "GPT-4 (OpenAI)"  # nosec B101


def test_set_is_idempotent_and_last_write_wins(cache, make_model):
    m = make_model("gpt-4")
    cache.set(m, "GPT-4")
    cache.set(m, "GPT-4")
    assert cache.stats() == 1  # nosec B101
    cache.set(m, "GPT 4")
    assert cache.get(m) == "GPT 4"  # nosec B101
    assert cache.stats() == 1  # nosec B101


def test_variants_of_one_id_are_separate_entries(cache, make_model):
    openai = make_model("gpt-4", provider="openai")
    azure = make_model("gpt-4", provider="azure")
    cache.set(openai, "GPT-4 (OpenAI)")
    assert cache.get(azure) is None  # nosec B101
    cache.set(azure, "GPT-4 (Azure)")
    entries = cache.entries("gpt-4")
    assert {e.fingerprint for e in entries} == {fingerprint(openai), fingerprint(azure)}  # nosec B101
    assert cache.entries("other") == []  # nosec B101


def test_clean_old_entries_uses_cutoff(cache, clock, make_model):
    old = make_model("old-model")
    fresh = make_model("fresh-model")
    cache.set(old, "Old")
    clock.now = clock.now + timedelta(days=20)
    cache.set(fresh, "Fresh")
    clock.now = clock.now + timedelta(days=15)

    removed = cache.clean_old_entries(timedelta(days=30))

    assert removed == 1  # nosec B101
    assert cache.get(old) is None  # nosec B101
    assert cache.get(fresh) == "Fresh"  # nosec B101


def test_entries_keep_aware_timestamps(cache, clock, make_model):
    cache.set(make_model("x"), "X")
    (entry,) = cache.entries()
    assert entry.created_at == clock.now  # nosec B101
    assert entry.created_at.tzinfo is not None  # nosec B101


def test_cache_persists_across_connections(tmp_path, make_model):
    path = str(tmp_path / "nested" / "cache.db")
    m = make_model("claude-3-5-sonnet")
    with DisplayNameCache.open(path) as first:
        first.set(m, "Claude 3.5 Sonnet")
    with DisplayNameCache.open(path) as second:
        assert second.get(m) == "Claude 3.5 Sonnet"  # nosec B101


def test_read_failure_is_a_miss(tmp_path, make_model):
    conn = sqlite3.connect(":memory:")  # no schema: every query fails
    store = DisplayNameCache(conn)
    assert store.get(make_model("x")) is None  # nosec B101
    with pytest.raises(CatalogError) as exc:
        store.set(make_model("x"), "X")
    assert exc.value.code is ErrorCode.STORAGE  # nosec B101
    conn.close()


def test_open_failure_raises_storage_error(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("file", encoding="utf-8")
    with pytest.raises(CatalogError) as exc:
        DisplayNameCache.open(str(blocker / "cache.db"))
    assert exc.value.code is ErrorCode.STORAGE  # nosec B101
    assert exc.value.source == "cache"  # nosec B101
