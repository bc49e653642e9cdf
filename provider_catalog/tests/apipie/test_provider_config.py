from __future__ import annotations

import json

import pytest

from provider_catalog.apipie.provider_config import build_provider, model_record, write_provider
from provider_catalog.base.errors import CatalogError, ErrorCode
from provider_catalog.naming import cache_key


def test_model_record_fields(make_model):
    m = make_model(
        "gpt-4o",
        max_tokens=128000,
        max_response_tokens=16384,
        input_modalities=["text", "image"],
        pricing={"confirmed": {"input_cost": "0.0000025", "output_cost": "0.00001"}},
    )
    record = model_record(m, "GPT-4o")
    assert record["id"] == "gpt-4o"  # nosec B101 - asserts are appropriate in unit tests
    assert record["name"] == "GPT-4o"  # nosec B101
    assert record["cost_per_1m_in"] == pytest.approx(2.5)  # nosec B101
    assert record["cost_per_1m_out"] == pytest.approx(10.0)  # nosec B101
    assert record["cost_per_1m_in_cached"] == pytest.approx(1.25)  # nosec B101
    assert record["cost_per_1m_out_cached"] == pytest.approx(2.5)  # nosec B101
    assert record["context_window"] == 128000  # nosec B101
    assert record["default_max_tokens"] == 16384  # nosec B101
    assert record["can_reason"] is False  # nosec B101
    assert record["has_reasoning_efforts"] is False  # nosec B101
    assert record["supports_attachments"] is True  # nosec B101


def test_provider_sorted_by_name_with_identifier_fallback(make_model):
    named_b = make_model("b-model")
    named_a = make_model("z-model")
    unnamed = make_model("Mistral")
    names = {cache_key(named_b): "beta", cache_key(named_a): "Alpha"}

    provider = build_provider([named_b, named_a, unnamed], names)

    assert provider["id"] == "apipie"  # nosec B101
    assert provider["api_key"] == "$APIPIE_API_KEY"  # nosec B101  # pragma: allowlist secret
    assert provider["api_endpoint"] == "https://apipie.ai/v1"  # nosec B101
    assert provider["type"] == "openai"  # nosec B101
    assert provider["default_large_model_id"] == "claude-sonnet-4"  # nosec B101
    assert provider["default_small_model_id"] == "claude-3-5-haiku"  # nosec B101
    # Case-sensitive ordinal order: upper case sorts before lower case.
    assert [r["name"] for r in provider["models"]] == ["Alpha", "Mistral", "beta"]  # nosec B101


def test_write_provider_creates_directories(tmp_path, make_model):
    target = tmp_path / "internal" / "providers" / "configs" / "apipie.json"
    write_provider(build_provider([make_model("gpt-4")], {}), str(target))
    text = target.read_text(encoding="utf-8")
    assert text.startswith('{\n  "name": "APIpie"')  # nosec B101
    assert json.loads(text)["models"][0]["name"] == "gpt-4"  # nosec B101


def test_write_failure_is_an_output_error(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(CatalogError) as exc:
        write_provider({"models": []}, str(blocker / "apipie.json"))
    assert exc.value.code is ErrorCode.STORAGE  # nosec B101
    assert exc.value.source == "output"  # nosec B101
