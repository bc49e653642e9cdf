from __future__ import annotations

import pytest

from provider_catalog.naming.prompts import format_context_window, format_modalities, group_prompt, single_prompt


@pytest.mark.parametrize(
    "tokens, expected",
    [
        (0, ""),
        (-5, ""),
        (512, "(512 tokens)"),
        (8192, "(8K tokens)"),
        (128000, "(128K tokens)"),
        (1_048_576, "(1M tokens)"),
    ],
)
def test_context_window_annotation(tokens, expected):
    assert format_context_window(tokens) == expected  # nosec B101


def test_modalities_default_to_text():
    assert format_modalities([]) == "text"  # nosec B101
    assert format_modalities(["text", "image"]) == "text, image"  # nosec B101


def test_single_prompt_uses_first_description_line():
    prompt = single_prompt("gpt-4o", "Flagship model\nInternal notes")
    assert 'Model ID: "gpt-4o"' in prompt  # nosec B101
    assert 'Description: "Flagship model"' in prompt  # nosec B101
    assert "Internal notes" not in prompt  # nosec B101


def test_group_prompt_enumerates_members(make_model):
    models = [
        make_model("gpt-4", provider="pool", max_tokens=8192),
        make_model("gpt-4", provider="azure", input_modalities=["text", "image"]),
    ]
    prompt = group_prompt(models)
    assert '[1] Model ID: "gpt-4"' in prompt  # nosec B101
    assert 'Provider: "pool"' in prompt  # nosec B101
    assert "Context Window: (8K tokens)" in prompt  # nosec B101
    assert '[2] Model ID: "gpt-4"' in prompt  # nosec B101
    assert "Input Modalities: text, image" in prompt  # nosec B101
    assert 'provider="pool"' in prompt  # nosec B101
    assert prompt.rstrip().endswith("etc.")  # nosec B101
