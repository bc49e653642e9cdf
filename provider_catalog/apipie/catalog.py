"""APIpie catalog helpers: filtering, capability detection, limits and pricing.

Context-window guesses are a fixed lookup table used only when the catalog
omits ``max_tokens``.
"""
from __future__ import annotations

from typing import Optional, Tuple

from ..base.dto import CatalogModel
from ..base.resilience import Strategy, first_value

# Checked in order; the first substring found in the lowercased id wins.
CONTEXT_WINDOW_GUESSES: Tuple[Tuple[str, int], ...] = (
    ("gpt-4o", 128_000),
    ("gpt-4", 8_192),
    ("gpt-3.5", 16_385),
    ("claude", 200_000),
    ("gemini", 32_768),
    ("llama", 128_000),
)
DEFAULT_CONTEXT_WINDOW = 32_768
DEFAULT_MAX_TOKENS = 4_096
TOKENS_PER_MILLION = 1_000_000
CACHED_INPUT_RATIO = 0.5
CACHED_OUTPUT_RATIO = 0.25


def is_text_model(model: CatalogModel) -> bool:
    """Enabled, available LLM entries only."""
    return model.enabled == 1 and model.available == 1 and model.type == "llm"


def supports_images(model: CatalogModel) -> bool:
    description = model.description.lower()
    return (
        "image" in model.input_modalities
        or "multimodal" in model.subtype
        or "vision" in model.subtype
        or "vision" in description
        or "image" in description
    )


def context_window(model: CatalogModel) -> int:
    if model.max_tokens > 0:
        return model.max_tokens
    model_id = model.id.lower()
    for needle, size in CONTEXT_WINDOW_GUESSES:
        if needle in model_id:
            return size
    return DEFAULT_CONTEXT_WINDOW


def default_max_tokens(model: CatalogModel) -> int:
    if model.max_response_tokens > 0:
        return model.max_response_tokens
    if model.max_tokens > 0:
        return model.max_tokens // 4
    return DEFAULT_MAX_TOKENS


def _non_empty(value: str) -> Optional[str]:
    return value or None


def _parse_cost(raw: Optional[str]) -> float:
    if raw is None:
        return 0.0
    try:
        return float(raw)
    except ValueError:
        return 0.0


def input_cost_per_token(model: CatalogModel) -> float:
    """Confirmed input cost when present, otherwise the advertised one."""
    pricing = model.pricing
    raw = first_value(
        [
            Strategy("confirmed", lambda: _non_empty(pricing.confirmed.input_cost)),
            Strategy("advertised", lambda: _non_empty(pricing.advertised.input_cost_per_token)),
        ],
        default=None,
    )
    return _parse_cost(raw)


def output_cost_per_token(model: CatalogModel) -> float:
    """Confirmed output cost when present, otherwise the advertised one."""
    pricing = model.pricing
    raw = first_value(
        [
            Strategy("confirmed", lambda: _non_empty(pricing.confirmed.output_cost)),
            Strategy("advertised", lambda: _non_empty(pricing.advertised.output_cost_per_token)),
        ],
        default=None,
    )
    return _parse_cost(raw)


__all__ = [
    "CONTEXT_WINDOW_GUESSES",
    "DEFAULT_CONTEXT_WINDOW",
    "DEFAULT_MAX_TOKENS",
    "TOKENS_PER_MILLION",
    "CACHED_INPUT_RATIO",
    "CACHED_OUTPUT_RATIO",
    "is_text_model",
    "supports_images",
    "context_window",
    "default_max_tokens",
    "input_cost_per_token",
    "output_cost_per_token",
]
