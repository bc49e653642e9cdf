"""Prompt builders for display-name generation."""
from __future__ import annotations

from typing import Sequence

from ..base.dto import CatalogModel
from ..config.defaults import DISPLAY_NAME_PROMPT_LIMIT

POOL_PROVIDER = "pool"
DEFAULT_MODALITY = "text"

SINGLE_TEMPLATE = """You are a model naming expert. Generate a clean, professional display name for an AI model.

Rules:
- Use proper capitalization (GPT-4, Claude 3.5, Llama 3.1, etc.)
- Keep version numbers and important identifiers
- Remove redundant words and technical jargon
- Make it user-friendly but informative
- Maximum {limit} characters
- Follow established naming patterns from major providers

Examples:
- ID: "gpt-4o-2024-11-20" → "GPT-4o (2024-11-20)"
- ID: "claude-3-5-sonnet" → "Claude 3.5 Sonnet"
- ID: "llama-3-1-70b-instruct" → "Llama 3.1 70B Instruct"
- ID: "mistral-7b-instruct-v0-3" → "Mistral 7B Instruct v0.3"

Model ID: "{model_id}"
Description: "{description}"

Generate only the display name, nothing else:"""

GROUP_HEADER = """You are a model naming expert. Generate professional display names for AI models that help users differentiate between variants.

MODELS TO NAME:
"""

GROUP_ENTRY = """[{position}] Model ID: "{model_id}"
    Base Model: "{base_model}"
    Provider: "{provider}"
    Route: "{route}"
    Pool: "{pool}"
    Subtype: "{subtype}"
    Input Modalities: {input_modalities}
    Output Modalities: {output_modalities}
    Context Window: {context}
    Description: "{description}"

"""

GROUP_RULES = """NAMING RULES:
1. If one model has provider="{pool}", give it the simple canonical name (this is the meta-model)
2. For provider-specific variants, add provider name: "GPT-4 (OpenAI)", "GPT-4 (Azure)"
3. For multimodal variants, highlight capabilities: "GPT-4 Vision", "Claude 3.5 Sonnet (Vision)", "Gemini Pro (Audio)"
4. For context window differences, include size when significant: "Claude 3.5 Sonnet (200K)", "GPT-4 Turbo (128K)"
5. For feature variants, highlight differences: "GPT-4 Turbo", "Llama 3.1 Instruct", "Mistral 7B (Quantized)"
6. Keep names under {limit} characters
7. Use proper capitalization and formatting
8. Make differences clear and concise
9. Prioritize: modalities > provider > context size > other features

Generate names in this exact format (one per line):
[1] -> Display Name Here
[2] -> Display Name Here
etc."""


def format_modalities(modalities: Sequence[str]) -> str:
    """Comma-join modalities, defaulting to ``"text"`` when none are listed."""
    return ", ".join(modalities) or DEFAULT_MODALITY


def format_context_window(max_tokens: int) -> str:
    """Human-scaled context size: ``(2M tokens)``, ``(128K tokens)``, ``(512 tokens)``.

    Values are truncated, not rounded. Zero or negative means unknown and
    renders as an empty string.
    """
    if max_tokens <= 0:
        return ""
    if max_tokens >= 1_000_000:
        return f"({max_tokens // 1_000_000}M tokens)"
    if max_tokens >= 1_000:
        return f"({max_tokens // 1_000}K tokens)"
    return f"({max_tokens} tokens)"


def single_prompt(model_id: str, description: str) -> str:
    """Prompt asking for one display name; only the first description line is used."""
    return SINGLE_TEMPLATE.format(
        limit=DISPLAY_NAME_PROMPT_LIMIT,
        model_id=model_id,
        description=description.split("\n")[0],
    )


def group_prompt(models: Sequence[CatalogModel]) -> str:
    """Prompt enumerating ``models`` at 1-based positions in list order."""
    parts = [GROUP_HEADER]
    for position, model in enumerate(models, start=1):
        parts.append(
            GROUP_ENTRY.format(
                position=position,
                model_id=model.id,
                base_model=model.model,
                provider=model.provider,
                route=model.route,
                pool=model.pool,
                subtype=model.subtype,
                input_modalities=format_modalities(model.input_modalities),
                output_modalities=format_modalities(model.output_modalities),
                context=format_context_window(model.max_tokens),
                description=model.first_description_line,
            )
        )
    parts.append(GROUP_RULES.format(pool=POOL_PROVIDER, limit=DISPLAY_NAME_PROMPT_LIMIT))
    return "".join(parts)


__all__ = [
    "POOL_PROVIDER",
    "format_modalities",
    "format_context_window",
    "single_prompt",
    "group_prompt",
]
