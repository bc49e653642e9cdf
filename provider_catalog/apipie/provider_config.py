"""Build and write the catwalk provider config for APIpie.

The output record mirrors catwalk's ``Provider``/``Model`` JSON shape. Models
are sorted by display name (case-sensitive, ordinal) so regenerating the file
yields stable diffs.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping

from ..base.dto import CatalogModel
from ..base.errors import CatalogError, ErrorCode
from ..config.defaults import (
    APIPIE_DEFAULT_BASE_URL,
    PROVIDER_API_KEY_REF,
    PROVIDER_DEFAULT_LARGE_MODEL,
    PROVIDER_DEFAULT_SMALL_MODEL,
    PROVIDER_ID,
    PROVIDER_NAME,
    PROVIDER_TYPE,
)
from ..naming.fingerprint import CacheKey, cache_key
from .catalog import (
    CACHED_INPUT_RATIO,
    CACHED_OUTPUT_RATIO,
    TOKENS_PER_MILLION,
    context_window,
    default_max_tokens,
    input_cost_per_token,
    output_cost_per_token,
    supports_images,
)


def model_record(model: CatalogModel, display_name: str) -> Dict[str, Any]:
    """Return the catwalk model entry for one catalog variant."""
    cost_in = input_cost_per_token(model) * TOKENS_PER_MILLION
    cost_out = output_cost_per_token(model) * TOKENS_PER_MILLION
    return {
        "id": model.id,
        "name": display_name,
        "cost_per_1m_in": cost_in,
        "cost_per_1m_out": cost_out,
        "cost_per_1m_in_cached": cost_in * CACHED_INPUT_RATIO,
        "cost_per_1m_out_cached": cost_out * CACHED_OUTPUT_RATIO,
        "context_window": context_window(model),
        "default_max_tokens": default_max_tokens(model),
        # APIpie does not report reasoning support.
        "can_reason": False,
        "has_reasoning_efforts": False,
        "supports_attachments": supports_images(model),
    }


def build_model_records(models: Iterable[CatalogModel], names: Mapping[CacheKey, str]) -> List[Dict[str, Any]]:
    """Model entries sorted by name; a model absent from ``names`` uses its id."""
    records = [model_record(m, names.get(cache_key(m), m.id)) for m in models]
    records.sort(key=lambda r: r["name"])
    return records


def build_provider(models: Iterable[CatalogModel], names: Mapping[CacheKey, str]) -> Dict[str, Any]:
    return {
        "name": PROVIDER_NAME,
        "id": PROVIDER_ID,
        "api_key": PROVIDER_API_KEY_REF,
        "api_endpoint": APIPIE_DEFAULT_BASE_URL,
        "type": PROVIDER_TYPE,
        "default_large_model_id": PROVIDER_DEFAULT_LARGE_MODEL,
        "default_small_model_id": PROVIDER_DEFAULT_SMALL_MODEL,
        "models": build_model_records(models, names),
    }


def write_provider(provider: Mapping[str, Any], path: str) -> Path:
    """Write ``provider`` as indented JSON, creating parent directories.

    Raises:
        CatalogError: ``STORAGE`` with ``source="output"`` when the file cannot
            be written.
    """
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(provider, indent=2, ensure_ascii=False), encoding="utf-8")
        target.chmod(0o600)
    except OSError as e:
        raise CatalogError(ErrorCode.STORAGE, f"failed to write provider config: {e}", source="output", raw=e) from e
    return target


__all__ = ["model_record", "build_model_records", "build_provider", "write_provider"]
