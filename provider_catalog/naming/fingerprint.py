"""Metadata fingerprint and cache keys.

The catalog reuses one identifier for provider, route and pool variants, so
the identifier alone cannot key the display-name cache. A fingerprint is a
SHA-256 digest over every field that can make two same-id entries
operationally different; the cache key is ``(model_id, fingerprint)``.

Field order is part of the on-disk contract: reordering it changes every
fingerprint and invalidates existing cache files. Separator characters inside
a field are backslash-escaped so distinct field tuples never hash the same
text; fields without separators hash exactly as before.
"""
from __future__ import annotations

import hashlib
from typing import NamedTuple, Sequence

from ..base.dto import CatalogModel

FIELD_SEPARATOR = "|"
MODALITY_SEPARATOR = ","
ESCAPE = "\\"


class CacheKey(NamedTuple):
    """Identity of one catalog variant."""

    model_id: str
    fingerprint: str

    def __str__(self) -> str:
        return f"{self.model_id}{FIELD_SEPARATOR}{self.fingerprint}"


def _escape(value: str, *separators: str) -> str:
    value = value.replace(ESCAPE, ESCAPE * 2)
    for sep in separators:
        value = value.replace(sep, ESCAPE + sep)
    return value


def _field(value: str) -> str:
    return _escape(value, FIELD_SEPARATOR)


def _modalities(values: Sequence[str]) -> str:
    return MODALITY_SEPARATOR.join(_escape(v, FIELD_SEPARATOR, MODALITY_SEPARATOR) for v in values)


def fingerprint_source(model: CatalogModel) -> str:
    """Return the exact text that :func:`fingerprint` hashes."""
    return FIELD_SEPARATOR.join(
        [
            _field(model.description),
            _field(model.provider),
            _field(model.route),
            _field(model.pool),
            _field(model.subtype),
            _field(model.instruct_type),
            _field(model.quantization),
            _field(model.model),
            _modalities(model.input_modalities),
            _modalities(model.output_modalities),
            str(model.max_tokens),
        ]
    )


def fingerprint(model: CatalogModel) -> str:
    """Return the 64-character hex SHA-256 fingerprint of ``model``."""
    return hashlib.sha256(fingerprint_source(model).encode("utf-8")).hexdigest()


def cache_key(model: CatalogModel) -> CacheKey:
    return CacheKey(model.id, fingerprint(model))


__all__ = ["CacheKey", "fingerprint", "fingerprint_source", "cache_key"]
