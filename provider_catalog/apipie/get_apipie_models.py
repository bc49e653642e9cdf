"""
APIpie: get models

Behavior
- Fetches the detailed catalog:
    GET https://apipie.ai/v1/models/detailed
- Sends ``x-api-key`` when ``APIPIE_API_KEY`` is configured (the listing is
  public, the key only raises limits).
- Validates each entry into :class:`CatalogModel`.

Failure semantics
- Any failure raises :class:`CatalogError` (``source="catalog"``). A run
  cannot produce a config without the catalog, so callers treat this as
  fatal. No retries or cached fallback.
"""

from __future__ import annotations

from typing import List, Optional

import requests
from pydantic import ValidationError

from ..base.dto import CatalogModel, CatalogResponse
from ..base.errors import CatalogError, ErrorCode, classify_exception, code_for_status
from ..base.logging import get_logger, log_event
from ..base.timeouts import get_timeout_config
from ..config.defaults import APIPIE_DEFAULT_BASE_URL, APIPIE_MODELS_PATH, APIPIE_USER_AGENT

PROVIDER = "apipie"
SOURCE = "catalog"

_logger = get_logger("catalog.apipie")


def _models_url(base_url: Optional[str]) -> str:
    return (base_url or APIPIE_DEFAULT_BASE_URL).rstrip("/") + APIPIE_MODELS_PATH


def fetch_models(api_key: Optional[str] = None, base_url: Optional[str] = None) -> List[CatalogModel]:
    """Fetch and validate the APIpie detailed catalog.

    Args:
        api_key: Optional catalog key sent as ``x-api-key``.
        base_url: API root; defaults to ``https://apipie.ai/v1``.

    Returns:
        Every catalog entry, in catalog order (not yet filtered).

    Raises:
        CatalogError: network failure, non-200 status or undecodable body.
    """
    url = _models_url(base_url)
    headers = {"User-Agent": APIPIE_USER_AGENT, "Accept": "application/json"}
    if api_key:
        headers["x-api-key"] = api_key
    cfg = get_timeout_config()
    try:
        resp = requests.get(url, headers=headers, timeout=(cfg.connect_timeout_seconds, cfg.http_timeout_seconds))
    except requests.RequestException as e:
        raise CatalogError(classify_exception(e), f"catalog request failed: {e}", source=SOURCE, raw=e) from e

    if resp.status_code != 200:
        raise CatalogError(
            code_for_status(resp.status_code),
            f"status {resp.status_code}: {resp.text}",
            source=SOURCE,
        )
    try:
        body = CatalogResponse.model_validate(resp.json())
    except (ValueError, ValidationError) as e:
        raise CatalogError(ErrorCode.VALIDATION, f"failed to decode catalog: {e}", source=SOURCE, raw=e) from e

    log_event(_logger, "catalog.fetched", provider=PROVIDER, models=len(body.data))
    return list(body.data)


def run() -> List[CatalogModel]:
    """Fetch with settings from :func:`provider_catalog.config.get_catalog_config`."""
    from ..config import get_catalog_config

    cfg = get_catalog_config()
    return fetch_models(cfg.catalog_api_key, cfg.base_url)


if __name__ == "__main__":
    models = run()
    print(f"[apipie] loaded {len(models)} models")
