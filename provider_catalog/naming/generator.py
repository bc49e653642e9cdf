"""APIpie chat-completions client used to generate display names.

Summary:
- One blocking ``POST <base_url>/chat/completions`` per single model or per
  group, through the pooled ``httpx`` client (timeouts from
  ``get_timeout_config()``).
- Every failure surfaces as :class:`CatalogError` with ``source="generation"``;
  the namers turn it into a fallback name and a notification. Nothing is
  retried within a run.

Failure codes:
    missing credential -> AUTH
    timeout            -> TIMEOUT
    transport error    -> UNAVAILABLE
    non-200 status     -> mapped from the status
    undecodable body, empty choice list, invalid single name -> VALIDATION
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import httpx
from pydantic import BaseModel, ValidationError

from ..base.dto import CatalogModel
from ..base.errors import CatalogError, ErrorCode, classify_exception, code_for_status
from ..base.http import get_httpx_client
from ..base.logging import get_logger
from ..config.defaults import (
    APIPIE_CHAT_PATH,
    APIPIE_DEFAULT_BASE_URL,
    DISPLAY_NAME_DEFAULT_MODEL,
    DISPLAY_NAME_GROUP_MAX_TOKENS,
    DISPLAY_NAME_SINGLE_MAX_TOKENS,
    DISPLAY_NAME_TEMPERATURE,
)
from .parsing import validate_name
from .prompts import group_prompt, single_prompt

SOURCE = "generation"


class _Message(BaseModel):
    content: str = ""


class _Choice(BaseModel):
    message: _Message = _Message()


class _CompletionResponse(BaseModel):
    choices: List[_Choice] = []


class DisplayNameGenerator:
    """Generates display names through APIpie.

    Parameters:
        api_key: Dedicated display-name credential. Without it every call
            fails fast with ``AUTH`` and no request is made.
        base_url: API root (defaults to ``https://apipie.ai/v1``).
        model: Model asked to produce names.
        client: Optional ``httpx.Client``; defaults to the shared pool entry
            for this base URL.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: Optional[str] = None,
        model: str = DISPLAY_NAME_DEFAULT_MODEL,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = (base_url or APIPIE_DEFAULT_BASE_URL).rstrip("/")
        self._model = model
        self._client = client
        self._logger = get_logger("catalog.generation")

    @property
    def enabled(self) -> bool:
        return bool(self._api_key)

    def _http(self) -> httpx.Client:
        return self._client or get_httpx_client(self._base_url, purpose="display_names")

    def complete(self, prompt: str, *, max_tokens: int, model_id: Optional[str] = None) -> str:
        """Send ``prompt`` as a single user message and return the first choice text.

        Raises:
            CatalogError: on any failure (see module docstring for codes).
        """
        if not self._api_key:
            raise CatalogError(ErrorCode.AUTH, "display name API key not configured", source=SOURCE, model_id=model_id)
        payload = {
            "messages": [{"role": "user", "content": prompt}],
            "model": self._model,
            "max_tokens": max_tokens,
            "temperature": DISPLAY_NAME_TEMPERATURE,
        }
        headers = {"x-api-key": self._api_key, "Content-Type": "application/json"}
        try:
            resp = self._http().post(self._base_url + APIPIE_CHAT_PATH, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise CatalogError(classify_exception(e), f"request failed: {e}", source=SOURCE, model_id=model_id, raw=e) from e

        if resp.status_code != 200:
            raise CatalogError(
                code_for_status(resp.status_code),
                f"API returned status {resp.status_code}: {resp.text}",
                source=SOURCE,
                model_id=model_id,
            )
        try:
            body = _CompletionResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise CatalogError(ErrorCode.VALIDATION, "failed to decode response", source=SOURCE, model_id=model_id, raw=e) from e
        if not body.choices:
            raise CatalogError(ErrorCode.VALIDATION, "API returned empty choices", source=SOURCE, model_id=model_id)
        return body.choices[0].message.content.strip()

    def generate_name(self, model_id: str, description: str) -> str:
        """Return a validated display name for one model.

        Raises:
            CatalogError: generation failed or the reply is not a valid name.
        """
        text = self.complete(
            single_prompt(model_id, description),
            max_tokens=DISPLAY_NAME_SINGLE_MAX_TOKENS,
            model_id=model_id,
        )
        name = validate_name(text)
        if name is None:
            raise CatalogError(
                ErrorCode.VALIDATION,
                f"invalid display name format: '{text}'",
                source=SOURCE,
                model_id=model_id,
            )
        return name

    def generate_group_reply(self, models: Sequence[CatalogModel]) -> str:
        """Return the raw batch reply naming ``models`` by 1-based position."""
        return self.complete(
            group_prompt(models),
            max_tokens=DISPLAY_NAME_GROUP_MAX_TOKENS,
            model_id=models[0].id if models else None,
        )


__all__ = ["DisplayNameGenerator"]
