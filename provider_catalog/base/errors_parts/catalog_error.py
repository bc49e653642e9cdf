"""
Structured exception type shared by the catalog client, the display-name
generator and the persistent cache.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class CatalogError(Exception):
    """A failure with a normalized :class:`ErrorCode`.

    Attributes:
        code: Normalized classification for the failure.
        message: Human-readable message suitable for logs and notifications.
        source: Component that raised it (``"catalog"``, ``"generation"``,
            ``"cache"`` or ``"output"``).
        model_id: Optional model identifier the failure relates to.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    source: str
    model_id: Optional[str] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.source}:{self.model_id or '-'} {self.code.value}: {self.message}"


__all__ = ["CatalogError"]
