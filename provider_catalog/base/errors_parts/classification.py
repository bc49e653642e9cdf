"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Handles the two HTTP stacks used in this package (``httpx`` for generation,
``requests`` for the catalog fetch), ``sqlite3`` storage errors, and plain
HTTP status codes.
"""
from __future__ import annotations

import sqlite3
from typing import Dict, Optional

import httpx
import requests

from .error_code import ErrorCode
from .catalog_error import CatalogError


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def _extract_status(exc: Exception) -> Optional[int]:
    """Return an HTTP status code carried by ``exc``, if any.

    Checks ``exc.status_code`` then ``exc.response.status_code``.
    """
    val = getattr(exc, "status_code", None)
    if isinstance(val, int) and 100 <= val < 600:
        return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


def code_for_status(status: int) -> ErrorCode:
    """Map an HTTP status to an :class:`ErrorCode`.

    Unlisted 5xx statuses map to ``SERVER_ERROR``; anything else unlisted maps
    to ``UNKNOWN``.
    """
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    return ErrorCode.SERVER_ERROR if status >= 500 else ErrorCode.UNKNOWN


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. CatalogError passthrough.
        2. Timeouts (builtin, httpx, requests).
        3. Transport failures (connection refused, DNS, protocol errors).
        4. HTTP status mapping.
        5. SQLite errors.
        6. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, CatalogError):
        return exc.code
    if isinstance(exc, (TimeoutError, httpx.TimeoutException, requests.Timeout)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, (httpx.TransportError, requests.ConnectionError)):
        return ErrorCode.UNAVAILABLE
    status = _extract_status(exc)
    if status is not None:
        return code_for_status(status)
    if isinstance(exc, sqlite3.Error):
        return ErrorCode.STORAGE
    return ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "code_for_status",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
