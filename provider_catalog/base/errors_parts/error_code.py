"""
Normalized error codes for catalog, generation and cache failures.

Values are lowercase snake_case and appear verbatim in structured log events
(``error_code`` field), so treat them as a stable contract.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    STORAGE = "storage"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
