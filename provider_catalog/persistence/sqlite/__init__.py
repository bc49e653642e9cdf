from __future__ import annotations

from .engine import create_connection, init_schema
from .display_name_cache import DisplayNameCache

__all__ = [
    "create_connection",
    "init_schema",
    "DisplayNameCache",
]
