"""Structured logging utilities shared by every catalog component.

Rationale:
- One place configures the ``catalog`` base logger (stderr handler, JSON or
  plain formatting, level from ``CATALOG_LOG_LEVEL``).
- Module loggers are children (``catalog.naming`` and so on) that propagate
  to the base handler, so nothing attaches ad-hoc handlers.
- ``log_event`` emits a single JSON payload per event; the JSON formatter
  hoists its keys to the top level of the emitted line.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "catalog"
PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_BASE_LOGGER_ATTR = "_catalog_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_catalog_console_handler"
_FILE_HANDLER_ATTR = "_catalog_file_handler"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a level name (DEBUG, INFO, WARN/WARNING, ERROR, CRITICAL).

    Unknown or empty values return ``default``.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(PLAIN_FORMAT)


def _new_console_handler(json_mode: bool, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize (once) and return the shared ``catalog`` logger.

    On repeat calls the console handler is re-pointed at the current
    ``sys.stderr``; test runners swap the stream between tests.
    """
    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired_level = _parse_level(os.getenv("CATALOG_LOG_LEVEL"), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream_obj = getattr(existing, "stream", None)
            if stream_obj is None or getattr(stream_obj, "closed", False):
                logger.removeHandler(existing)
                with contextlib.suppress(Exception):
                    existing.close()
                logger.addHandler(_new_console_handler(json_mode, logger.level))
            elif isinstance(existing, logging.StreamHandler) and stream_obj is not sys.stderr:
                existing.setStream(sys.stderr)
        return logger

    logger.setLevel(desired_level)
    logger.handlers[:] = [_new_console_handler(json_mode, desired_level)]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return ``name`` as a logger wired to the shared base handler.

    ``name`` should live under the ``catalog.`` namespace; the base logger is
    initialized on first use.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared base logger at runtime.

    Parameters
    ----------
    level: int | str | None
        New level (number or name). ``None`` keeps the current level.
    file_path: Optional[str]
        When set, attach (or reuse) a rotating file handler writing to this
        path. When ``None``, any managed file handler is removed.
    json_mode: bool
        JSON or plain text formatting for all managed handlers.

    Returns
    -------
    logging.Logger
        The base ``catalog`` logger.
    """
    logger = _ensure_base_logger(json_mode=json_mode, level=logging.INFO)

    if level is not None:
        logger.setLevel(_parse_level(level, default=logger.level) if isinstance(level, str) else level)

    for h in logger.handlers:
        if getattr(h, _CONSOLE_HANDLER_ATTR, False):
            h.setFormatter(_formatter(json_mode))
        h.setLevel(logger.level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    abs_path = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    keep: Optional[logging.Handler] = None
    for h in managed:
        if abs_path and getattr(h, "baseFilename", None) == abs_path:
            keep = h
            continue
        logger.removeHandler(h)
        with contextlib.suppress(Exception):
            h.close()

    if abs_path is None:
        return logger
    if keep is None:
        os.makedirs(os.path.dirname(abs_path), exist_ok=True)
        fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(fh, _FILE_HANDLER_ATTR, True)
        keep = fh
        logger.addHandler(fh)
    keep.setFormatter(_formatter(json_mode))
    keep.setLevel(logger.level)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit a structured event as one JSON message.

    Parameters
    ----------
    logger: logging.Logger
        Logger obtained from :func:`get_logger`.
    event: str
        Event name, e.g. ``cache.hit``.
    ctx: LogContext | None
        Model context merged into the payload.
    level: int
        Logging level for the record.
    **fields: Any
        Extra JSON-serializable key/value pairs; ``None`` values are dropped.
    """
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
