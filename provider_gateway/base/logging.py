"""Structured logging utilities for the gateway.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid sprinkling ad-hoc logger setup across adapters and the service.

All module loggers are children of the shared ``gateway`` logger, which owns a
single stderr handler. ``normalized_log_event`` guarantees the canonical keys
``phase``, ``status``, ``body_length`` and ``error_kind`` so that events from
every provider can be filtered the same way. Payloads must never include API
keys or full response bodies; callers pass lengths and redacted URLs only.
"""
from __future__ import annotations

import logging
import json
import sys
import os
import contextlib
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from .log_support import JsonFormatter, LogContext


BASE_LOGGER_NAME = "gateway"
LOG_LEVEL_ENV = "GATEWAY_LOG_LEVEL"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_BASE_LOGGER_ATTR = "_gateway_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_gateway_console_handler"
_FILE_HANDLER_ATTR = "_gateway_file_handler"


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level string into an integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL) case-insensitively.
    Falls back to ``default`` on unknown values.
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


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared ``gateway`` logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        if logger.level != desired_level:
            logger.setLevel(desired_level)
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            # pytest's capsys swaps sys.stderr between tests; rebind when closed.
            stream_obj = getattr(existing, "stream", None)
            if stream_obj is None or getattr(stream_obj, "closed", False) or stream_obj is not sys.stderr:
                with contextlib.suppress(ValueError):
                    existing.setStream(sys.stderr)
            existing.setLevel(desired_level)
        return logger

    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return a logger that emits through the shared ``gateway`` handler.

    Names outside the ``gateway.`` hierarchy are prefixed so that every logger
    returned here propagates to the single configured handler.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
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
    """Reconfigure the shared gateway logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level. Accepts numeric levels or names (e.g., "DEBUG").
        When ``None``, the current level is preserved.
    file_path: Optional[str]
        When provided, a rotating file handler (10MB x 5) is attached, or reused
        when one already points at the same path. When ``None``, any file
        handler previously attached by this function is removed.
    json_mode: bool
        Use the JSON formatter (default) or a plain text formatter for the
        file handler.

    Returns
    -------
    logging.Logger
        The configured base logger. Handlers attached by other code are kept.
    """
    logger = _ensure_base_logger(json_mode=json_mode, level=logging.INFO)

    if level is not None:
        resolved = _parse_level(level, default=logger.level) if isinstance(level, str) else level
        logger.setLevel(resolved)
        for h in logger.handlers:
            h.setLevel(resolved)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for h in managed:
            logger.removeHandler(h)
            h.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)

    existing: Optional[logging.FileHandler] = None
    for h in managed:
        if getattr(h, "baseFilename", None) == abs_path:
            existing = h
        else:
            logger.removeHandler(h)
            h.close()

    if existing is None:
        existing = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(existing, _FILE_HANDLER_ATTR, True)
        logger.addHandler(existing)
    existing.setFormatter(_formatter(json_mode))
    existing.setLevel(logger.level)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON line.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance obtained from ``get_logger``.
    event: str
        Event name (e.g. ``transport.response``).
    ctx: LogContext | None
        Per-call context; merged shallowly.
    level: int
        Log level for the record.
    keep_none: bool
        When ``True``, keys whose values are ``None`` are kept (as JSON ``null``).
    **fields: Any
        Arbitrary serializable key/value pairs.
    """
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = (
    "phase",
    "status",
    "body_length",
    "error_kind",
)


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    status: int | None = None,
    body_length: int | None = None,
    error_kind: str | None = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit an event carrying the canonical gateway keys.

    ``phase``, ``status`` and ``body_length`` are always present (``null`` when
    unknown). ``error_kind`` is omitted when ``None`` to reflect "no error".
    ``extra_fields`` never overwrite the canonical keys; ``None`` extras are dropped.
    """
    base_fields: Dict[str, Any] = {
        "phase": phase,
        "status": status,
        "body_length": body_length,
    }
    if error_kind is not None:
        base_fields["error_kind"] = error_kind
    for k, v in extra_fields.items():
        if v is None or k in base_fields:
            continue
        base_fields[k] = v
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
