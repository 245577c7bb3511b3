"""JSON line formatter for gateway logs.

Every record becomes one JSON object with ``ts``, ``level`` and ``logger``.
Structured events from ``log_event`` arrive as a JSON-encoded message; their
keys become top-level fields and the encoded string is not repeated. Plain
messages are kept under ``msg``. Attributes passed through ``extra=`` are
merged last, and any whose name matches a credential header or query
parameter is masked.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional, Tuple

from .redaction import MASK, SENSITIVE_HEADERS, SENSITIVE_QUERY_PARAMS

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

# Attributes every LogRecord carries; anything else on a record came from ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))) | {
    "message",
    "asctime",
    "taskName",
}

_SENSITIVE_FIELDS = SENSITIVE_HEADERS | SENSITIVE_QUERY_PARAMS


def _decode_event(text: str) -> Optional[Dict[str, Any]]:
    if not text.startswith("{"):
        return None
    try:
        parsed = json.loads(text)
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


def _extras(record: logging.LogRecord) -> Iterable[Tuple[str, Any]]:
    return ((k, v) for k, v in vars(record).items() if k not in _RECORD_ATTRS and not k.startswith("_"))


class JsonFormatter(logging.Formatter):
    """Render records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
        }
        text = record.getMessage()
        event = _decode_event(text)
        if event is None:
            payload["msg"] = text
        else:
            self._merge(payload, event.items())
        self._merge(payload, _extras(record))
        if record.exc_info and record.exc_info[0] is not None:
            payload["exc_type"] = record.exc_info[0].__name__
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)

    @staticmethod
    def _merge(payload: Dict[str, Any], items: Iterable[Tuple[str, Any]]) -> None:
        # First writer wins, so events and extras cannot replace ts/level/logger.
        for key, value in items:
            if key in payload:
                continue
            payload[key] = MASK if key.lower() in _SENSITIVE_FIELDS else value


__all__ = ["JsonFormatter", "ISO"]
