"""Shared testing utilities for the gateway test suites.

Exports:
    - RecordingTransport: ``httpx.MockTransport`` that remembers requests.
    - reply(status, payload, text=...): canned single-response transport.
    - ListHandler: collects gateway log payloads as dicts.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, List, Optional

import httpx


class RecordingTransport(httpx.MockTransport):
    """``httpx.MockTransport`` that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content.decode("utf-8"))


def reply(status: int = 200, payload: Any = None, *, text: Optional[str] = None) -> RecordingTransport:
    """Return a transport that answers every request with one canned response."""

    def _handler(request: httpx.Request) -> httpx.Response:
        if text is not None:
            return httpx.Response(status, text=text)
        return httpx.Response(status, json=payload)

    return RecordingTransport(_handler)


class ListHandler(logging.Handler):
    """Capture gateway log payloads as dicts."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.events: List[dict] = []
        self.lines: List[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        msg = record.getMessage()
        self.lines.append(msg)
        try:
            self.events.append(json.loads(msg))
        except ValueError:
            self.events.append({"msg": msg})

    def names(self) -> List[str]:
        return [e.get("event") for e in self.events]

    def first(self, event: str) -> dict:
        return next(e for e in self.events if e.get("event") == event)
