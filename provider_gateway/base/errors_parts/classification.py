"""
Error classification: upstream status/payloads and exceptions -> ErrorKind.

``classify_failure`` turns a non-successful upstream response into a
``Failure``; ``classify_exception`` maps exceptions raised around the
transport. Providers report error text under different fields, so
``extract_error_message`` probes them in a fixed order.
"""
from __future__ import annotations

import asyncio
from typing import Any, Dict, Optional, Tuple

import httpx

from ...config.defaults import ERROR_SNIPPET_CHARS
from ..models_parts.chat_result import Failure
from ..utils.shapes import MalformedBody, dig, found, parse_json
from .error_kind import ErrorKind
from .gateway_error import GatewayError


_HTTP_STATUS_MAP: Dict[int, ErrorKind] = {
    401: ErrorKind.UPSTREAM_AUTH,
    403: ErrorKind.UPSTREAM_AUTH,
    429: ErrorKind.UPSTREAM_RATE_LIMIT,
}

# Paths probed for upstream error text, in order.
_ERROR_MESSAGE_PATHS: Tuple[Tuple[str, ...], ...] = (
    ("error", "message"),
    ("error",),
    ("message",),
)


def extract_error_message(data: Any) -> Optional[str]:
    """Return the first non-empty error string found in a parsed error payload.

    Probes ``error.message``, then ``error`` (when it is a string), then
    ``message``. Returns ``None`` when none of them carries text.
    """
    for path in _ERROR_MESSAGE_PATHS:
        value = dig(data, *path)
        if found(value) and isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _estimated_time(data: Any) -> Optional[float]:
    value = dig(data, "estimated_time")
    if not found(value) or isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _format_seconds(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:.1f}"


def snippet(body: str, limit: int = ERROR_SNIPPET_CHARS) -> str:
    """Return the first ``limit`` characters of ``body`` (stripped)."""
    return body.strip()[:limit]


def classify_failure(
    status: int,
    body: str,
    *,
    provider_label: str = "API",
    snippet_chars: int = ERROR_SNIPPET_CHARS,
) -> Failure:
    """Classify an unsuccessful upstream response into a ``Failure``.

    Precedence:
        1. Empty body at any status -> ``MALFORMED_UPSTREAM_RESPONSE``.
        2. 503 with ``estimated_time`` -> ``MODEL_LOADING`` (estimate in message).
        3. 401/403 -> ``UPSTREAM_AUTH``; 429 -> ``UPSTREAM_RATE_LIMIT``.
        4. Anything else -> ``UPSTREAM_ERROR``.

    The message carries the upstream error text when the body is JSON with a
    known error field, else a body snippet, else ``"<label> API error: <status>"``.
    """
    if not body or not body.strip():
        return Failure(
            kind=ErrorKind.MALFORMED_UPSTREAM_RESPONSE,
            message=f"{provider_label} returned an empty response body (status {status})",
        )

    try:
        data: Any = parse_json(body)
    except MalformedBody:
        data = None

    if status == 503 and data is not None:
        estimate = _estimated_time(data)
        if estimate is not None:
            return Failure(
                kind=ErrorKind.MODEL_LOADING,
                message=(
                    f"Model is loading on {provider_label}; estimated time "
                    f"{_format_seconds(estimate)} seconds. Retry after the model has loaded."
                ),
            )

    kind = _HTTP_STATUS_MAP.get(status, ErrorKind.UPSTREAM_ERROR)
    upstream = extract_error_message(data) if data is not None else None
    if upstream is None and data is None:
        upstream = snippet(body, snippet_chars) or None
    message = upstream or f"{provider_label} API error: {status}"
    return Failure(kind=kind, message=message)


def classify_exception(exc: BaseException) -> ErrorKind:
    """Classify an exception raised around an upstream call.

    Precedence:
        1. ``GatewayError`` passthrough.
        2. Timeouts and httpx transport failures -> ``NETWORK_ERROR``.
        3. ``UPSTREAM_ERROR`` fallback.
    """
    if isinstance(exc, GatewayError):
        return exc.kind
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError, httpx.TimeoutException, httpx.TransportError)):
        return ErrorKind.NETWORK_ERROR
    return ErrorKind.UPSTREAM_ERROR


__all__ = [
    "classify_exception",
    "classify_failure",
    "extract_error_message",
    "snippet",
    "_HTTP_STATUS_MAP",
]
