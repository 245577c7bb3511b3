"""HTTP transport for wire requests.

Purpose:
    Perform exactly one HTTP round trip for a :class:`WireRequest` and return
    the status plus the full body as text. The transport never parses JSON and
    never interprets the status; extraction and classification happen later.

External dependencies:
    - ``httpx`` for the synchronous HTTP client.

Resource model:
    - No pooling: a fresh ``httpx.Client`` is opened per call and closed before
      returning, so concurrent calls share no state.
    - No timeout is imposed unless one is configured; otherwise httpx's own
      default applies.
    - No retries. Transport-level failures raise ``GatewayError`` with
      ``NETWORK_ERROR``.
"""

from __future__ import annotations

import time
from typing import Optional

import httpx

from ..errors_parts.error_kind import ErrorKind
from ..errors_parts.gateway_error import GatewayError
from ..logging import LogContext, get_logger, normalized_log_event
from ..log_support.redaction import endpoint_host
from ..models import RawResponse, WireRequest

_logger = get_logger("gateway.transport")


def _client_kwargs(timeout_seconds: Optional[float], transport: Optional[httpx.BaseTransport]) -> dict:
    kwargs: dict = {"follow_redirects": True}
    if timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(timeout_seconds)
    if transport is not None:
        kwargs["transport"] = transport
    return kwargs


def send(
    wire: WireRequest,
    *,
    provider: str = "unknown",
    ctx: LogContext | None = None,
    timeout_seconds: Optional[float] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> RawResponse:
    """Send ``wire`` and capture the raw response.

    Parameters:
        wire: Request built by a provider adapter.
        provider: Provider kind value used in errors and logs.
        ctx: Logging context of the calling gateway invocation.
        timeout_seconds: Optional explicit timeout; ``None`` keeps httpx's default.
        transport: Optional httpx transport (tests inject ``httpx.MockTransport``).

    Returns:
        RawResponse with status and body text (possibly empty).

    Raises:
        GatewayError: ``NETWORK_ERROR`` when no HTTP response was received.
    """
    normalized_log_event(
        _logger,
        "transport.send",
        ctx,
        phase="send",
        host=endpoint_host(wire.url),
        method=wire.method,
    )
    t0 = time.perf_counter()
    try:
        with httpx.Client(**_client_kwargs(timeout_seconds, transport)) as client:
            resp = client.request(wire.method, wire.url, headers=wire.headers, json=wire.body)
            body = resp.text
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        message = f"Network error contacting {endpoint_host(wire.url)}: {type(e).__name__}"
        detail = str(e).strip()
        if detail:
            message = f"{message}: {detail}"
        normalized_log_event(
            _logger,
            "transport.error",
            ctx,
            phase="send",
            error_kind=ErrorKind.NETWORK_ERROR.value,
            error_type=type(e).__name__,
        )
        raise GatewayError(kind=ErrorKind.NETWORK_ERROR, message=message, provider=provider, raw=e) from e

    elapsed_ms = (time.perf_counter() - t0) * 1000.0
    raw = RawResponse(status=resp.status_code, body=body or "", elapsed_ms=elapsed_ms)
    normalized_log_event(
        _logger,
        "transport.response",
        ctx,
        phase="receive",
        status=raw.status,
        body_length=raw.body_length,
        latency_ms=round(elapsed_ms, 2),
    )
    return raw


__all__ = ["send"]
