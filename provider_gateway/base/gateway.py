"""Gateway orchestration: one normalized request -> one ChatResult.

Flow for a single call::

    classify(endpoint) -> stealth -> credential check -> adapter.build_request
        -> transport.send -> adapter.extract | classify_failure

``Gateway.chat`` never raises for upstream, transport or parse problems; each
of them ends as a :class:`Failure` with a display-ready message. Anything
unexpected raised after the credential check is mapped through
:func:`classify_exception` and logged at ERROR, so callers always get a result.

Every call gets a fresh request id that is carried through all log events,
so one call's ``gateway.start``/``transport.*``/``gateway.*`` lines can be
correlated. Nothing is shared between calls.
"""

from __future__ import annotations

import logging
import uuid
from typing import Optional

import httpx

from ..config import GatewayConfig, get_gateway_config
from .errors_parts.classification import classify_exception, classify_failure
from .errors_parts.error_kind import ErrorKind
from .errors_parts.gateway_error import GatewayError
from .factory import AdapterFactory
from .http.transport import send
from .log_support.redaction import endpoint_host
from .logging import LogContext, get_logger, normalized_log_event
from .models import ChatRequest, ChatResult, Failure, ProviderKind
from .routing.classifier import classify, requires_credential
from .utils.stealth import apply_stealth

_logger = get_logger("gateway.core")


def _header_safe(value: str) -> bool:
    try:
        value.encode("ascii")
    except UnicodeEncodeError:
        return False
    return True


def check_credential(kind: ProviderKind, request: ChatRequest) -> None:
    """Raise ``MISSING_CREDENTIAL`` when the endpoint needs a key and none was given.

    A key that cannot be encoded into an HTTP header (for example one pasted
    with a smart quote or an ellipsis) is rejected the same way.
    """
    if requires_credential(kind, request.endpoint_url) and not request.has_credential:
        raise GatewayError(
            kind=ErrorKind.MISSING_CREDENTIAL,
            message=f"API key is required for {kind.label} endpoints",
            provider=kind.value,
        )
    if request.api_key is not None and not _header_safe(request.api_key):
        raise GatewayError(
            kind=ErrorKind.MISSING_CREDENTIAL,
            message="API key contains characters that cannot be sent in an HTTP header",
            provider=kind.value,
        )


class Gateway:
    """Stateless entry point that routes a chat request to its provider.

    Parameters:
        config: Resolved settings; loaded via :func:`get_gateway_config` when omitted.
        transport: Optional httpx transport handed to every send (tests use
            ``httpx.MockTransport``).
    """

    def __init__(
        self,
        config: Optional[GatewayConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.config = config or get_gateway_config()
        self._transport = transport

    def chat(self, request: ChatRequest) -> ChatResult:
        kind = classify(request.endpoint_url)
        ctx = LogContext(
            provider=kind.value,
            model=request.model,
            request_id=uuid.uuid4().hex,
            endpoint=endpoint_host(request.endpoint_url),
        )
        normalized_log_event(
            _logger,
            "gateway.start",
            ctx,
            phase="start",
            stealth=request.stealth_mode,
            history_len=len(request.history),
        )

        try:
            check_credential(kind, request)
        except GatewayError as e:
            failure = Failure.from_error(e)
            normalized_log_event(
                _logger,
                "gateway.credential_missing",
                ctx,
                phase="validate",
                error_kind=e.kind.value,
                level=logging.WARNING,
            )
            return self._finish(failure, ctx)

        try:
            return self._dispatch(kind, request, ctx)
        except Exception as e:
            error_kind = classify_exception(e)
            normalized_log_event(
                _logger,
                "gateway.failure",
                ctx,
                phase="dispatch",
                error_kind=error_kind.value,
                error_type=type(e).__name__,
                level=logging.ERROR,
            )
            message = f"Unexpected error calling {kind.label}: {type(e).__name__}"
            return Failure(kind=error_kind, message=message)

    def _dispatch(self, kind: ProviderKind, request: ChatRequest, ctx: LogContext) -> ChatResult:
        outgoing = apply_stealth(request, prefix=self.config.stealth_prefix)
        adapter = AdapterFactory.create(kind)
        wire = adapter.build_request(outgoing, self.config)

        try:
            raw = send(
                wire,
                provider=kind.value,
                ctx=ctx,
                timeout_seconds=self.config.http_timeout_seconds,
                transport=self._transport,
            )
        except GatewayError as e:
            return self._finish(Failure.from_error(e), ctx)

        result: ChatResult
        if raw.is_success:
            result = adapter.extract(raw, self.config, ctx)
        else:
            result = classify_failure(
                raw.status,
                raw.body,
                provider_label=kind.label,
                snippet_chars=self.config.error_snippet_chars,
            )
        return self._finish(result, ctx, status=raw.status, body_length=raw.body_length)

    def _finish(
        self,
        result: ChatResult,
        ctx: LogContext,
        *,
        status: Optional[int] = None,
        body_length: Optional[int] = None,
    ) -> ChatResult:
        if result.ok:
            normalized_log_event(
                _logger,
                "gateway.success",
                ctx,
                phase="finalize",
                status=status,
                body_length=body_length,
                response_chars=len(result.text),
            )
        else:
            normalized_log_event(
                _logger,
                "gateway.failure",
                ctx,
                phase="finalize",
                status=status,
                body_length=body_length,
                error_kind=result.kind.value,
                level=logging.WARNING,
            )
        return result


def chat(
    request: ChatRequest,
    *,
    config: Optional[GatewayConfig] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> ChatResult:
    """Convenience wrapper: ``Gateway(config, transport).chat(request)``."""
    return Gateway(config=config, transport=transport).chat(request)


__all__ = ["Gateway", "chat", "check_credential"]
