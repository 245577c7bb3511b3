"""Shared adapter behavior.

``BaseAdapter`` implements the provider-independent half of extraction:
strict JSON parsing, running the provider's ordered shape matchers, and the
"No response" fallback. Concrete adapters declare ``kind``, ``matchers`` and
``build_request``.
"""

from __future__ import annotations

import logging
from typing import ClassVar, Dict, Optional, Sequence

from ..config import GatewayConfig
from ..config.defaults import NO_RESPONSE_TEXT
from .errors_parts.classification import snippet
from .errors_parts.error_kind import ErrorKind
from .logging import LogContext, get_logger, normalized_log_event
from .models import ChatRequest, ChatResult, Failure, ProviderKind, RawResponse, Success, WireRequest
from .utils.shapes import MalformedBody, ShapeMatcher, extract_text, parse_json

JSON_HEADERS: Dict[str, str] = {"Content-Type": "application/json"}


def bearer_headers(api_key: Optional[str]) -> Dict[str, str]:
    """Return JSON headers plus ``Authorization: Bearer`` when a key is present.

    Without a key the header is absent entirely, never ``"Bearer "``.
    """
    headers = dict(JSON_HEADERS)
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers


class BaseAdapter:
    """Base class for provider adapters."""

    kind: ClassVar[ProviderKind]
    matchers: ClassVar[Sequence[ShapeMatcher]] = ()

    def __init__(self) -> None:
        self._logger = get_logger(f"gateway.providers.{self.kind.value}")

    def build_request(self, request: ChatRequest, config: GatewayConfig) -> WireRequest:  # pragma: no cover - abstract
        raise NotImplementedError

    def extract(self, raw: RawResponse, config: GatewayConfig, ctx: LogContext | None = None) -> ChatResult:
        """Parse ``raw`` and pull the reply text through ``matchers``.

        Returns:
            ``Failure(MALFORMED_UPSTREAM_RESPONSE)`` for empty or non-JSON
            bodies; otherwise ``Success`` with the matched text, or with
            ``"No response"`` when the text is empty or the shape is unfamiliar.
        """
        if raw.is_empty:
            return Failure(
                kind=ErrorKind.MALFORMED_UPSTREAM_RESPONSE,
                message=f"{self.kind.label} returned an empty response body (status {raw.status})",
            )
        try:
            data = parse_json(raw.body)
        except MalformedBody:
            return Failure(
                kind=ErrorKind.MALFORMED_UPSTREAM_RESPONSE,
                message=snippet(raw.body, config.error_snippet_chars),
            )

        match = extract_text(data, self.matchers)
        if not match.recognized:
            normalized_log_event(
                self._logger,
                "extract.unrecognized_shape",
                ctx,
                phase="extract",
                status=raw.status,
                body_length=raw.body_length,
                level=logging.WARNING,
                top_level=type(data).__name__,
            )
            return Success(text=NO_RESPONSE_TEXT)
        if match.empty:
            normalized_log_event(
                self._logger,
                "extract.empty",
                ctx,
                phase="extract",
                status=raw.status,
                body_length=raw.body_length,
                matcher=match.matcher,
            )
            return Success(text=NO_RESPONSE_TEXT)
        return Success(text=match.text or NO_RESPONSE_TEXT)


__all__ = ["BaseAdapter", "JSON_HEADERS", "bearer_headers"]
