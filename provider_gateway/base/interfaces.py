"""Provider adapter contract.

Each :class:`ProviderKind` has exactly one adapter that owns the two
provider-specific halves of a call: building the wire request and extracting
text from the raw response. Everything else (classification, stealth,
credential policy, transport, error classification) is shared.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ..config import GatewayConfig
from .log_support import LogContext
from .models import ChatRequest, ChatResult, ProviderKind, RawResponse, WireRequest
from .utils.shapes import ShapeMatcher


@runtime_checkable
class ProviderAdapter(Protocol):
    """Minimal interface for provider adapters.

    Implementations must be stateless; one instance may serve concurrent calls.
    """

    kind: ProviderKind

    #: Ordered shape matchers tried by ``extract``.
    matchers: Sequence[ShapeMatcher]

    def build_request(self, request: ChatRequest, config: GatewayConfig) -> WireRequest:
        """Translate the normalized request into this provider's wire format.

        Called only after the credential policy passed; never performs I/O.
        """
        ...

    def extract(self, raw: RawResponse, config: GatewayConfig, ctx: LogContext | None = None) -> ChatResult:
        """Turn a successful raw response into a ``ChatResult``.

        Never raises: unparseable JSON yields a ``MALFORMED_UPSTREAM_RESPONSE``
        failure and unfamiliar shapes degrade to the "No response" text.
        """
        ...


__all__ = ["ProviderAdapter"]
