"""
Wire-level request and raw response containers.

`WireRequest` is built by a provider adapter and consumed immediately by the
transport. `RawResponse` is what the transport captured: the status and the
full body as text, before any JSON parsing.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from ..log_support.redaction import redact_headers, redact_url


@dataclass(frozen=True)
class WireRequest:
    """A fully resolved provider HTTP request.

    Attributes:
        url: Absolute request URL (may embed a credential for Google).
        headers: Request headers, including any auth header.
        body: JSON body to send.
        method: HTTP method; every supported provider uses ``POST``.
    """

    url: str
    headers: Dict[str, str]
    body: Dict[str, Any]
    method: str = "POST"

    def redacted(self) -> Dict[str, Any]:
        """Return a loggable view with credentials masked."""
        return {
            "method": self.method,
            "url": redact_url(self.url),
            "headers": redact_headers(self.headers),
            "body": self.body,
        }


@dataclass(frozen=True)
class RawResponse:
    """Status and unparsed body text returned by the transport."""

    status: int
    body: str
    elapsed_ms: float = field(default=0.0, compare=False)

    @property
    def body_length(self) -> int:
        return len(self.body)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    @property
    def is_empty(self) -> bool:
        return not self.body.strip()


__all__ = ["WireRequest", "RawResponse"]
