"""
Normalized gateway error kinds (taxonomy).

Defines the `ErrorKind` enumeration used by the gateway, the error classifier
and the HTTP service. Values are lowercase snake_case and are considered a
stable public contract for logging and API consumers.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Enumerated failure kinds a gateway call can end with.

    Categories:
        caller: fixable by the caller without retrying (``MISSING_CREDENTIAL``).
        transient: retry-after-delay candidates (``MODEL_LOADING``,
            ``UPSTREAM_RATE_LIMIT``).
        rejection: not retryable without changing inputs (``UPSTREAM_AUTH``,
            ``UPSTREAM_ERROR``).
        protocol: the adapter's assumptions about the wire format may be stale
            (``MALFORMED_UPSTREAM_RESPONSE``, ``NETWORK_ERROR``).
    """

    MISSING_CREDENTIAL = "missing_credential"
    UPSTREAM_AUTH = "upstream_auth"
    UPSTREAM_RATE_LIMIT = "upstream_rate_limit"
    MODEL_LOADING = "model_loading"
    MALFORMED_UPSTREAM_RESPONSE = "malformed_upstream_response"
    UPSTREAM_ERROR = "upstream_error"
    NETWORK_ERROR = "network_error"

    @property
    def category(self) -> str:
        """Return the coarse category name for this kind."""
        return _CATEGORIES[self]

    @property
    def retryable(self) -> bool:
        """Hint for callers: True when retrying later may succeed unchanged."""
        return _CATEGORIES[self] == "transient"

    @property
    def is_caller_error(self) -> bool:
        return _CATEGORIES[self] == "caller"


_CATEGORIES = {
    ErrorKind.MISSING_CREDENTIAL: "caller",
    ErrorKind.MODEL_LOADING: "transient",
    ErrorKind.UPSTREAM_RATE_LIMIT: "transient",
    ErrorKind.UPSTREAM_AUTH: "rejection",
    ErrorKind.UPSTREAM_ERROR: "rejection",
    ErrorKind.MALFORMED_UPSTREAM_RESPONSE: "protocol",
    ErrorKind.NETWORK_ERROR: "protocol",
}


__all__ = ["ErrorKind"]
