"""
Structured gateway error exception type.

Raised inside the gateway pipeline (credential check, transport) and converted
into a `Failure` result at the gateway boundary so callers never see it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_kind import ErrorKind


@dataclass
class GatewayError(Exception):
    """Represents a classified gateway failure.

    Attributes:
        kind: Normalized :class:`ErrorKind` for the failure.
        message: Human-readable message suitable for direct display.
        provider: Provider kind value where the error originated (e.g., ``"anthropic"``).
        status: Upstream HTTP status when one was received.
        raw: Optional original exception for diagnostics.
    """

    kind: ErrorKind
    message: str
    provider: str = "unknown"
    status: Optional[int] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, kind, and message."""
        return f"{self.provider} {self.kind.value}: {self.message}"


__all__ = ["GatewayError"]
