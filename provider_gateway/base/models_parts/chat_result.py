"""
ChatResult tagged union returned by the gateway.

Exactly one of `Success` or `Failure` is produced per call. Both variants
serialize to the HTTP service payloads (``{"response": ...}`` and
``{"error": ...}``).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Union

from ..errors_parts.error_kind import ErrorKind
from ..errors_parts.gateway_error import GatewayError


@dataclass(frozen=True)
class Success:
    """Normalized reply text from the upstream model."""

    text: str
    ok: ClassVar[bool] = True

    def to_payload(self) -> Dict[str, Any]:
        return {"response": self.text}


@dataclass(frozen=True)
class Failure:
    """Classified failure with a message suitable for direct display.

    Attributes:
        kind: Normalized :class:`ErrorKind`.
        message: Single coherent message string; never a raw provider JSON
            blob or stack trace.
    """

    kind: ErrorKind
    message: str
    ok: ClassVar[bool] = False

    @classmethod
    def from_error(cls, error: GatewayError) -> "Failure":
        return cls(kind=error.kind, message=error.message)

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message}


ChatResult = Union[Success, Failure]


__all__ = [
    "ChatResult",
    "Failure",
    "Success",
]
