"""Model parts package.

One-class-per-file DTO implementations re-exported by
``provider_gateway.base.models``.
"""

from .provider_kind import ProviderKind
from .message import HistoryMessage
from .chat_request import ChatRequest
from .chat_result import ChatResult, Failure, Success
from .wire_request import RawResponse, WireRequest

__all__ = [
    "ProviderKind",
    "HistoryMessage",
    "ChatRequest",
    "ChatResult",
    "Failure",
    "Success",
    "RawResponse",
    "WireRequest",
]
