"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``provider_gateway.base.models_parts`` to keep a single stable import path.
"""

from .models_parts.provider_kind import ProviderKind
from .models_parts.message import HistoryMessage
from .models_parts.chat_request import ChatRequest
from .models_parts.chat_result import ChatResult, Failure, Success
from .models_parts.wire_request import RawResponse, WireRequest

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
