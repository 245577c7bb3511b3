"""
Gateway Base Package

Exports the provider-agnostic contracts, models, error taxonomy and adapter
factory used by the provider packages and the service layer.

- Interfaces: the ``ProviderAdapter`` protocol every provider implements
- Models: normalized request/result and wire-level containers
- Errors: ``ErrorKind`` taxonomy and the internal ``GatewayError``
- Factory: lazy creation of provider adapters by ``ProviderKind``
"""

from .errors import ErrorKind, GatewayError, classify_exception, classify_failure
from .factory import AdapterFactory, UnknownProviderError
from .interfaces import ProviderAdapter
from .models import (
    ChatRequest,
    ChatResult,
    Failure,
    HistoryMessage,
    ProviderKind,
    RawResponse,
    Success,
    WireRequest,
)

__all__ = [
    # Models
    "ChatRequest",
    "ChatResult",
    "Failure",
    "HistoryMessage",
    "ProviderKind",
    "RawResponse",
    "Success",
    "WireRequest",
    # Errors
    "ErrorKind",
    "GatewayError",
    "classify_exception",
    "classify_failure",
    # Interfaces / Factory
    "ProviderAdapter",
    "AdapterFactory",
    "UnknownProviderError",
]
