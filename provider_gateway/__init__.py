"""provider_gateway package

One chat call, five LLM wire protocols.

Purpose:
    Accept a provider-independent chat request (endpoint URL, model, optional
    key, system prompt, history, new user message), work out which provider
    the endpoint belongs to, translate the request into that provider's wire
    format, send it, and return either the reply text or one classified,
    display-ready error message.

Public API (re-exported):
    - Version: ``__version__``
    - Entry points: :class:`Gateway`, :func:`chat`
    - Models: :class:`ChatRequest`, :class:`HistoryMessage`,
      :class:`Success`, :class:`Failure`, :class:`ProviderKind`
    - Errors: :class:`ErrorKind`, :class:`GatewayError`
    - Routing: :func:`classify`, :func:`requires_credential`
    - Configuration: :class:`GatewayConfig`, :func:`get_gateway_config`

Example:
    >>> from provider_gateway import ChatRequest, chat
    >>> result = chat(ChatRequest(endpoint_url="http://localhost:11434/v1",
    ...                           model="llama3", user_message="hi"))  # doctest: +SKIP
"""

from .base.errors import ErrorKind, GatewayError
from .base.gateway import Gateway, chat
from .base.models import ChatRequest, ChatResult, Failure, HistoryMessage, ProviderKind, Success
from .base.routing import classify, requires_credential
from .config import GatewayConfig, get_gateway_config

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Entry points
    "Gateway",
    "chat",
    # Models
    "ChatRequest",
    "ChatResult",
    "Failure",
    "HistoryMessage",
    "ProviderKind",
    "Success",
    # Errors
    "ErrorKind",
    "GatewayError",
    # Routing
    "classify",
    "requires_credential",
    # Configuration
    "GatewayConfig",
    "get_gateway_config",
]
