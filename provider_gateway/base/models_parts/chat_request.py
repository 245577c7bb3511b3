"""
ChatRequest DTO for provider-agnostic gateway invocations.

The request carries the endpoint, model, credential, system instruction,
prior turns and the new user message. Adapters map it to wire-specific
requests; nothing here knows about any one provider.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from .message import HistoryMessage

HistoryItem = Union[HistoryMessage, Mapping[str, Any]]


def _coerce_history(items: Optional[Iterable[HistoryItem]]) -> Tuple[HistoryMessage, ...]:
    out = []
    for item in items or ():
        if isinstance(item, HistoryMessage):
            out.append(item)
        elif isinstance(item, Mapping):
            out.append(HistoryMessage.from_mapping(item))
        else:
            raise ValueError(f"history items must be messages or mappings, got {type(item).__name__}")
    return tuple(out)


@dataclass(frozen=True)
class ChatRequest:
    """Normalized request accepted by the gateway.

    Attributes:
        endpoint_url: Provider base URL (or full endpoint); selects the wire protocol.
        model: Target model identifier.
        api_key: Optional credential. Empty strings are normalized to ``None``
            so that adapters omit auth headers entirely.
        system_prompt: System instruction injected ahead of the conversation.
        history: Prior turns, oldest first.
        user_message: The new user turn.
        stealth_mode: When True the stealth preprocessor Base64-encodes the
            user message before dispatch.
        stealth_applied: Set by the stealth preprocessor once the transform
            has run, so that a second application is a no-op.

    Raises:
        ValueError: When ``endpoint_url`` or ``model`` is empty.
    """

    endpoint_url: str
    model: str
    api_key: Optional[str] = field(default=None, repr=False)
    system_prompt: str = ""
    history: Tuple[HistoryMessage, ...] = ()
    user_message: str = ""
    stealth_mode: bool = False
    stealth_applied: bool = False

    def __post_init__(self) -> None:
        endpoint = (self.endpoint_url or "").strip()
        model = (self.model or "").strip()
        if not endpoint:
            raise ValueError("endpoint_url is required")
        if not model:
            raise ValueError("model is required")
        key = self.api_key.strip() if isinstance(self.api_key, str) else None
        object.__setattr__(self, "endpoint_url", endpoint)
        object.__setattr__(self, "model", model)
        object.__setattr__(self, "api_key", key or None)
        object.__setattr__(self, "system_prompt", self.system_prompt or "")
        object.__setattr__(self, "user_message", self.user_message or "")
        object.__setattr__(self, "history", _coerce_history(self.history))

    @property
    def has_credential(self) -> bool:
        return self.api_key is not None

    def to_dict(self) -> dict:
        """Return a JSON-serializable view with the credential masked."""
        return {
            "endpoint_url": self.endpoint_url,
            "model": self.model,
            "api_key": "***" if self.api_key else None,
            "system_prompt": self.system_prompt,
            "history": [m.to_dict() for m in self.history],
            "user_message": self.user_message,
            "stealth_mode": self.stealth_mode,
        }


__all__ = [
    "ChatRequest",
]
