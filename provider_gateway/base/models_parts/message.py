"""
History message DTO used by the gateway.

Defines the `HistoryMessage` dataclass. Prior turns are
plain text; each provider adapter maps the role vocabulary to its own.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class HistoryMessage:
    """A prior conversation turn.

    Attributes:
        role: ``"user"`` or ``"assistant"``. Other values are kept verbatim;
            adapters with a closed role vocabulary collapse them to the user side.
        content: Plain text of the turn.
    """

    role: str
    content: str

    @property
    def is_assistant(self) -> bool:
        return self.role == "assistant"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "HistoryMessage":
        """Build a message from a ``{"role", "content"}`` mapping."""
        role = str(data.get("role") or "user").strip().lower()
        content = data.get("content")
        return cls(role=role, content="" if content is None else str(content))

    def to_dict(self) -> dict:
        return {"role": self.role, "content": self.content}


__all__ = [
    "HistoryMessage",
]
