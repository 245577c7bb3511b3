"""
Pydantic DTO for the inbound chat payload of the HTTP service.

Purpose
-------
Validate the JSON body of ``POST /api/chat`` before it becomes a
:class:`ChatRequest`. Field names follow the camelCase wire contract; the
legacy names sent by older clients (``apiEndpoint``, ``jailbreakPrompt``,
``conversationHistory``) are accepted as aliases.

Fallback semantics
------------------
``endpointUrl`` and ``model`` are optional at the DTO level so that the
handler can answer with the contract's ``Missing required fields`` message
instead of a generic validation error. Unknown fields are ignored.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ..models import ChatRequest


class HistoryItemDTO(BaseModel):
    """One prior turn. Unknown roles are kept and treated as ``user`` downstream."""

    model_config = ConfigDict(extra="ignore")

    role: Optional[str] = "user"
    content: Optional[str] = ""


class ChatBodyDTO(BaseModel):
    """Inbound chat body.

    Parameters:
        api_key: Provider credential; optional for loopback servers.
        endpoint_url: Provider base URL (alias ``apiEndpoint``).
        model: Model identifier.
        system_prompt: System instruction (alias ``jailbreakPrompt``).
        history: Prior turns (alias ``conversationHistory``).
        user_message: The new user turn.
        stealth_mode: Base64-encode the user turn before sending.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    api_key: Optional[str] = Field(default=None, validation_alias=AliasChoices("apiKey", "api_key"))
    endpoint_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("endpointUrl", "apiEndpoint", "endpoint_url")
    )
    model: Optional[str] = None
    system_prompt: str = Field(
        default="", validation_alias=AliasChoices("systemPrompt", "jailbreakPrompt", "system_prompt")
    )
    history: List[HistoryItemDTO] = Field(
        default_factory=list, validation_alias=AliasChoices("history", "conversationHistory")
    )
    user_message: str = Field(default="", validation_alias=AliasChoices("userMessage", "user_message"))
    stealth_mode: bool = Field(default=False, validation_alias=AliasChoices("stealthMode", "stealth_mode"))

    def missing_fields(self) -> List[str]:
        """Return the names of required fields that are absent or blank."""
        missing = []
        if not (self.endpoint_url or "").strip():
            missing.append("endpointUrl")
        if not (self.model or "").strip():
            missing.append("model")
        return missing

    def to_request(self) -> ChatRequest:
        """Convert to a :class:`ChatRequest`.

        Raises:
            ValueError: When ``endpointUrl`` or ``model`` is missing.
        """
        return ChatRequest(
            endpoint_url=self.endpoint_url or "",
            model=self.model or "",
            api_key=self.api_key,
            system_prompt=self.system_prompt,
            history=[{"role": h.role or "user", "content": h.content or ""} for h in self.history],
            user_message=self.user_message,
            stealth_mode=self.stealth_mode,
        )


__all__ = ["ChatBodyDTO", "HistoryItemDTO"]
