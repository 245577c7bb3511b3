"""OpenAI-compatible adapter.

Speaks the ``/chat/completions`` dialect shared by OpenAI, Mistral, Groq,
OpenRouter, Ollama, vLLM, LM Studio and most aggregators. This is also the
fallback for endpoints the classifier does not recognize, and the body builder
is reused by the HuggingFace adapter for the router's compatible endpoint.

Auth:
    ``Authorization: Bearer <key>`` only when a key is present. Loopback
    servers are called without the header at all.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..base.adapter_base import BaseAdapter, bearer_headers
from ..base.models import ChatRequest, ProviderKind, WireRequest
from ..base.utils.messages import map_history
from ..base.utils.shapes import field_matcher
from ..base.utils.urls import join_endpoint
from ..config import GatewayConfig
from ..config.defaults import NO_TEMPERATURE_MODEL_PREFIXES

CHAT_COMPLETIONS_PATH = "chat/completions"

# choices[0].message.content may be a string or a list of text parts.
match_message_content = field_matcher("choices", 0, "message", "content")
# Legacy completions shape.
match_choice_text = field_matcher("choices", 0, "text")


def supports_temperature(model: str) -> bool:
    """Return False for reasoning-style models that reject ``temperature``."""
    return not model.startswith(NO_TEMPERATURE_MODEL_PREFIXES)


def build_chat_completions_body(
    request: ChatRequest,
    config: GatewayConfig,
    *,
    model: Optional[str] = None,
) -> Dict[str, Any]:
    """Build a ``/chat/completions`` body.

    The system prompt is sent as a synthetic first message, followed by the
    history (roles verbatim) and the new user turn.
    """
    target_model = model or request.model
    messages = [{"role": "system", "content": request.system_prompt}]
    messages += map_history(request.history, lambda m: {"role": m.role, "content": m.content})
    messages.append({"role": "user", "content": request.user_message})

    body: Dict[str, Any] = {
        "model": target_model,
        "messages": messages,
        "max_tokens": config.max_tokens,
    }
    if supports_temperature(target_model):
        body["temperature"] = config.temperature
    return body


class OpenAICompatibleAdapter(BaseAdapter):
    """Adapter for OpenAI-compatible chat completion servers."""

    kind = ProviderKind.OPENAI_COMPATIBLE
    matchers = (match_message_content, match_choice_text)

    def build_request(self, request: ChatRequest, config: GatewayConfig) -> WireRequest:
        return WireRequest(
            url=join_endpoint(request.endpoint_url, CHAT_COMPLETIONS_PATH),
            headers=bearer_headers(request.api_key),
            body=build_chat_completions_body(request, config),
        )


__all__ = [
    "OpenAICompatibleAdapter",
    "build_chat_completions_body",
    "match_choice_text",
    "match_message_content",
    "supports_temperature",
]
