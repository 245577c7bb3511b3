"""Anthropic Messages API adapter.

Wire differences from the OpenAI dialect:
    - The system prompt is a dedicated top-level ``system`` field; no message
      carries ``role: "system"``.
    - History roles collapse to ``user``/``assistant``.
    - Auth uses ``x-api-key`` plus a pinned ``anthropic-version`` header.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..base.adapter_base import JSON_HEADERS, BaseAdapter
from ..base.models import ChatRequest, ProviderKind, WireRequest
from ..base.utils.messages import collapse_role, map_history
from ..base.utils.shapes import as_text, dig, field_matcher, found
from ..base.utils.urls import join_endpoint
from ..config import GatewayConfig

MESSAGES_PATH = "messages"


def match_text_blocks(data: Any) -> Optional[str]:
    """Concatenate the ``text`` blocks of ``content[]``.

    Non-text blocks (``thinking``, ``tool_use``) are skipped; a content list
    with no text blocks is recognized but empty.
    """
    content = dig(data, "content")
    if not found(content) or not isinstance(content, list):
        return None
    blocks = [b for b in content if isinstance(b, dict) and b.get("type", "text") == "text"]
    return as_text(blocks)


# Legacy text completions API.
match_completion = field_matcher("completion")


class AnthropicAdapter(BaseAdapter):
    """Adapter for ``POST {endpoint}/messages``."""

    kind = ProviderKind.ANTHROPIC
    matchers = (match_text_blocks, match_completion)

    def build_request(self, request: ChatRequest, config: GatewayConfig) -> WireRequest:
        messages = map_history(
            request.history,
            lambda m: {"role": collapse_role(m, assistant="assistant", user="user"), "content": m.content},
        )
        messages.append({"role": "user", "content": request.user_message})
        body: Dict[str, Any] = {
            "model": request.model,
            "max_tokens": config.max_tokens,
            "system": request.system_prompt,
            "messages": messages,
        }
        headers = dict(JSON_HEADERS)
        headers["x-api-key"] = request.api_key or ""
        headers["anthropic-version"] = config.anthropic_version
        return WireRequest(url=join_endpoint(request.endpoint_url, MESSAGES_PATH), headers=headers, body=body)


__all__ = ["AnthropicAdapter", "match_completion", "match_text_blocks"]
