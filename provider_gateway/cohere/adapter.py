"""Cohere chat adapter.

Cohere's v1 chat API has its own vocabulary: the system prompt is the
``preamble``, the new turn is a bare ``message`` string, and prior turns live
in ``chat_history`` with upper-case roles (``USER``/``CHATBOT``) and a
``message`` field instead of ``content``.

Replies are read from top-level ``text`` (v1) and, for endpoints already on
v2, from ``message.content[].text``.
"""

from __future__ import annotations

from typing import Any, Dict

from ..base.adapter_base import BaseAdapter, bearer_headers
from ..base.models import ChatRequest, ProviderKind, WireRequest
from ..base.utils.messages import collapse_role, map_history
from ..base.utils.shapes import field_matcher
from ..base.utils.urls import join_endpoint
from ..config import GatewayConfig

CHAT_PATH = "chat"

match_text = field_matcher("text")
match_message_content = field_matcher("message", "content")


class CohereAdapter(BaseAdapter):
    """Adapter for ``POST {endpoint}/chat``."""

    kind = ProviderKind.COHERE
    matchers = (match_text, match_message_content)

    def build_request(self, request: ChatRequest, config: GatewayConfig) -> WireRequest:
        body: Dict[str, Any] = {
            "model": request.model,
            "message": request.user_message,
            "preamble": request.system_prompt,
            "chat_history": map_history(
                request.history,
                lambda m: {"role": collapse_role(m, assistant="CHATBOT", user="USER"), "message": m.content},
            ),
        }
        return WireRequest(
            url=join_endpoint(request.endpoint_url, CHAT_PATH),
            headers=bearer_headers(request.api_key),
            body=body,
        )


__all__ = ["CohereAdapter", "match_message_content", "match_text"]
