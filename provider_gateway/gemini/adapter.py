"""Google Generative Language (Gemini) adapter.

The API key travels in the ``key`` query parameter rather than a header, so
the request URL is a credential and must only ever be logged through
``redact_url``. Users paste one of three URL forms:

    https://generativelanguage.googleapis.com/v1beta
    https://generativelanguage.googleapis.com/v1beta/models/gemini-1.5-pro
    https://generativelanguage.googleapis.com/v1beta/models/gemini-1.5-pro:generateContent

and all three resolve to the same ``...:generateContent?key=`` call.
"""

from __future__ import annotations

from typing import Any, Dict
from urllib.parse import quote

from ..base.adapter_base import JSON_HEADERS, BaseAdapter
from ..base.models import ChatRequest, ProviderKind, WireRequest
from ..base.utils.messages import collapse_role, map_history
from ..base.utils.shapes import field_matcher
from ..config import GatewayConfig

GENERATE_CONTENT = ":generateContent"

match_candidate_parts = field_matcher("candidates", 0, "content", "parts")


def build_generate_content_url(endpoint_url: str, model: str, api_key: str | None) -> str:
    """Resolve the ``generateContent`` URL for ``endpoint_url``.

    >>> build_generate_content_url("https://g.example/v1beta/", "gemini-pro", "k")
    'https://g.example/v1beta/models/gemini-pro:generateContent?key=k'
    """
    base = endpoint_url.strip().rstrip("/")
    key = quote(api_key or "", safe="")
    if GENERATE_CONTENT.lower() in base.lower():
        url = base
    elif base.endswith("/models"):
        url = f"{base}/{model}{GENERATE_CONTENT}"
    elif "/models/" in base:
        url = f"{base}{GENERATE_CONTENT}"
    else:
        url = f"{base}/models/{model}{GENERATE_CONTENT}"
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}key={key}"


class GoogleAdapter(BaseAdapter):
    """Adapter for ``models/{model}:generateContent``."""

    kind = ProviderKind.GOOGLE
    matchers = (match_candidate_parts,)

    def build_request(self, request: ChatRequest, config: GatewayConfig) -> WireRequest:
        contents = map_history(
            request.history,
            lambda m: {"role": collapse_role(m, assistant="model", user="user"), "parts": [{"text": m.content}]},
        )
        contents.append({"role": "user", "parts": [{"text": request.user_message}]})
        body: Dict[str, Any] = {
            "systemInstruction": {"parts": [{"text": request.system_prompt}]},
            "contents": contents,
            "generationConfig": {
                "maxOutputTokens": config.max_tokens,
                "temperature": config.temperature,
            },
        }
        return WireRequest(
            url=build_generate_content_url(request.endpoint_url, request.model, request.api_key),
            headers=dict(JSON_HEADERS),
            body=body,
        )


__all__ = ["GoogleAdapter", "build_generate_content_url", "match_candidate_parts"]
