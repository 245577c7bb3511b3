"""HuggingFace adapter.

HuggingFace retired the per-model serverless inference URLs
(``https://api-inference.huggingface.co/models/<id>``) in favour of the
OpenAI-compatible router. Users still paste the old form, so it is rewritten:

    api-inference.huggingface.co/models/meta-llama/Llama-3.1-8B-Instruct
        -> {hf_router_url}/chat/completions, model="meta-llama/Llama-3.1-8B-Instruct"

Router, dedicated Inference Endpoint (``*.endpoints.huggingface.cloud``) and
Space (``*.hf.space``) URLs are called as OpenAI-compatible bases. Replies are
read from the chat shape first and then from the classic task-pipeline
shapes (``generated_text``, ``answer``, ``translation_text``, ``label``), which
some custom endpoints still return.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple
from urllib.parse import urlsplit

from ..base.adapter_base import BaseAdapter, bearer_headers
from ..base.models import ChatRequest, ProviderKind, WireRequest
from ..base.utils.shapes import as_text
from ..base.utils.urls import join_endpoint
from ..config import GatewayConfig
from ..config.defaults import HF_LEGACY_INFERENCE_HOST
from ..openai.adapter import CHAT_COMPLETIONS_PATH, build_chat_completions_body, match_message_content

PIPELINE_TEXT_KEYS: Tuple[str, ...] = ("generated_text", "answer", "translation_text", "label")

_HUB_HOSTS = ("huggingface.co", "www.huggingface.co")
_MODELS_SEGMENT = "/models/"


def _pipeline_text(obj: Any) -> Optional[str]:
    if not isinstance(obj, dict):
        return None
    for key in PIPELINE_TEXT_KEYS:
        if key in obj:
            text = as_text(obj[key])
            if text is not None:
                return text
    return None


def match_pipeline_list(data: Any) -> Optional[str]:
    """``[{"generated_text": ...}]`` and friends: first element that has a known key."""
    if not isinstance(data, list):
        return None
    for item in data:
        text = _pipeline_text(item)
        if text is not None:
            return text
    return None


def match_pipeline_object(data: Any) -> Optional[str]:
    return _pipeline_text(data)


def legacy_model_id(endpoint_url: str) -> Optional[str]:
    """Return the model id of a legacy inference URL, else ``None``.

    The id is everything after ``/models/`` so namespaced ids keep their
    organisation prefix.

    >>> legacy_model_id("https://api-inference.huggingface.co/models/gpt2")
    'gpt2'
    """
    parts = urlsplit(endpoint_url.strip())
    if (parts.hostname or "").lower() != HF_LEGACY_INFERENCE_HOST:
        return None
    path = parts.path
    idx = path.find(_MODELS_SEGMENT)
    if idx < 0:
        return None
    model_id = path[idx + len(_MODELS_SEGMENT):].strip("/")
    return model_id or None


def resolve_target(endpoint_url: str, model: str, config: GatewayConfig) -> Tuple[str, str]:
    """Return ``(url, model)`` to call for a HuggingFace endpoint."""
    router = join_endpoint(config.hf_router_url, CHAT_COMPLETIONS_PATH)
    legacy = legacy_model_id(endpoint_url)
    if legacy is not None:
        return router, legacy
    host = (urlsplit(endpoint_url.strip()).hostname or "").lower()
    if host in _HUB_HOSTS:
        return router, model
    return join_endpoint(endpoint_url, CHAT_COMPLETIONS_PATH), model


class HuggingFaceAdapter(BaseAdapter):
    """Adapter for the HuggingFace router and dedicated endpoints."""

    kind = ProviderKind.HUGGINGFACE
    matchers = (match_message_content, match_pipeline_list, match_pipeline_object)

    def build_request(self, request: ChatRequest, config: GatewayConfig) -> WireRequest:
        url, model = resolve_target(request.endpoint_url, request.model, config)
        return WireRequest(
            url=url,
            headers=bearer_headers(request.api_key),
            body=build_chat_completions_body(request, config, model=model),
        )


__all__ = [
    "HuggingFaceAdapter",
    "PIPELINE_TEXT_KEYS",
    "legacy_model_id",
    "match_pipeline_list",
    "match_pipeline_object",
    "resolve_target",
]
