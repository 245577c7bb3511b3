"""Golden tests for the OpenAI-compatible adapter (request shape and extraction)."""
from __future__ import annotations

import json

from provider_gateway.base.errors import ErrorKind
from provider_gateway.base.models import ChatRequest, RawResponse
from provider_gateway.config import GatewayConfig
from provider_gateway.openai.adapter import OpenAICompatibleAdapter, supports_temperature

CFG = GatewayConfig()


def _request(**kwargs) -> ChatRequest:
    base = dict(endpoint_url="https://api.openai.com/v1/", model="gpt-4o", api_key="sk-test",
                system_prompt="sys", user_message="now")
    base.update(kwargs)
    return ChatRequest(**base)


def _extract(payload) -> object:
    return OpenAICompatibleAdapter().extract(RawResponse(200, json.dumps(payload)), CFG)


def test_build_request_golden():
    wire = OpenAICompatibleAdapter().build_request(
        _request(history=[{"role": "user", "content": "a"}, {"role": "assistant", "content": "b"}]), CFG
    )
    assert wire.url == "https://api.openai.com/v1/chat/completions"  # nosec B101
    assert wire.headers == {"Content-Type": "application/json", "Authorization": "Bearer sk-test"}  # nosec B101
    assert wire.body == {  # nosec B101
        "model": "gpt-4o",
        "messages": [
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "a"},
            {"role": "assistant", "content": "b"},
            {"role": "user", "content": "now"},
        ],
        "max_tokens": 4096,
        "temperature": 0.7,
    }


def test_full_endpoint_is_not_doubled():
    wire = OpenAICompatibleAdapter().build_request(_request(endpoint_url="https://x.example/v1/chat/completions"), CFG)
    assert wire.url == "https://x.example/v1/chat/completions"  # nosec B101


def test_o1_models_omit_temperature():
    wire = OpenAICompatibleAdapter().build_request(_request(model="o1-mini"), CFG)
    assert "temperature" not in wire.body  # nosec B101
    assert not supports_temperature("o1-preview")  # nosec B101
    assert supports_temperature("gpt-4o")  # nosec B101


def test_no_key_means_no_authorization_header():
    wire = OpenAICompatibleAdapter().build_request(_request(endpoint_url="http://localhost:11434/v1", api_key=None), CFG)
    assert "Authorization" not in wire.headers  # nosec B101


def test_config_values_flow_into_body():
    wire = OpenAICompatibleAdapter().build_request(_request(), GatewayConfig(max_tokens=10, temperature=0.0))
    assert wire.body["max_tokens"] == 10 and wire.body["temperature"] == 0.0  # nosec B101


def test_extract_message_content_string_and_parts():
    assert _extract({"choices": [{"message": {"content": "plain"}}]}).text == "plain"  # nosec B101
    parts = {"choices": [{"message": {"content": [{"type": "text", "text": "a"}, {"type": "text", "text": "b"}]}}]}
    assert _extract(parts).text == "ab"  # nosec B101


def test_extract_legacy_choice_text():
    assert _extract({"choices": [{"text": "legacy"}]}).text == "legacy"  # nosec B101


def test_extract_null_content_is_no_response():
    assert _extract({"choices": [{"message": {"content": None, "tool_calls": []}}]}).text == "No response"  # nosec B101


def test_extract_whitespace_content_is_kept():
    assert _extract({"choices": [{"message": {"content": "  \n"}}]}).text == "  \n"  # nosec B101


def test_extract_malformed():
    result = OpenAICompatibleAdapter().extract(RawResponse(200, "not json"), CFG)
    assert result.kind is ErrorKind.MALFORMED_UPSTREAM_RESPONSE  # nosec B101
