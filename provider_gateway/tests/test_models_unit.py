from __future__ import annotations

import pytest

from provider_gateway.base.errors import ErrorKind, GatewayError
from provider_gateway.base.models import ChatRequest, Failure, HistoryMessage, ProviderKind, Success, WireRequest


def test_chat_request_normalizes_inputs():
    req = ChatRequest(
        endpoint_url="  https://api.openai.com/v1  ",
        model=" gpt-4o ",
        api_key="   ",
        history=[{"role": "Assistant", "content": "x"}, HistoryMessage("user", "y")],
    )
    assert req.endpoint_url == "https://api.openai.com/v1"  # nosec B101
    assert req.model == "gpt-4o"  # nosec B101
    assert req.api_key is None and not req.has_credential  # nosec B101
    assert req.history[0].is_assistant  # nosec B101
    assert isinstance(req.history, tuple)  # nosec B101


@pytest.mark.parametrize("endpoint, model", [("", "m"), ("https://x", ""), ("  ", "m")])
def test_chat_request_requires_endpoint_and_model(endpoint, model):
    with pytest.raises(ValueError):
        ChatRequest(endpoint_url=endpoint, model=model)


def test_chat_request_hides_key():
    req = ChatRequest(endpoint_url="https://x", model="m", api_key="sk-secret")
    assert "sk-secret" not in repr(req)  # nosec B101
    assert "sk-secret" not in str(req.to_dict())  # nosec B101


def test_result_payloads():
    assert Success("hi").to_payload() == {"response": "hi"}  # nosec B101
    failure = Failure.from_error(GatewayError(kind=ErrorKind.NETWORK_ERROR, message="down"))
    assert failure.to_payload() == {"error": "down"}  # nosec B101
    assert not failure.ok and Success("x").ok  # nosec B101


def test_provider_kind_labels():
    assert ProviderKind.OPENAI_COMPATIBLE.label == "OpenAI-compatible"  # nosec B101
    assert ProviderKind.HUGGINGFACE.label == "HuggingFace"  # nosec B101


def test_wire_request_redacted():
    wire = WireRequest(url="https://g.example/x?key=abc", headers={"x-api-key": "abc"}, body={})
    view = wire.redacted()
    assert "abc" not in str(view)  # nosec B101
