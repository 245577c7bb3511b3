from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from provider_gateway.base.gateway import Gateway
from provider_gateway.config import GatewayConfig
from provider_gateway.service.app import app
from provider_gateway.service.app_parts.app_core import get_gateway_dep
from provider_gateway.tests.utils import reply

CORS_ORIGIN = "Access-Control-Allow-Origin"


@pytest.fixture()
def client_with():
    """Return a factory building a TestClient whose gateway uses a fake upstream."""

    def _make(transport):
        app.dependency_overrides[get_gateway_dep] = lambda: Gateway(config=GatewayConfig(), transport=transport)
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


def test_health_ok():
    r = TestClient(app).get("/api/health")
    assert r.status_code == 200  # nosec B101 test assertion
    assert r.json() == {"ok": True}  # nosec B101 test assertion
    assert r.headers[CORS_ORIGIN] == "*"  # nosec B101 test assertion


def test_options_preflight_is_empty_200():
    r = TestClient(app).options("/api/chat")
    assert r.status_code == 200  # nosec B101 test assertion
    assert r.content == b""  # nosec B101 test assertion
    assert r.headers[CORS_ORIGIN] == "*"  # nosec B101 test assertion
    assert "x-client-info" in r.headers["Access-Control-Allow-Headers"]  # nosec B101 test assertion


def test_chat_success(client_with):
    transport = reply(200, {"choices": [{"message": {"content": "pong"}}]})
    r = client_with(transport).post(
        "/api/chat",
        json={"apiKey": "sk", "endpointUrl": "https://api.openai.com/v1", "model": "gpt-4o", "userMessage": "ping"},
    )
    assert r.status_code == 200  # nosec B101 test assertion
    assert r.json() == {"response": "pong"}  # nosec B101 test assertion
    assert r.headers[CORS_ORIGIN] == "*"  # nosec B101 test assertion


def test_legacy_route_and_field_names(client_with):
    transport = reply(200, {"content": [{"type": "text", "text": "legacy ok"}]})
    r = client_with(transport).post(
        "/jailbreak-test",
        json={"apiKey": "k", "apiEndpoint": "https://api.anthropic.com/v1", "model": "claude", "jailbreakPrompt": "s",
              "conversationHistory": [], "userMessage": "hi"},
    )
    assert r.json() == {"response": "legacy ok"}  # nosec B101 test assertion
    assert transport.last_json()["system"] == "s"  # nosec B101 test assertion


def test_missing_fields_is_400(client_with):
    transport = reply(200, {})
    r = client_with(transport).post("/api/chat", json={"userMessage": "hi"})
    assert r.status_code == 400  # nosec B101 test assertion
    assert r.json() == {"error": "Missing required fields: endpointUrl or model"}  # nosec B101 test assertion
    assert transport.requests == []  # nosec B101 test assertion


def test_invalid_json_is_400():
    r = TestClient(app).post("/api/chat", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400  # nosec B101 test assertion
    assert "error" in r.json()  # nosec B101 test assertion
    assert r.headers[CORS_ORIGIN] == "*"  # nosec B101 test assertion


def test_missing_credential_is_400(client_with):
    r = client_with(reply(200, {})).post(
        "/api/chat", json={"endpointUrl": "https://api.cohere.ai/v1", "model": "command-r", "userMessage": "hi"}
    )
    assert r.status_code == 400  # nosec B101 test assertion
    assert "API key" in r.json()["error"]  # nosec B101 test assertion


def test_upstream_failure_is_500(client_with):
    r = client_with(reply(429, {"message": "slow down"})).post(
        "/api/chat", json={"apiKey": "k", "endpointUrl": "https://api.cohere.ai/v1", "model": "command-r"}
    )
    assert r.status_code == 500  # nosec B101 test assertion
    assert r.json() == {"error": "slow down"}  # nosec B101 test assertion


def test_non_ascii_key_is_400_with_cors(client_with):
    transport = reply(200, {"choices": [{"message": {"content": "never"}}]})
    r = client_with(transport).post(
        "/api/chat",
        json={"apiKey": "sk-…abc", "endpointUrl": "https://api.openai.com/v1", "model": "gpt-4o", "userMessage": "hi"},
    )
    assert r.status_code == 400  # nosec B101 test assertion
    assert "HTTP header" in r.json()["error"]  # nosec B101 test assertion
    assert r.headers[CORS_ORIGIN] == "*"  # nosec B101 test assertion
    assert transport.requests == []  # nosec B101 test assertion


def test_unhandled_error_is_500_json_with_cors():
    def _broken_gateway():
        raise RuntimeError("gateway construction failed")

    app.dependency_overrides[get_gateway_dep] = _broken_gateway
    try:
        r = TestClient(app, raise_server_exceptions=False).post(
            "/api/chat", json={"endpointUrl": "https://api.openai.com/v1", "model": "gpt-4o", "apiKey": "k"}
        )
    finally:
        app.dependency_overrides.clear()
    assert r.status_code == 500  # nosec B101 test assertion
    assert r.json() == {"error": "Internal server error"}  # nosec B101 test assertion
    assert r.headers[CORS_ORIGIN] == "*"  # nosec B101 test assertion


def test_providers_and_classify():
    client = TestClient(app)
    providers = client.get("/api/providers").json()
    ids = [p["id"] for p in providers["providers"]]
    assert ids == ["openai_compatible", "anthropic", "google", "cohere", "huggingface"]  # nosec B101 test assertion
    assert any(p["endpointUrl"] == "http://localhost:11434/v1" for p in providers["presets"])  # nosec B101 test assertion

    local = client.get("/api/classify", params={"endpointUrl": "http://localhost:11434/v1"}).json()
    assert local == {"provider": "openai_compatible", "requiresCredential": False}  # nosec B101 test assertion
    hf = client.get("/api/classify", params={"endpointUrl": "https://router.huggingface.co/v1"}).json()
    assert hf == {"provider": "huggingface", "requiresCredential": True}  # nosec B101 test assertion
