from __future__ import annotations

import pytest

from provider_gateway.base.models import ProviderKind
from provider_gateway.base.routing import classify, is_loopback, requires_credential


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://api.anthropic.com/v1", ProviderKind.ANTHROPIC),
        ("https://generativelanguage.googleapis.com/v1beta", ProviderKind.GOOGLE),
        ("https://proxy.example/v1/models/gemini-pro:generateContent", ProviderKind.GOOGLE),
        ("https://api.cohere.ai/v1", ProviderKind.COHERE),
        ("https://api-inference.huggingface.co/models/gpt2", ProviderKind.HUGGINGFACE),
        ("https://router.huggingface.co/v1", ProviderKind.HUGGINGFACE),
        ("https://abc123.us-east-1.aws.endpoints.huggingface.cloud/v1/", ProviderKind.HUGGINGFACE),
        ("https://someone-demo.hf.space/v1", ProviderKind.HUGGINGFACE),
        ("https://api.openai.com/v1", ProviderKind.OPENAI_COMPATIBLE),
        ("http://localhost:11434/v1", ProviderKind.OPENAI_COMPATIBLE),
        ("https://openrouter.ai/api/v1", ProviderKind.OPENAI_COMPATIBLE),
    ],
)
def test_classify_known_hosts(url, expected):
    assert classify(url) is expected  # nosec B101


def test_classify_is_case_insensitive():
    assert classify("HTTPS://API.ANTHROPIC.COM/V1") is ProviderKind.ANTHROPIC  # nosec B101
    assert classify("https://x.example/models/m:GENERATECONTENT") is ProviderKind.GOOGLE  # nosec B101


def test_classify_is_total():
    for url in ("", "not a url", "ftp://weird", "   "):
        assert classify(url) is ProviderKind.OPENAI_COMPATIBLE  # nosec B101


def test_huggingface_chat_completions_path_keeps_huggingface_adapter():
    url = "https://abc.endpoints.huggingface.cloud/v1/chat/completions"
    assert classify(url) is ProviderKind.HUGGINGFACE  # nosec B101


def test_anthropic_wins_over_later_rules():
    assert classify("https://anthropic.hf.space/v1") is ProviderKind.ANTHROPIC  # nosec B101


@pytest.mark.parametrize(
    "url",
    [
        "http://localhost:11434/v1",
        "http://127.0.0.1:1234/v1",
        "http://[::1]:8000/v1",
        "http://0.0.0.0:8080",
        "http://host.docker.internal:11434/v1",
        "http://ollama.localhost/v1",
    ],
)
def test_is_loopback_true(url):
    assert is_loopback(url)  # nosec B101


@pytest.mark.parametrize("url", ["https://api.openai.com/v1", "http://10.0.0.5:8000", "", "localhost"])
def test_is_loopback_false(url):
    assert not is_loopback(url)  # nosec B101


def test_requires_credential_policy():
    local = "http://localhost:11434/v1"
    assert requires_credential(ProviderKind.OPENAI_COMPATIBLE, local) is False  # nosec B101
    assert requires_credential(ProviderKind.OPENAI_COMPATIBLE, "https://api.openai.com/v1") is True  # nosec B101
    # Only the OpenAI-compatible dialect is exempt on loopback.
    assert requires_credential(ProviderKind.HUGGINGFACE, "http://localhost:8080") is True  # nosec B101
