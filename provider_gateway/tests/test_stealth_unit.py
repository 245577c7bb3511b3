from __future__ import annotations

import base64

from provider_gateway.base.models import ChatRequest
from provider_gateway.base.utils.stealth import apply_stealth, encode_message
from provider_gateway.config.defaults import STEALTH_SYSTEM_PREFIX


def _request(**kwargs) -> ChatRequest:
    base = dict(endpoint_url="https://api.openai.com/v1", model="gpt-4o", api_key="sk", system_prompt="Be brief.")
    base.update(kwargs)
    return ChatRequest(**base)


def test_encode_message_is_utf8_base64():
    assert encode_message("hello") == "aGVsbG8="  # nosec B101
    assert base64.b64decode(encode_message("héllo ✓")).decode("utf-8") == "héllo ✓"  # nosec B101
    assert encode_message("") == ""  # nosec B101


def test_stealth_off_is_identity():
    req = _request(user_message="hello", stealth_mode=False)
    assert apply_stealth(req) is req  # nosec B101


def test_stealth_encodes_message_and_prefixes_system_prompt():
    out = apply_stealth(_request(user_message="hello", stealth_mode=True))
    assert out.user_message == "aGVsbG8="  # nosec B101
    assert out.system_prompt == STEALTH_SYSTEM_PREFIX + "Be brief."  # nosec B101
    assert "Base64" in out.system_prompt  # nosec B101
    assert out.stealth_applied is True  # nosec B101


def test_stealth_applied_twice_encodes_once():
    once = apply_stealth(_request(user_message="hello", stealth_mode=True))
    twice = apply_stealth(once)
    assert twice is once  # nosec B101
    assert twice.user_message == "aGVsbG8="  # nosec B101


def test_stealth_leaves_history_plain():
    req = _request(user_message="hi", stealth_mode=True, history=[{"role": "user", "content": "earlier"}])
    out = apply_stealth(req)
    assert out.history[0].content == "earlier"  # nosec B101


def test_custom_prefix():
    out = apply_stealth(_request(user_message="x", stealth_mode=True), prefix="DECODE: ")
    assert out.system_prompt == "DECODE: Be brief."  # nosec B101
