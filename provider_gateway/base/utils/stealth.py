"""Stealth preprocessor.

When a request has ``stealth_mode`` set, the outgoing user message is
Base64-encoded (UTF-8, standard alphabet) and the system prompt gains an
instruction telling the model to decode its input and answer normally. The
transform is pure: no I/O, never raises. A transformed request is marked so
that running the preprocessor again leaves it untouched.
"""
from __future__ import annotations

import base64
from dataclasses import replace
from typing import Optional

from ..models import ChatRequest
from ...config.defaults import STEALTH_SYSTEM_PREFIX


def encode_message(text: str) -> str:
    """Return the Base64 encoding of ``text``'s UTF-8 bytes."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def apply_stealth(request: ChatRequest, *, prefix: Optional[str] = None) -> ChatRequest:
    """Return the request as it should be sent upstream.

    Parameters:
        request: Normalized request.
        prefix: Decode instruction prepended to the system prompt; defaults to
            :data:`STEALTH_SYSTEM_PREFIX`.

    Returns:
        ``request`` itself when stealth mode is off or the transform already
        ran; otherwise a copy with the encoded message and prefixed prompt.
    """
    if not request.stealth_mode or request.stealth_applied:
        return request
    instruction = STEALTH_SYSTEM_PREFIX if prefix is None else prefix
    return replace(
        request,
        user_message=encode_message(request.user_message),
        system_prompt=f"{instruction}{request.system_prompt}",
        stealth_applied=True,
    )


__all__ = ["apply_stealth", "encode_message"]
