"""Provider classifier: endpoint URL -> wire protocol.

Matching is a case-insensitive substring test against known provider hosts and
path fragments, evaluated in a fixed precedence order. Host fragments for
HuggingFace are checked before the generic OpenAI-compatible fallback so that
HuggingFace deployments exposing ``/v1/chat/completions`` keep their own
adapter. The result is recomputed on every call; nothing is cached.
"""

from __future__ import annotations

import ipaddress
from typing import Tuple
from urllib.parse import urlsplit

from ..models import ProviderKind

# Ordered (kind, fragments) rules; first match wins.
PROVIDER_RULES: Tuple[Tuple[ProviderKind, Tuple[str, ...]], ...] = (
    (ProviderKind.ANTHROPIC, ("anthropic",)),
    (ProviderKind.GOOGLE, ("generativelanguage.googleapis.com", ":generatecontent")),
    (ProviderKind.COHERE, ("cohere",)),
    (ProviderKind.HUGGINGFACE, ("huggingface.co", "huggingface.cloud", ".hf.space")),
)

LOOPBACK_HOSTS = frozenset({"localhost", "0.0.0.0", "host.docker.internal"})  # nosec B104 - host names, not a bind


def classify(endpoint_url: str) -> ProviderKind:
    """Return the :class:`ProviderKind` implied by ``endpoint_url``.

    Total and deterministic: unmatched (or empty) URLs fall back to
    ``OPENAI_COMPATIBLE``, the shape most self-hosted and aggregator backends speak.
    """
    haystack = (endpoint_url or "").strip().lower()
    for kind, fragments in PROVIDER_RULES:
        if any(fragment in haystack for fragment in fragments):
            return kind
    return ProviderKind.OPENAI_COMPATIBLE


def is_loopback(endpoint_url: str) -> bool:
    """Return True when the URL points at the local machine."""
    try:
        host = urlsplit((endpoint_url or "").strip()).hostname
    except ValueError:
        return False
    if not host:
        return False
    host = host.lower()
    if host in LOOPBACK_HOSTS or host.endswith(".localhost"):
        return True
    try:
        return ipaddress.ip_address(host).is_loopback
    except ValueError:
        return False


def requires_credential(kind: ProviderKind, endpoint_url: str) -> bool:
    """Return False only for OpenAI-compatible servers on a loopback host.

    Local runtimes (Ollama, LM Studio, vLLM on localhost) accept
    unauthenticated calls; every hosted provider needs a key.
    """
    return not (kind is ProviderKind.OPENAI_COMPATIBLE and is_loopback(endpoint_url))


__all__ = ["PROVIDER_RULES", "classify", "is_loopback", "requires_credential"]
