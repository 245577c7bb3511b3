"""
ProviderKind enumeration.

Closed set of wire protocols the gateway can speak. The kind is derived from
the endpoint URL on every call by the provider classifier and never stored.
"""
from __future__ import annotations

from enum import Enum


class ProviderKind(str, Enum):
    """Wire protocol family implied by an endpoint URL."""

    OPENAI_COMPATIBLE = "openai_compatible"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"
    COHERE = "cohere"
    HUGGINGFACE = "huggingface"

    @property
    def label(self) -> str:
        """Human-readable provider name used in error messages."""
        return _LABELS[self]


_LABELS = {
    ProviderKind.OPENAI_COMPATIBLE: "OpenAI-compatible",
    ProviderKind.ANTHROPIC: "Anthropic",
    ProviderKind.GOOGLE: "Google",
    ProviderKind.COHERE: "Cohere",
    ProviderKind.HUGGINGFACE: "HuggingFace",
}


__all__ = ["ProviderKind"]
