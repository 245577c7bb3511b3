"""Adapter factory: ProviderKind -> provider adapter.

Purpose
-------
Resolve the single adapter responsible for a :class:`ProviderKind`. Adapters
are imported lazily with ``importlib`` so that importing the base layer does
not pull in every provider package.

Scope
-----
The mapping is closed: one entry per ``ProviderKind`` member. Adding a
provider means adding one enum member, one adapter module and one entry here.
"""

from __future__ import annotations

from importlib import import_module
from typing import Dict, Tuple

from .interfaces import ProviderAdapter
from .models import ProviderKind


class UnknownProviderError(Exception):
    """Raised when no adapter can be resolved for a provider kind.

    Failure modes include a kind missing from the mapping, an adapter module
    that fails to import, or a missing adapter class. All of them are
    programming errors, never upstream conditions.
    """


class AdapterFactory:
    """Create provider adapters for a :class:`ProviderKind`."""

    _ADAPTERS: Dict[ProviderKind, Tuple[str, str]] = {
        ProviderKind.OPENAI_COMPATIBLE: ("provider_gateway.openai.adapter", "OpenAICompatibleAdapter"),
        ProviderKind.ANTHROPIC: ("provider_gateway.anthropic.adapter", "AnthropicAdapter"),
        ProviderKind.GOOGLE: ("provider_gateway.gemini.adapter", "GoogleAdapter"),
        ProviderKind.COHERE: ("provider_gateway.cohere.adapter", "CohereAdapter"),
        ProviderKind.HUGGINGFACE: ("provider_gateway.huggingface.adapter", "HuggingFaceAdapter"),
    }

    @classmethod
    def create(cls, kind: ProviderKind) -> ProviderAdapter:
        """Return a new adapter instance for ``kind``.

        Raises
        ------
        UnknownProviderError
            If the kind is unmapped, the module fails to import, or the
            adapter class is missing.
        """
        spec = cls._ADAPTERS.get(kind)
        if spec is None:
            raise UnknownProviderError(f"No adapter registered for provider kind '{kind}'")
        module_path, class_name = spec
        try:
            mod = import_module(module_path)
        except ImportError as exc:
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider kind '{kind.value}': {exc}"
            ) from exc
        try:
            klass = getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(
                f"Adapter class '{class_name}' not found in '{module_path}'"
            ) from exc
        return klass()

    @classmethod
    def supported(cls) -> Tuple[ProviderKind, ...]:
        """Return the supported provider kinds in declaration order."""
        return tuple(cls._ADAPTERS.keys())


__all__ = ["AdapterFactory", "UnknownProviderError"]
