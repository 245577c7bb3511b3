"""OpenAI-compatible provider package."""

from .adapter import OpenAICompatibleAdapter

__all__ = ["OpenAICompatibleAdapter"]
