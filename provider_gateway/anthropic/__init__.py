"""Anthropic provider package."""

from .adapter import AnthropicAdapter

__all__ = ["AnthropicAdapter"]
