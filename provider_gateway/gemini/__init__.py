"""Google Gemini provider package."""

from .adapter import GoogleAdapter

__all__ = ["GoogleAdapter"]
