"""Cohere provider package."""

from .adapter import CohereAdapter

__all__ = ["CohereAdapter"]
