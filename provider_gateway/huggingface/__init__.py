"""HuggingFace provider package."""

from .adapter import HuggingFaceAdapter

__all__ = ["HuggingFaceAdapter"]
