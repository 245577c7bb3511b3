"""URL helpers shared by provider adapters."""
from __future__ import annotations


def join_endpoint(endpoint: str, suffix: str) -> str:
    """Append ``suffix`` to ``endpoint`` with exactly one slash between them.

    The suffix is not appended again when the endpoint already ends with it,
    so users may paste either a base URL or the full resource URL.

    >>> join_endpoint("https://api.openai.com/v1/", "chat/completions")
    'https://api.openai.com/v1/chat/completions'
    """
    base = endpoint.strip().rstrip("/")
    tail = suffix.strip("/")
    if base.endswith("/" + tail):
        return base
    return f"{base}/{tail}"


__all__ = ["join_endpoint"]
