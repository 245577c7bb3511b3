"""Credential redaction helpers for logs and dry-run output.

Google embeds the API key in the query string (``?key=...``) and other
providers send it in headers; both must be masked before anything is logged.
"""
from __future__ import annotations

from typing import Mapping
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

MASK = "***"

# Header and query parameter names that carry credentials (lowercase).
SENSITIVE_HEADERS = frozenset({"authorization", "x-api-key", "api-key", "x-goog-api-key"})
SENSITIVE_QUERY_PARAMS = frozenset({"key", "api_key", "apikey", "token", "access_token"})


def redact_url(url: str) -> str:
    """Return ``url`` with credential-bearing query values replaced by ``***``."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return url
    if not parts.query:
        return url
    query = [
        (k, MASK if k.lower() in SENSITIVE_QUERY_PARAMS else v)
        for k, v in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(query, safe="*")))


def redact_headers(headers: Mapping[str, str]) -> dict:
    """Return a copy of ``headers`` with auth values masked."""
    return {k: (MASK if k.lower() in SENSITIVE_HEADERS else v) for k, v in headers.items()}


def endpoint_host(url: str) -> str:
    """Return the host (and port) portion of a URL for compact log fields."""
    try:
        return urlsplit(url).netloc or url
    except ValueError:
        return url


__all__ = ["MASK", "redact_url", "redact_headers", "endpoint_host"]
