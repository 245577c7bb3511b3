"""Auxiliary logging helpers (formatter, context, redaction) used by base.logging."""

from .json_formatter import JsonFormatter, ISO
from .logging_context import LogContext
from .redaction import endpoint_host, redact_headers, redact_url

__all__ = ["JsonFormatter", "ISO", "LogContext", "endpoint_host", "redact_headers", "redact_url"]
