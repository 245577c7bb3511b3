"""Endpoint routing: provider classification and credential policy."""

from .classifier import PROVIDER_RULES, classify, is_loopback, requires_credential

__all__ = ["PROVIDER_RULES", "classify", "is_loopback", "requires_credential"]
