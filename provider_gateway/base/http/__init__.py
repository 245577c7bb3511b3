"""HTTP utilities package for the gateway.

Exposes the single-shot transport used for every upstream call.
"""

from .transport import send

__all__ = ["send"]
