"""Errors parts package public surface.

Re-exports the error taxonomy types for optional direct imports. The
classification helpers depend on the result models and are exposed from
`provider_gateway.base.errors`, which is the preferred stable surface.
"""

from .error_kind import ErrorKind
from .gateway_error import GatewayError

__all__ = ["ErrorKind", "GatewayError"]
