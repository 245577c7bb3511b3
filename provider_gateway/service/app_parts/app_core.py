"""Request handling helpers for the gateway HTTP service.

The route functions in ``service.app`` stay thin; payload building and status
mapping live here so that the CLI and tests can reuse them without a running
server.
"""
from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

from fastapi.exceptions import RequestValidationError

from provider_gateway.base.dto import ChatBodyDTO
from provider_gateway.base.factory import AdapterFactory
from provider_gateway.base.gateway import Gateway
from provider_gateway.base.models import ChatResult
from provider_gateway.base.routing import classify, requires_credential
from provider_gateway.config.defaults import ENDPOINT_PRESETS

STATUS_OK = 200
STATUS_CALLER_ERROR = 400
STATUS_UPSTREAM_ERROR = 500


def get_gateway_dep() -> Gateway:
    """FastAPI dependency returning a gateway bound to the current config."""
    return Gateway()


def status_for(result: ChatResult) -> int:
    """Map a result to the HTTP status of the chat endpoint.

    Caller mistakes (missing credential) are 400; every upstream, transport or
    parse failure is 500.
    """
    if result.ok:
        return STATUS_OK
    return STATUS_CALLER_ERROR if result.kind.is_caller_error else STATUS_UPSTREAM_ERROR


def missing_fields_message(missing: Sequence[str]) -> str:
    return "Missing required fields: " + " or ".join(missing)


def _handle_chat(body: ChatBodyDTO, gateway: Gateway) -> Tuple[int, Dict[str, Any]]:
    """Run one chat call and return ``(status_code, payload)``."""
    missing = body.missing_fields()
    if missing:
        return STATUS_CALLER_ERROR, {"error": missing_fields_message(missing)}
    result = gateway.chat(body.to_request())
    return status_for(result), result.to_payload()


def validation_error_message(exc: RequestValidationError) -> str:
    """Flatten a FastAPI validation error into one display string."""
    errors: List[Dict[str, Any]] = list(exc.errors())
    if not errors:
        return "Invalid request body"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON body"
    loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    msg = first.get("msg") or "invalid value"
    return f"Invalid request body: {loc}: {msg}" if loc else f"Invalid request body: {msg}"


def _build_providers_response() -> Dict[str, Any]:
    """Return the provider kinds and the endpoint presets offered to clients."""
    return {
        "ok": True,
        "providers": [{"id": k.value, "label": k.label} for k in AdapterFactory.supported()],
        "presets": [dict(p) for p in ENDPOINT_PRESETS],
    }


def _build_classify_response(endpoint_url: str) -> Dict[str, Any]:
    kind = classify(endpoint_url)
    return {
        "provider": kind.value,
        "requiresCredential": requires_credential(kind, endpoint_url),
    }


__all__ = [
    "STATUS_CALLER_ERROR",
    "STATUS_OK",
    "STATUS_UPSTREAM_ERROR",
    "get_gateway_dep",
    "missing_fields_message",
    "status_for",
    "validation_error_message",
    "_build_classify_response",
    "_build_providers_response",
    "_handle_chat",
]
