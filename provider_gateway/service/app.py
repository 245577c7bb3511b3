from __future__ import annotations

import logging
import os
from typing import Any, Dict

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from provider_gateway.base.dto import ChatBodyDTO
from provider_gateway.base.gateway import Gateway
from provider_gateway.base.logging import configure_logger, get_logger, log_event
from provider_gateway.config.defaults import CORS_ALLOW_HEADERS

from .app_parts.app_core import (
    STATUS_CALLER_ERROR,
    STATUS_UPSTREAM_ERROR,
    get_gateway_dep,
    validation_error_message,
    _build_classify_response,
    _build_providers_response,
    _handle_chat,
)

LOG_FILE_ENV = "GATEWAY_LOG_FILE"

if os.getenv(LOG_FILE_ENV):
    configure_logger(file_path=os.getenv(LOG_FILE_ENV))

_logger = get_logger("gateway.service")

app = FastAPI(title="Provider Gateway", version="0.1.0")

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
}


# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------


@app.middleware("http")
async def cors_headers(request: Request, call_next):
    """Answer preflight requests and stamp CORS headers on every response.

    Browsers call the gateway directly, so every response (errors included)
    must carry the headers. ``OPTIONS`` short-circuits with an empty 200, and
    an unhandled exception becomes ``500 {"error": ...}``.
    """
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    try:
        response = await call_next(request)
    except Exception as e:
        log_event(
            _logger,
            "service.unhandled_error",
            path=request.url.path,
            error_type=type(e).__name__,
            level=logging.ERROR,
        )
        return JSONResponse(
            status_code=STATUS_UPSTREAM_ERROR,
            content={"error": "Internal server error"},
            headers=CORS_HEADERS,
        )
    response.headers.update(CORS_HEADERS)
    return response


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return ``400 {"error": ...}`` instead of FastAPI's default 422 payload."""
    message = validation_error_message(exc)
    log_event(_logger, "service.invalid_request", path=request.url.path, error=message)
    return JSONResponse(status_code=STATUS_CALLER_ERROR, content={"error": message})


# ---------------------------------------------------------------------------
# Health and discovery endpoints
# ---------------------------------------------------------------------------


@app.get("/api/health")
def health() -> Dict[str, Any]:
    """Check the health status of the service."""
    return {"ok": True}


@app.get("/api/providers")
def get_providers() -> Dict[str, Any]:
    """List the supported provider kinds and the endpoint presets."""
    return _build_providers_response()


@app.get("/api/classify")
def get_classify(endpointUrl: str = "") -> Dict[str, Any]:
    """Report which adapter an endpoint URL routes to and whether it needs a key."""
    return _build_classify_response(endpointUrl)


# ---------------------------------------------------------------------------
# Chat endpoint
# ---------------------------------------------------------------------------


@app.post("/api/chat")
@app.post("/jailbreak-test")
def post_chat(body: ChatBodyDTO, gateway: Gateway = Depends(get_gateway_dep)) -> JSONResponse:
    """Send one chat turn to the provider implied by ``endpointUrl``.

    Returns ``200 {"response": ...}`` on success and ``{"error": ...}`` with
    400 (caller mistakes) or 500 (upstream failures) otherwise.
    """
    status, payload = _handle_chat(body, gateway)
    return JSONResponse(status_code=status, content=payload)


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def get_app() -> FastAPI:
    """Return the FastAPI application instance."""
    return app
