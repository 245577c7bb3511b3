"""CLI action handlers for the gateway.

Purpose
-------
Subcommand handlers for ``gateway-cli``. The parser lives in ``cli_parser``;
this module turns parsed arguments into gateway calls and prints results.
It has no top-level side effects and is safe to import in tests.

Fallback & Error Semantics
--------------------------
- ``chat --dry-run`` performs no network I/O; it prints the wire request the
  gateway would send, with credentials masked.
- Failures are printed as JSON ``{"error", "kind"}`` to stderr with exit code
  ``1``; argument problems (bad history file, missing endpoint/model) exit
  with ``2``.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Any, Dict, List, Optional

import httpx

from ...base.factory import AdapterFactory
from ...base.gateway import Gateway, check_credential
from ...base.errors import GatewayError
from ...base.logging import LogContext, get_logger, log_event
from ...base.models import ChatRequest
from ...base.routing import classify, requires_credential
from ...base.utils.stealth import apply_stealth
from ...config import get_gateway_config

API_KEY_ENV = "GATEWAY_API_KEY"

_logger = get_logger("gateway.cli")


def load_history(path: Optional[str]) -> List[Dict[str, Any]]:
    """Load prior turns from a JSON file holding a list of ``{role, content}``.

    Raises
    ------
    ValueError
        When the file is not valid JSON or not a list of objects.
    """
    if not path:
        return []
    with open(path, "r", encoding="utf-8") as fh:
        try:
            data = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"history file is not valid JSON: {e}") from e
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ValueError("history file must contain a JSON list of {role, content} objects")
    return data


def build_request(args: argparse.Namespace) -> ChatRequest:
    """Build a :class:`ChatRequest` from parsed ``chat`` arguments.

    The API key falls back to ``GATEWAY_API_KEY`` when ``--api-key`` is omitted.
    """
    return ChatRequest(
        endpoint_url=args.endpoint,
        model=args.model,
        api_key=args.api_key or os.environ.get(API_KEY_ENV),
        system_prompt=args.system or "",
        history=load_history(args.history_file),
        user_message=args.message or "",
        stealth_mode=bool(args.stealth),
    )


def plan_chat(request: ChatRequest) -> Dict[str, Any]:
    """Return the redacted wire request the gateway would send, without I/O.

    Raises
    ------
    GatewayError
        ``MISSING_CREDENTIAL`` when the endpoint needs a key and none is set.
    """
    config = get_gateway_config()
    kind = classify(request.endpoint_url)
    check_credential(kind, request)
    adapter = AdapterFactory.create(kind)
    wire = adapter.build_request(apply_stealth(request, prefix=config.stealth_prefix), config)
    return {"provider": kind.value, "request": wire.redacted()}


def _print_error(message: str, kind: Optional[str] = None) -> None:
    payload: Dict[str, Any] = {"error": message}
    if kind:
        payload["kind"] = kind
    print(json.dumps(payload), file=sys.stderr)


def handle_classify(args: argparse.Namespace) -> int:
    """Print the provider kind an endpoint URL routes to."""
    kind = classify(args.url)
    if getattr(args, "json", False):
        print(json.dumps({"provider": kind.value, "requiresCredential": requires_credential(kind, args.url)}))
    else:
        print(kind.value)
    return 0


def handle_chat(args: argparse.Namespace, *, transport: Optional[httpx.BaseTransport] = None) -> int:
    """Execute the ``chat`` subcommand.

    Parameters
    ----------
    args: argparse.Namespace
        Parsed ``chat`` arguments.
    transport: Optional[httpx.BaseTransport]
        Injection point for tests (``httpx.MockTransport``).

    Returns
    -------
    int
        ``0`` on success, ``1`` on a gateway failure, ``2`` on invalid arguments.
    """
    try:
        request = build_request(args)
    except (OSError, ValueError) as e:
        _print_error(str(e))
        return 2

    ctx = LogContext(provider=classify(request.endpoint_url).value, model=request.model)
    if args.dry_run:
        try:
            plan = plan_chat(request)
        except GatewayError as e:
            _print_error(e.message, e.kind.value)
            return 1
        print(json.dumps(plan, indent=2))
        log_event(_logger, "cli.dry_run", ctx)
        return 0

    result = Gateway(transport=transport).chat(request)
    if result.ok:
        if args.json:
            print(json.dumps(result.to_payload()))
        else:
            print(result.text)
        log_event(_logger, "cli.finalize", ctx, ok=True)
        return 0
    _print_error(result.message, result.kind.value)
    log_event(_logger, "cli.finalize", ctx, ok=False, error_kind=result.kind.value)
    return 1


def handle_serve(args: argparse.Namespace) -> int:
    """Start the development server (blocks until interrupted)."""
    from ..dev_server import main as serve

    serve(host=args.host, port=args.port, reload=args.reload)
    return 0


__all__ = [
    "API_KEY_ENV",
    "build_request",
    "handle_chat",
    "handle_classify",
    "handle_serve",
    "load_history",
    "plan_chat",
]
