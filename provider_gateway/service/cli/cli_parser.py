"""CLI parser construction for gateway-cli.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser with ``classify``, ``chat`` and ``serve`` subcommands.
    """
    p = argparse.ArgumentParser(prog="gateway-cli", description="Provider gateway CLI")
    sub = p.add_subparsers(dest="cmd", required=True)

    # classify
    p_cls = sub.add_parser("classify", help="Print the provider an endpoint URL routes to")
    p_cls.add_argument("url")
    p_cls.add_argument("--json", action="store_true")

    # chat
    p_chat = sub.add_parser("chat", help="Send one chat turn through the gateway")
    p_chat.add_argument("--endpoint", required=True)
    p_chat.add_argument("--model", required=True)
    p_chat.add_argument("--api-key", default=None, help="Defaults to $GATEWAY_API_KEY")
    p_chat.add_argument("--system", default="")
    p_chat.add_argument("--message", default="")
    p_chat.add_argument("--stealth", action="store_true", help="Base64-encode the user message")
    p_chat.add_argument("--history-file", default=None, help="JSON list of {role, content}")
    p_chat.add_argument("--json", action="store_true")
    p_chat.add_argument("--dry-run", action="store_true", help="Print the wire request without sending it")

    # serve
    p_serve = sub.add_parser("serve", help="Run the HTTP service with uvicorn")
    p_serve.add_argument("--host", default=None)
    p_serve.add_argument("--port", type=int, default=None)
    p_serve.add_argument("--reload", action="store_true", default=None)

    return p
