"""Gateway CLI (package entrypoint).

Wires argument parsing to the action handlers in ``cli_actions``. Performs no
provider logic directly.
"""

from __future__ import annotations

import sys
from typing import Optional

from .cli_actions import handle_chat, handle_classify, handle_serve
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, non-zero on error).
    """
    args = build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    if args.cmd == "classify":
        return handle_classify(args)
    if args.cmd == "serve":
        return handle_serve(args)
    return handle_chat(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
