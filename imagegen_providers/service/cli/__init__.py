"""imagegen-cli (package entrypoint).

Wires argument parsing to the action handlers in ``cli_actions``. It performs
no provider logic directly.
"""

from __future__ import annotations

from typing import Optional

from ...base.logging import configure_logger
from .cli_actions import handle_generate, handle_plan
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
        Process exit code.
    """
    args = build_parser().parse_args(argv)
    if args.log_level:
        configure_logger(level=args.log_level)
    if args.cmd == "plan":
        return handle_plan(args)
    return handle_generate(args)


__all__ = ["main"]
