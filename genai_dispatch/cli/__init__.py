"""genai-dispatch command line (package entrypoint).

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

import sys
from typing import Optional

from ..base.errors import DispatchError
from ..base.logging import configure_logger
from . import cli_actions
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
        Process exit code (0 success, 1 dispatch error, 2 usage error).
    """
    args = build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    if args.log_level:
        configure_logger(level=args.log_level)
    handler = cli_actions.HANDLERS[args.cmd]
    try:
        return handler(args, sys.stdout)
    except DispatchError as err:
        return cli_actions.report_error(err, sys.stderr)


__all__ = ["main"]
