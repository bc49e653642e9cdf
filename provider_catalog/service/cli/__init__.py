"""Provider catalog CLI (package entrypoint).

Wires argument parsing to the handlers in ``cli_actions``; no pipeline logic
lives here. ``generate`` is the default subcommand.

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

import sys
from typing import Optional

from .cli_actions import handle_cache_clean, handle_cache_stats, handle_generate
from .cli_parser import SUBCOMMANDS, build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, 1 on a fatal error).
    """
    p = build_parser()
    argv_list = list(sys.argv[1:] if argv is None else argv)
    if not argv_list or (argv_list[0] not in SUBCOMMANDS and argv_list[0] not in {"-h", "--help"}):
        argv_list = ["generate"] + argv_list
    args = p.parse_args(argv_list)

    if args.cmd == "cache-stats":
        return handle_cache_stats(args)
    if args.cmd == "cache-clean":
        return handle_cache_clean(args)
    return handle_generate(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
