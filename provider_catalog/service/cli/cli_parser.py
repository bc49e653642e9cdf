"""CLI parser construction for provider-catalog.

Only argument shapes live here; handlers are in ``cli_actions``. Flags left
unset parse to ``None`` so configuration from the file and environment is
not masked.
"""

from __future__ import annotations

import argparse

SUBCOMMANDS = ("generate", "cache-stats", "cache-clean")


def add_cache_flags(parser: argparse.ArgumentParser, *, with_max_age: bool = True) -> None:
    """Attach ``--cache`` (and optionally ``--max-age-days``) to a parser."""
    parser.add_argument("--cache", default=None, help="SQLite display-name cache path")
    if with_max_age:
        parser.add_argument(
            "--max-age-days",
            type=int,
            default=None,
            help="Remove cache entries older than this many days",
        )


def add_log_flags(parser: argparse.ArgumentParser) -> None:
    """Attach ``--json-logs``/``--plain-logs`` (JSON by default) and ``--log-file``."""
    parser.add_argument("--log-file", default=None, help="Also write logs to this rotating file")
    grp = parser.add_mutually_exclusive_group()
    grp.add_argument("--json-logs", dest="json_logs", action="store_true", default=True)
    grp.add_argument("--plain-logs", dest="json_logs", action="store_false")


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level parser with ``generate``, ``cache-stats`` and ``cache-clean``."""
    p = argparse.ArgumentParser(
        prog="provider-catalog",
        description="Generate the APIpie provider config with cached display names",
    )
    sub = p.add_subparsers(dest="cmd")

    p_gen = sub.add_parser("generate", help="Fetch the catalog and write the provider config (default)")
    p_gen.add_argument("--output", default=None, help="Provider config destination")
    add_cache_flags(p_gen)
    add_log_flags(p_gen)

    p_stats = sub.add_parser("cache-stats", help="Print the number of cached display names")
    add_cache_flags(p_stats, with_max_age=False)
    add_log_flags(p_stats)

    p_clean = sub.add_parser("cache-clean", help="Remove expired cache entries")
    add_cache_flags(p_clean)
    add_log_flags(p_clean)

    return p
