"""Command line entrypoint: search, resolve and verify native modules.

Usage:
  module-autolinking search [paths...] [--platform ios] [--ignore-paths ...] [--exclude ...]
  module-autolinking resolve [paths...] [--platform ios] [--json]
  module-autolinking verify [paths...] [--platform ios]
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from . import __version__
from .errors import AutolinkingError
from .logging import setup_logging
from .models import SearchResults, search_results_to_dict
from .report import resolve_payload, verify_search_results
from .resolvers import resolve_modules
from .scanner import find_modules

DEFAULT_PLATFORM = "ios"


def _add_search_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("paths", nargs="*", help="Paths to search for modules")
    parser.add_argument(
        "-p",
        "--platform",
        default=DEFAULT_PLATFORM,
        help='The platform that the resulted modules must support, e.g. "ios", "android"',
    )
    parser.add_argument(
        "-i",
        "--ignore-paths",
        nargs="+",
        action="extend",
        default=None,
        help="Paths to ignore when looking up for modules",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        nargs="+",
        action="extend",
        default=None,
        help="Package names to exclude when looking up for modules",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="module-autolinking",
        description="Searches for native modules to autolink them.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("--log-level", default=None, help="Log level (default: WARNING)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Print the discovered modules")
    _add_search_arguments(search)

    resolve = subparsers.add_parser("resolve", help="Resolve modules for the platform")
    _add_search_arguments(resolve)
    resolve.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Outputs the results and logs in plain JSON format",
    )

    verify = subparsers.add_parser("verify", help="Check for duplicated modules")
    _add_search_arguments(verify)

    return parser.parse_args(argv)


def _search(args: argparse.Namespace, cwd: Path) -> SearchResults:
    provided = {
        "search_paths": args.paths,
        "ignore_paths": args.ignore_paths,
        "exclude": args.exclude,
    }
    return find_modules(args.platform, provided, cwd)


def run(args: argparse.Namespace, cwd: Path) -> str:
    """Execute a parsed command and return its stdout text."""
    search_results = _search(args, cwd)

    if args.command == "search":
        return json.dumps(search_results_to_dict(search_results), indent=2)

    if args.command == "resolve":
        modules = resolve_modules(args.platform, search_results)
        if args.json:
            return json.dumps(resolve_payload(search_results, modules, cwd))
        return json.dumps({"modules": modules}, indent=2)

    logs = verify_search_results(search_results, cwd)
    return logs or "Duplicated modules not found."


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(level=args.log_level)
    try:
        output = run(args, Path.cwd())
    except AutolinkingError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
