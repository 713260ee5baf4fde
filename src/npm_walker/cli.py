"""Command-line interface for npm-walker.

Usage:
  npm-walker PATH [--format json|markdown] [--production-only] [--config FILE] [-v]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import ConfigError, load_settings
from .core import scan_tree
from .errors import ArgumentError, ManifestError, ResolutionError
from .summary import render_summary


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="npm-walker",
        description="List the installed dependency tree of an npm package.",
    )
    parser.add_argument(
        "root",
        type=Path,
        nargs="?",
        default=Path("."),
        help="Directory containing the root package.json (default: current directory)",
    )
    parser.add_argument(
        "--format",
        choices=("json", "markdown"),
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--production-only",
        action="store_true",
        help="Leave out modules only reachable through devDependencies",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a JSON settings file (default: $NPM_WALKER_CONFIG)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("npm_walker").setLevel(logging.DEBUG)

    try:
        settings = load_settings(args.config)
        report = scan_tree(args.root, settings=settings, production_only=args.production_only)
    except (ConfigError, ArgumentError, ManifestError, ResolutionError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.format == "markdown":
        print(render_summary(report), end="")
    else:
        print(json.dumps(report, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
