"""Collect dependency ranges under a directory and check them against a probe version.

Usage:
  npm-semver-check --root . [--probe 3.0.0] [--config options.json]
                   [--loose] [--include-prerelease] [--summary out.md]

Prints the JSON report. Exits 10 when some ranges fail to parse, unless
--allow-invalid is given.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import load_options
from .core import DEFAULT_PROBE, scan_repository
from .errors import ConfigError, InvalidVersion
from .summary import render_summary


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--root", type=Path, default=Path("."))
    parser.add_argument("--probe", default=DEFAULT_PROBE, help="Version tested against each range")
    parser.add_argument("--config", type=Path, default=None, help="JSON options file")
    parser.add_argument("--loose", action="store_true")
    parser.add_argument("--include-prerelease", action="store_true")
    parser.add_argument("--summary", type=Path, default=None, help="Write a Markdown summary")
    parser.add_argument("--allow-invalid", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        options = load_options(args.config)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    if args.loose:
        options = replace(options, loose=True)
    if args.include_prerelease:
        options = replace(options, include_prerelease=True)

    try:
        report = scan_repository(args.root, probe=args.probe, options=options)
    except InvalidVersion as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(report, indent=2))
    if args.summary is not None:
        args.summary.write_text(render_summary(report), encoding="utf-8")

    if report.get("hasInvalid") and not args.allow_invalid:
        return 10
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
