"""Range collection and checking entrypoints.

Collects the dependency ranges declared across a tree of manifests and
checks each against a probe version, recording ranges that fail to parse.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from collections.abc import Iterable
from typing import Any

import yaml

from .discovery import discover_manifests
from .errors import SemverError
from .models.options import Options, resolve
from .models.range import Range
from .models.version import Version
from .parsers.package_json import parse as parse_package_json
from .parsers.pnpm_lock import parse as parse_pnpm_lock
from .report import aggregate

logger = logging.getLogger(__name__)

DEFAULT_PROBE = "3.0.0"

_PARSERS = {
    "package.json": parse_package_json,
    "pnpm-lock.yaml": parse_pnpm_lock,
}


def collect_ranges(root: Path) -> list[str]:
    """Return the sorted, de-duplicated range expressions declared under root.

    Unreadable or malformed manifests are logged and skipped.
    """
    ranges: set[str] = set()
    for path in discover_manifests(root):
        parser = _PARSERS[path.name]
        try:
            pairs = parser(path)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
            logger.warning("Skipping unreadable manifest %s: %s", path, exc)
            continue
        logger.info("Found %d dependency ranges in %s", len(pairs), path)
        ranges.update(expr for _, expr in pairs)
    return sorted(ranges)


def check_range(expr: str, probe: Version, options: Options | None = None) -> dict[str, Any]:
    """Parse ``expr`` and test ``probe`` against it."""
    try:
        satisfied = Range.parse(expr, options).test(probe)
    except SemverError as exc:
        logger.debug("Range %r did not parse: %s", expr, exc)
        return {"range": expr, "satisfies": False, "error": str(exc)}
    return {"range": expr, "satisfies": satisfied, "error": None}


def check_ranges(
    ranges: Iterable[str],
    probe: str | Version = DEFAULT_PROBE,
    options: Options | None = None,
) -> list[dict[str, Any]]:
    """Check every range against one probe version.

    Raises:
        InvalidVersion: if ``probe`` itself is not a valid version.
    """
    opts = resolve(options)
    version = Version.parse(probe, opts)
    return [check_range(expr, version, opts) for expr in ranges]


def scan_repository(
    root: Path,
    probe: str = DEFAULT_PROBE,
    options: Options | None = None,
) -> dict[str, Any]:
    """Collect ranges under ``root`` and return the aggregated report."""
    root = root.resolve()
    ranges = collect_ranges(root)
    results = check_ranges(ranges, probe, options)
    return aggregate(results, probe=str(Version.parse(probe, resolve(options))), options=options)
