"""Parse pnpm-lock.yaml to capture the ranges each importer declared."""

from __future__ import annotations

from pathlib import Path

from .package_json import SECTIONS


def parse(path: Path) -> list[tuple[str, str]]:
    """Return list of (package, range_expr) from the lockfile importers.

    Lockfile v6+ keeps the specifier next to the resolved version::

        importers:
          .:
            dependencies:
              left-pad:
                specifier: ^1.3.0
                version: 1.3.0

    Lockfile v5 keeps a flat ``specifiers`` map per importer instead.
    """
    import yaml

    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    importers = data.get("importers") if isinstance(data, dict) else None
    if not isinstance(importers, dict):
        return []

    pairs: list[tuple[str, str]] = []
    for importer in importers.values():
        if not isinstance(importer, dict):
            continue

        specifiers = importer.get("specifiers")
        if isinstance(specifiers, dict):
            pairs.extend((str(name), str(expr)) for name, expr in specifiers.items())
            continue

        for section in SECTIONS:
            deps = importer.get(section) or {}
            if not isinstance(deps, dict):
                continue
            for name, meta in deps.items():
                if isinstance(meta, dict) and "specifier" in meta:
                    pairs.append((str(name), str(meta["specifier"])))

    return pairs
