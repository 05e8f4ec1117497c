"""Parse package.json and extract dependency ranges across sections."""

from __future__ import annotations

from pathlib import Path

SECTIONS = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "optionalDependencies",
)


def parse(path: Path) -> list[tuple[str, str]]:
    """Return list of (package, range_expr) from all dependency sections."""
    import json

    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        return []

    pairs: list[tuple[str, str]] = []
    for section in SECTIONS:
        deps = data.get(section) or {}
        if not isinstance(deps, dict):
            continue
        for name, expr in deps.items():
            pairs.append((name, str(expr)))

    return pairs
