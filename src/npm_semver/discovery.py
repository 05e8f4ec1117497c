"""Locate the manifests that declare dependency ranges."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

EXCLUDES = frozenset({"node_modules", ".git", ".venv"})

# pnpm-lock.yaml importers repeat the specifiers written in each package.json,
# which covers workspaces whose package.json files are generated.
MANIFEST_NAMES = frozenset({"package.json", "pnpm-lock.yaml"})


def _is_excluded(relative: Path, excludes: frozenset[str]) -> bool:
    return not excludes.isdisjoint(relative.parts)


def discover_manifests(
    root: Path,
    names: Iterable[str] = MANIFEST_NAMES,
    excludes: Iterable[str] = EXCLUDES,
) -> list[Path]:
    """Return manifest paths under ``root`` in sorted order.

    Anything below a vendored or VCS directory (``node_modules``, ``.git``,
    ``.venv``) is ignored.
    """
    root = root.resolve()
    wanted = set(names)
    skip = frozenset(excludes)
    return sorted(
        path
        for path in root.rglob("*")
        if path.name in wanted and path.is_file() and not _is_excluded(path.relative_to(root), skip)
    )
