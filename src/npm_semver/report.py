"""Report aggregation for range checks."""

from __future__ import annotations

from typing import Any

from .models.options import Options, resolve


def aggregate(
    results: list[dict[str, Any]],
    probe: str,
    options: Options | None = None,
) -> dict[str, Any]:
    """Aggregate per-range results into a single report.

    ``results`` is a list of dicts with ``range``, ``satisfies`` and ``error``
    keys, as produced by :func:`npm_semver.core.check_ranges`.
    """

    total = len(results)
    invalid = sum(1 for r in results if r.get("error"))
    satisfied = sum(1 for r in results if r.get("satisfies"))

    report: dict[str, Any] = {
        "version": "1",
        "probe": probe,
        "options": resolve(options).to_dict(),
        "hasInvalid": invalid > 0,
        "ranges": results,
        "totals": {
            "ranges": total,
            "satisfied": satisfied,
            "unsatisfied": total - satisfied - invalid,
            "invalid": invalid,
        },
    }

    return report
