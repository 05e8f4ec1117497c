"""Human-readable Markdown summary of a range-check report."""

from __future__ import annotations

from typing import Any


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and a table of checked ranges."""
    totals = report.get("totals", {})
    ranges = report.get("ranges", [])

    lines = []
    lines.append("# npm-semver Range Check")
    lines.append("")
    lines.append(
        f"Probe: {report.get('probe', '')} | Ranges: {totals.get('ranges', 0)} | "
        f"Satisfied: {totals.get('satisfied', 0)} | Invalid: {totals.get('invalid', 0)}"
    )
    lines.append("")
    lines.append("| Range | Satisfies | Error |")
    lines.append("| --- | --- | --- |")

    for result in ranges:
        expr = (result.get("range") or "(empty)").replace("|", "\\|")
        outcome = "yes" if result.get("satisfies") else "no"
        error = (result.get("error") or "").replace("|", "\\|")
        lines.append(f"| {expr} | {outcome} | {error} |")

    if not ranges:
        lines.append("| (no ranges collected) | n/a | |")

    return "\n".join(lines) + "\n"
