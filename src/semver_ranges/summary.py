"""Human-readable Markdown summary of a policy report."""

from __future__ import annotations

from typing import Any


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and a table of results."""
    totals = report.get("totals", {})
    constraints = report.get("constraints", [])

    lines = []
    lines.append("# semver-ranges Summary")
    lines.append("")
    lines.append(
        f"Constraints: {totals.get('constraints', 0)} | "
        f"Versions: {totals.get('versions', 0)} | "
        f"Failures: {totals.get('failures', 0)}"
    )
    lines.append("")
    lines.append("| Constraint | Range | Version | Satisfied |")
    lines.append("| --- | --- | --- | --- |")

    has_rows = False

    for entry in constraints:
        constraint_id = entry.get("id") or "(unnamed)"
        range_text = str(entry.get("range", "")).replace("|", "\\|")
        for result in entry.get("results") or []:
            mark = "yes" if result.get("satisfied") else "no"
            lines.append(
                f"| {constraint_id} | `{range_text}` | {result.get('version', '')} | {mark} |"
            )
            has_rows = True

    if not has_rows:
        lines.append("| (no constraints evaluated) | n/a | n/a | n/a |")

    return "\n".join(lines) + "\n"
