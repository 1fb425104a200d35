"""Report aggregation and schema-friendly output."""

from __future__ import annotations

from typing import Any


def aggregate(constraints: list[dict[str, Any]]) -> dict[str, Any]:
    """Aggregate per-constraint results into a single report.

    The input ``constraints`` is expected to be a list of dicts with ``id``,
    ``range`` and ``results`` keys. ``results`` is a list of objects
    containing ``version`` and ``satisfied``.
    """

    total_constraints = len(constraints)
    versions = {r.get("version") for c in constraints for r in c.get("results", [])}
    total_failures = sum(
        1 for c in constraints for r in c.get("results", []) if not r.get("satisfied")
    )

    report: dict[str, Any] = {
        "version": "1",
        "hasFailures": total_failures > 0,
        "constraints": constraints,
        "totals": {
            "constraints": total_constraints,
            "versions": len(versions),
            "failures": total_failures,
        },
    }

    return report
