"""Core entrypoints.

The functions here accept either parsed objects or their text forms so that
callers such as the CLI do not need to parse up front. Nothing in this
module performs I/O.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from .errors import SemverError
from .models.constraint import Constraint
from .models.version import Version
from .parsers.constraint import parse as parse_constraint
from .parsers.version import parse as parse_version
from .report import aggregate
from .sort import sort_ascending

logger = logging.getLogger(__name__)


def must_parse_version(text: str) -> Version:
    """Parse ``text`` or raise RuntimeError; for versions known to be valid."""
    try:
        return parse_version(text)
    except SemverError as exc:
        raise RuntimeError(f"invalid version {text!r}: {exc}") from exc


def must_parse_constraint(text: str) -> Constraint:
    """Parse ``text`` or raise RuntimeError; for constraints known to be valid."""
    try:
        return parse_constraint(text)
    except SemverError as exc:
        raise RuntimeError(f"invalid constraint {text!r}: {exc}") from exc


def _as_version(version: Version | str) -> Version:
    if isinstance(version, Version):
        return version
    return parse_version(version)


def _as_constraint(constraint: Constraint | str) -> Constraint:
    if isinstance(constraint, Constraint):
        return constraint
    return parse_constraint(constraint)


def satisfies(version: Version | str, constraint: Constraint | str) -> bool:
    return _as_constraint(constraint).check(_as_version(version))


def filter_satisfying(
    versions: Iterable[Version | str], constraint: Constraint | str
) -> list[Version]:
    """Return the versions inside ``constraint``, lowest first."""
    c = _as_constraint(constraint)
    matched = [v for v in (_as_version(v) for v in versions) if c.check(v)]
    return sort_ascending(matched)


def max_satisfying(
    versions: Iterable[Version | str], constraint: Constraint | str
) -> Version | None:
    matched = filter_satisfying(versions, constraint)
    return matched[-1] if matched else None


def min_satisfying(
    versions: Iterable[Version | str], constraint: Constraint | str
) -> Version | None:
    matched = filter_satisfying(versions, constraint)
    return matched[0] if matched else None


def evaluate_policy(
    constraints: Iterable[tuple[str, Constraint]],
    versions: Iterable[Version | str],
) -> dict[str, Any]:
    """Check every version against every named constraint.

    Params:
        constraints: (id, constraint) pairs, typically the enabled entries of
            a loaded policy
        versions: versions to check; strings are parsed first

    Returns: dict report (see ``report.aggregate``)
    """
    parsed = [_as_version(v) for v in versions]

    entries: list[dict[str, Any]] = []
    for constraint_id, constraint in constraints:
        results = [
            {"version": str(v), "satisfied": constraint.check(v)} for v in parsed
        ]
        entries.append(
            {
                "id": constraint_id,
                "range": str(constraint),
                "results": results,
            }
        )

    report = aggregate(entries)
    logger.info(
        "evaluated %d constraint(s) against %d version(s): %d failure(s)",
        report["totals"]["constraints"],
        report["totals"]["versions"],
        report["totals"]["failures"],
    )
    return report
