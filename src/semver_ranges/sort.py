"""Ordering helpers for lists of versions.

``ascending`` and ``descending`` are three-way comparators usable with
``functools.cmp_to_key``; the ``*_key`` objects are ready-made sort keys.
"""

from __future__ import annotations

from functools import cmp_to_key
from collections.abc import Iterable

from .models.version import Version


def ascending(a: Version, b: Version) -> int:
    return a.compare(b)


def descending(a: Version, b: Version) -> int:
    return b.compare(a)


ascending_key = cmp_to_key(ascending)
descending_key = cmp_to_key(descending)


def sort_ascending(versions: Iterable[Version]) -> list[Version]:
    """Return versions ordered lowest first, e.g. 1.0.0, 1.1.0, 2.0.0."""
    return sorted(versions, key=ascending_key)


def sort_descending(versions: Iterable[Version]) -> list[Version]:
    """Return versions ordered highest first, e.g. 2.0.0, 1.1.0, 1.0.0."""
    return sorted(versions, key=descending_key)


def version_strings(versions: Iterable[Version]) -> list[str]:
    return [str(v) for v in versions]


def join_versions(versions: Iterable[Version], separator: str = ", ") -> str:
    return separator.join(version_strings(versions))
