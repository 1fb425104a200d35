"""Data models for versions and version constraints."""

from __future__ import annotations

from .constraint import And, Constraint, Node, Not, Or, Range
from .version import (
    UNBOUNDED,
    UNBOUNDED_VERSION,
    ZERO,
    PreReleaseIdentifier,
    Version,
    compare_pre_release,
)

__all__ = [
    "And",
    "Constraint",
    "Node",
    "Not",
    "Or",
    "PreReleaseIdentifier",
    "Range",
    "UNBOUNDED",
    "UNBOUNDED_VERSION",
    "Version",
    "ZERO",
    "compare_pre_release",
]
