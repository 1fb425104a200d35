"""Constraint algebra: Range, And, Or and Not.

The four node types form a closed union. ``check``, ``contains`` and
``render`` dispatch on the node shape with ``match``; the methods on each
class delegate to them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from .version import UNBOUNDED_VERSION, ZERO, Version


@dataclass(frozen=True, slots=True)
class Range:
    """Inclusive ``[lower, upper]`` version interval."""

    lower: Version
    upper: Version

    @property
    def unbounded_below(self) -> bool:
        return self.lower.same(ZERO)

    @property
    def unbounded_above(self) -> bool:
        return self.upper.same(UNBOUNDED_VERSION)

    def check(self, version: Version) -> bool:
        return check(self, version)

    def contains(self, other: Node | Constraint) -> bool:
        return contains(self, other)

    def __str__(self) -> str:
        return render(self)

    def to_dict(self) -> dict[str, object]:
        return {"min": str(self.lower), "max": str(self.upper)}


@dataclass(frozen=True, slots=True)
class Not:
    """Negation of a single Range."""

    range: Range

    def check(self, version: Version) -> bool:
        return check(self, version)

    def contains(self, other: Node | Constraint) -> bool:
        return contains(self, other)

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True, slots=True)
class And:
    """All members must hold."""

    members: tuple[Node, ...]

    def check(self, version: Version) -> bool:
        return check(self, version)

    def contains(self, other: Node | Constraint) -> bool:
        return contains(self, other)

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True, slots=True)
class Or:
    """At least one member must hold."""

    members: tuple[Node, ...]

    def check(self, version: Version) -> bool:
        return check(self, version)

    def contains(self, other: Node | Constraint) -> bool:
        return contains(self, other)

    def __str__(self) -> str:
        return render(self)


Node: TypeAlias = Range | And | Or | Not


@dataclass(frozen=True, slots=True)
class Constraint:
    """A parsed constraint that remembers the exact text it was parsed from."""

    original: str
    node: Node

    @classmethod
    def parse(cls, text: str | bytes) -> Constraint:
        from ..parsers.constraint import parse

        return parse(text)

    def check(self, version: Version) -> bool:
        return check(self.node, version)

    def contains(self, other: Node | Constraint) -> bool:
        return contains(self.node, other)

    def describe(self) -> str:
        """Render the parsed tree rather than the original text."""
        return render(self.node)

    def __str__(self) -> str:
        return self.original


def check(node: Node, version: Version) -> bool:
    """Return True when ``version`` satisfies ``node``."""
    match node:
        case Range(lower=lower, upper=upper):
            return lower <= version <= upper
        case Not(range=inner):
            return not check(inner, version)
        case And(members=members):
            return all(check(m, version) for m in members)
        case Or(members=members):
            return any(check(m, version) for m in members)
    raise TypeError(f"Unsupported constraint node: {node!r}")


def contains(node: Node, other: Node | Constraint) -> bool:
    """Structural subset test: does ``node`` contain ``other``?"""
    if isinstance(other, Constraint):
        other = other.node

    match node:
        case Range():
            return _range_contains(node, other)
        case Not(range=inner):
            return not _range_contains(inner, other)
        case And(members=members):
            return all(contains(m, other) for m in members)
        case Or(members=members):
            return any(contains(m, other) for m in members)
    raise TypeError(f"Unsupported constraint node: {node!r}")


def _range_contains(r: Range, other: object) -> bool:
    match other:
        case Range(lower=lower, upper=upper):
            return r.lower <= lower and r.upper >= upper
        case Not(range=inner):
            return not _range_contains(r, inner)
        case And(members=members):
            return all(_range_contains(r, m) for m in members)
        case Or(members=members):
            return any(_range_contains(r, m) for m in members)
    return False


def render(node: Node) -> str:
    match node:
        case Range(lower=lower, upper=upper):
            return f"{lower} - {upper}"
        case Not(range=inner):
            return "!=" + render(inner)
        case And(members=members):
            return " && ".join(render(m) for m in members)
        case Or(members=members):
            return " || ".join(render(m) for m in members)
    raise TypeError(f"Unsupported constraint node: {node!r}")
