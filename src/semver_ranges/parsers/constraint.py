"""Parse version range constraints into the constraint algebra.

Supported syntax:
- comparisons: ``=1.2.3``, ``!=1.2``, ``>1``, ``>=1.2``, ``<2``, ``<=2.1.0``
- shorthands: ``~1.2`` (patch-level), ``^1.2`` (compatible-with)
- hyphen ranges: ``1.2.3 - 2.3.4``
- wildcards ``x``, ``X`` and ``*`` in any numeric slot
- AND with ``,`` or ``&&``, OR with ``||``

Each clause is turned into an inclusive Range as soon as it is complete.
Clauses joined by AND are compacted into at most one bounded Range plus any
negations as they are appended.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..errors import GrammarError, SemanticError
from ..models.constraint import And, Constraint, Node, Not, Or, Range
from ..models.version import UNBOUNDED, UNBOUNDED_VERSION, ZERO, Version
from .cursor import to_bytes
from .scanner import OPERATORS, Scanner, Token, TokenKind

logger = logging.getLogger(__name__)

MAJOR, MINOR, PATCH = 0, 1, 2


@dataclass(slots=True)
class _Draft:
    """Range whose numeric slots are still being written."""

    lower: list[int] = field(default_factory=lambda: [0, 0, 0])
    upper: list[int] = field(default_factory=lambda: [0, 0, 0])


def _version(slots: list[int]) -> Version:
    return Version(slots[MAJOR], slots[MINOR], slots[PATCH])


class _ConstraintParser:
    def __init__(self) -> None:
        self.and_group: list[Node] = []
        self.or_group: list[Node] = []
        self.result: Node | None = None
        self._reset_clause()
        self.expecting_number = False
        self.slot = MAJOR
        self.last_slot = MAJOR
        self.writing = False

    def _reset_clause(self) -> None:
        self.operator: TokenKind | None = None
        self.draft: _Draft | None = None
        self.upper_side = False
        self.clause_pos: int | None = None

    # -- token handlers ---------------------------------------------------

    def feed(self, token: Token) -> None:
        kind = token.kind
        match kind:
            case TokenKind.NUMBER:
                self._write(token, token.value)
                self.expecting_number = False

            case TokenKind.WILDCARD:
                self._write(token, UNBOUNDED if self.upper_side else 0)
                if self.slot != MAJOR:
                    self.slot -= 1
                self.expecting_number = False

            case TokenKind.DOT:
                self.expecting_number = True
                self.slot += 1
                if self.slot > PATCH:
                    raise GrammarError(token.pos, "found 3rd dot when parsing semver")

            case TokenKind.SPACE:
                self._close_version(token.pos)

            case TokenKind.HYPHEN:
                if self.operator is TokenKind.HYPHEN:
                    raise GrammarError(token.pos, "double hyphen in range constraint")
                self._close_version(token.pos)
                self.operator = kind
                self.upper_side = True
                self.expecting_number = True
                if self.clause_pos is None:
                    self.clause_pos = token.pos

            case TokenKind.AND:
                if self.draft is None:
                    raise GrammarError(token.pos, "AND empty range constraint")
                self._close_range(token.pos)

            case TokenKind.OR:
                if self.draft is None:
                    raise GrammarError(token.pos, "OR empty range constraint")
                self._close_range(token.pos)
                self._fold_and_group()

            case TokenKind.EOF:
                self._close_range(token.pos)
                self._fold_and_group()
                if len(self.or_group) == 1:
                    self.result = self.or_group[0]
                elif self.or_group:
                    self.result = Or(tuple(self.or_group))

            case _ if kind in OPERATORS:
                self._close_range(token.pos)
                self.operator = kind
                self.clause_pos = token.pos

    def _write(self, token: Token, value: int) -> None:
        if self.draft is None:
            self.draft = _Draft()
        if self.clause_pos is None:
            self.clause_pos = token.pos
        side = self.draft.upper if self.upper_side else self.draft.lower
        side[self.slot] = value
        self.writing = True

    # -- clause closing ---------------------------------------------------

    def _close_version(self, pos: int) -> None:
        if not self.writing:
            return
        if self.expecting_number:
            raise GrammarError(pos, "semver clause incomplete")
        self.last_slot = self.slot
        self.slot = MAJOR
        self.upper_side = True
        self.writing = False

    def _close_range(self, pos: int) -> None:
        if self.draft is None:
            if self.operator is not None:
                raise GrammarError(pos, "semver clause incomplete")
            return
        self._close_version(pos)
        if self.expecting_number:
            raise GrammarError(pos, "semver clause incomplete")

        clause_pos = self.clause_pos if self.clause_pos is not None else pos
        node = self._resolve(self.draft, pos, clause_pos)
        self.and_group = compact_and_group([*self.and_group, node], clause_pos)
        self._reset_clause()

    def _fold_and_group(self) -> None:
        if len(self.and_group) == 1:
            self.or_group.append(self.and_group[0])
        elif self.and_group:
            self.or_group.append(And(tuple(self.and_group)))
        self.and_group = []

    def _resolve(self, draft: _Draft, pos: int, clause_pos: int) -> Node:
        """Turn the operator and written slots into concrete bounds."""
        lower = list(draft.lower)
        upper = list(draft.upper)
        last = self.last_slot

        match self.operator:
            case TokenKind.EQUAL | TokenKind.NOT_EQUAL:
                upper = list(lower)
                if last == MAJOR:
                    upper[MINOR] = upper[PATCH] = UNBOUNDED
                elif last == MINOR:
                    upper[PATCH] = UNBOUNDED

            case TokenKind.GREATER:
                lower[last] += 1
                if lower[last] >= UNBOUNDED:
                    raise GrammarError(clause_pos, f"number {lower[last]} out of range")
                upper = [UNBOUNDED] * 3

            case TokenKind.GREATER_EQUAL:
                upper = [UNBOUNDED] * 3

            case TokenKind.LESS:
                upper = list(lower)
                if upper[PATCH] > 0:
                    upper[PATCH] -= 1
                elif upper[MINOR] > 0:
                    upper[MINOR] -= 1
                    upper[PATCH] = UNBOUNDED
                elif upper[MAJOR] > 0:
                    upper[MAJOR] -= 1
                    upper[MINOR] = upper[PATCH] = UNBOUNDED
                else:
                    raise SemanticError(clause_pos, "<0.0.0 matches no version")
                lower = [0, 0, 0]

            case TokenKind.LESS_EQUAL:
                upper = list(lower)
                lower = [0, 0, 0]

            case TokenKind.TILDE:
                upper = list(lower)
                upper[PATCH] = UNBOUNDED
                if last == MAJOR:
                    upper[MINOR] = UNBOUNDED

            case TokenKind.CARET:
                upper = list(lower)
                upper[PATCH] = UNBOUNDED
                if lower[MAJOR] != 0:
                    upper[MINOR] = UNBOUNDED

            case TokenKind.HYPHEN:
                # 1 - x => 1.0.0 - x.x.x, 1 - 2.x => 1.0.0 - 2.x.x
                if upper[MAJOR] == UNBOUNDED:
                    upper[MINOR] = UNBOUNDED
                if upper[MINOR] == UNBOUNDED:
                    upper[PATCH] = UNBOUNDED

            case _:
                raise GrammarError(pos, "range closed without operator")

        r = Range(_version(lower), _version(upper))
        if r.lower > r.upper:
            raise SemanticError(clause_pos, f'range "{r}" has min above max')
        if self.operator is TokenKind.NOT_EQUAL:
            return Not(r)
        return r


def compact_and_group(members: list[Node], pos: int) -> list[Node]:
    """Merge and validate the Range members of a logical AND.

    A group holds at most one lower bound and one upper bound. A min-only and
    a max-only Range merge into one bounded Range. A bounded Range that arrives
    after a single one-sided bound must fit inside it and then replaces it;
    once both bounds are set, later bounded Ranges must fit inside them.
    Negations and nested groups pass through unchanged.
    """
    if len(members) < 2:
        return members

    lower: Version | None = None
    upper: Version | None = None
    passthrough: list[Node] = []

    for member in members:
        if not isinstance(member, Range):
            passthrough.append(member)
        elif member.unbounded_below:
            if upper is not None:
                raise SemanticError(
                    pos, f"<={member.upper} overlaps with <={upper} in logical AND"
                )
            upper = member.upper
        elif member.unbounded_above:
            if lower is not None:
                raise SemanticError(
                    pos, f">={member.lower} overlaps with >={lower} in logical AND"
                )
            lower = member.lower
        elif lower is not None and upper is not None:
            bound = Range(lower, upper)
            if not bound.contains(member):
                raise SemanticError(
                    pos,
                    f'non overlapping ranges "{member}" and "{bound}" in logical AND',
                )
            passthrough.append(member)
        else:
            if lower is not None or upper is not None:
                bound = Range(lower or ZERO, upper or UNBOUNDED_VERSION)
                if not bound.contains(member):
                    raise SemanticError(
                        pos,
                        f'non overlapping ranges "{member}" and "{bound}" in logical AND',
                    )
            lower, upper = member.lower, member.upper

    if lower is None and upper is None:
        return passthrough
    bound = Range(lower or ZERO, upper or UNBOUNDED_VERSION)
    return [bound, *passthrough]


def parse(src: str | bytes) -> Constraint:
    """Parse constraint text, keeping the original text for display.

    Raises:
        SemverError: on the first lexical, grammar or semantic error.
    """
    data = to_bytes(src)
    parser = _ConstraintParser()
    for token in Scanner(data):
        parser.feed(token)

    if parser.result is None:
        raise GrammarError(1, "empty")

    original = src if isinstance(src, str) else data.decode("utf-8")
    constraint = Constraint(original=original, node=parser.result)
    logger.debug("parsed constraint %r as %s", original, constraint.describe())
    return constraint
