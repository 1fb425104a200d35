"""Parse ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`` strings into Versions.

This parser is independent of the constraint scanner: it walks the input with
its own cursor and validates identifiers as it goes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..errors import GrammarError, LexicalError
from ..models.version import UNBOUNDED, PreReleaseIdentifier, Version
from .cursor import Cursor

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")
_LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")
_NON_DIGITS = _LETTERS | {"-"}
_IDENTIFIER_CHARS = _DIGITS | _NON_DIGITS


def is_digits(s: str) -> bool:
    return all(c in _DIGITS for c in s)


def is_numeric_identifier(s: str) -> bool:
    """``0`` or a run of digits without a leading zero."""
    if s == "0":
        return True
    return bool(s) and s[0] != "0" and is_digits(s)


def is_alphanumeric_identifier(s: str) -> bool:
    """At least one letter or hyphen, otherwise only ``[0-9A-Za-z-]``.

    A single letter or hyphen on its own is rejected.
    """
    if len(s) == 1 and s in _NON_DIGITS:
        return False
    found_non_digit = False
    for c in s:
        if c in _NON_DIGITS:
            found_non_digit = True
        if c not in _IDENTIFIER_CHARS:
            return False
    return found_non_digit


def is_pre_release_identifier(s: str) -> bool:
    return is_alphanumeric_identifier(s) or is_numeric_identifier(s)


def is_build_identifier(s: str) -> bool:
    return bool(s) and (is_digits(s) or is_alphanumeric_identifier(s))


class _VersionParser:
    def __init__(self, src: str | bytes) -> None:
        self._cursor = Cursor(src)
        self._reject_space(previous=None)

    def _reject_space(self, previous: str | None) -> None:
        cursor = self._cursor
        if cursor.ch != " ":
            return
        if previous == ".":
            raise GrammarError(cursor.col, "semver clause incomplete")
        raise LexicalError(cursor.col, "illegal character SPACE")

    def _advance(self) -> None:
        previous = self._cursor.ch
        self._cursor.advance()
        self._reject_space(previous)

    def _number(self, component: str) -> int:
        cursor = self._cursor
        if cursor.ch is None:
            raise GrammarError(cursor.here(), f"missing {component}")
        if cursor.ch == ".":
            raise GrammarError(cursor.col, "expected number, got nothing")
        if cursor.ch not in _DIGITS:
            raise GrammarError(cursor.col, f"starts with non-positive integer '{cursor.ch}'")

        start = cursor.col
        digits = []
        while cursor.ch is not None and cursor.ch in _DIGITS:
            digits.append(cursor.ch)
            self._advance()
        text = "".join(digits)
        if len(text) > 1 and text[0] == "0":
            raise GrammarError(start, "starts with non-positive integer '0'")
        value = int(text)
        if value >= UNBOUNDED:
            raise GrammarError(start, f"number {text} out of range")
        return value

    def _dot(self, next_component: str) -> None:
        cursor = self._cursor
        if cursor.ch is None:
            raise GrammarError(cursor.here(), f"missing {next_component}")
        if cursor.ch != ".":
            raise GrammarError(cursor.col, f"invalid character '{cursor.ch}'")
        self._advance()

    def _identifiers(self, stop: frozenset[str]) -> Iterator[tuple[int, str]]:
        """Yield dot-separated segments with their starting columns."""
        cursor = self._cursor
        while True:
            start = cursor.here()
            chars = []
            while cursor.ch is not None and cursor.ch != "." and cursor.ch not in stop:
                chars.append(cursor.ch)
                self._advance()
            yield start, "".join(chars)
            if cursor.ch != ".":
                return
            self._advance()

    def _pre_release(self) -> tuple[PreReleaseIdentifier, ...]:
        parts = []
        for col, segment in self._identifiers(stop=frozenset("+")):
            if not segment:
                raise GrammarError(col, "pre release identifier empty")
            if not is_pre_release_identifier(segment):
                raise GrammarError(col, f'invalid pre release identifier "{segment}"')
            parts.append(PreReleaseIdentifier.from_string(segment))
        return tuple(parts)

    def _build(self) -> tuple[str, ...]:
        parts = []
        for col, segment in self._identifiers(stop=frozenset()):
            if not segment:
                raise GrammarError(col, "build identifier empty")
            if not is_build_identifier(segment):
                raise GrammarError(col, f'invalid build identifier "{segment}"')
            parts.append(segment)
        return tuple(parts)

    def parse(self) -> Version:
        cursor = self._cursor
        major = self._number("major")
        self._dot("minor")
        minor = self._number("minor")
        self._dot("patch")
        patch = self._number("patch")

        pre_release: tuple[PreReleaseIdentifier, ...] = ()
        build: tuple[str, ...] = ()
        if cursor.ch == "-":
            self._advance()
            pre_release = self._pre_release()
        if cursor.ch == "+":
            self._advance()
            build = self._build()
        if cursor.ch is not None:
            raise GrammarError(cursor.col, f"invalid character '{cursor.ch}'")

        return Version(
            major=major,
            minor=minor,
            patch=patch,
            pre_release=pre_release,
            build_metadata=build,
        )


def parse(src: str | bytes) -> Version:
    """Parse a version string.

    Raises:
        SemverError: on the first lexical or grammar error, with its column.
    """
    version = _VersionParser(src).parse()
    logger.debug("parsed version %r", version)
    return version
