"""Tokenizer for the version range constraint language."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from collections.abc import Iterator

from ..errors import GrammarError, LexicalError
from ..models.version import UNBOUNDED
from .cursor import Cursor, describe_char


class TokenKind(enum.Enum):
    ILLEGAL = "ILLEGAL"
    EOF = "EOF"
    SPACE = "SPACE"

    NUMBER = "NUMBER"

    EQUAL = "="
    NOT_EQUAL = "!="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    TILDE = "~"
    CARET = "^"

    DOT = "."
    HYPHEN = "-"
    WILDCARD = "x"
    OR = "||"
    AND = "&&"


OPERATORS = frozenset(
    {
        TokenKind.EQUAL,
        TokenKind.NOT_EQUAL,
        TokenKind.GREATER,
        TokenKind.GREATER_EQUAL,
        TokenKind.LESS,
        TokenKind.LESS_EQUAL,
        TokenKind.TILDE,
        TokenKind.CARET,
    }
)

_SINGLE = {
    "=": TokenKind.EQUAL,
    "~": TokenKind.TILDE,
    "^": TokenKind.CARET,
    ".": TokenKind.DOT,
    "-": TokenKind.HYPHEN,
    "x": TokenKind.WILDCARD,
    "X": TokenKind.WILDCARD,
    "*": TokenKind.WILDCARD,
    ",": TokenKind.AND,
}

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True, slots=True)
class Token:
    pos: int
    kind: TokenKind
    value: int = 0


class Scanner:
    """Turn constraint text into tokens.

    Iterating yields tokens up to and including EOF. The first lexical error
    is raised immediately; scanning never resumes after it.
    """

    def __init__(self, src: str | bytes) -> None:
        self._cursor = Cursor(src)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.scan()
            yield token
            if token.kind is TokenKind.EOF:
                return

    def _unexpected(self, offending: str, pos: int) -> LexicalError:
        # Report the character that follows when there is one.
        cursor = self._cursor
        if cursor.ch is not None:
            return LexicalError(cursor.col, f"unexpected character {describe_char(cursor.ch)}")
        return LexicalError(pos, f"unexpected character {describe_char(offending)}")

    def _doubled(self, ch: str, pos: int, kind: TokenKind) -> Token:
        if self._cursor.ch != ch:
            raise self._unexpected(ch, pos)
        self._cursor.advance()
        return Token(pos, kind)

    def _followed_by_equal(self, pos: int, plain: TokenKind, with_equal: TokenKind) -> Token:
        if self._cursor.ch == "=":
            self._cursor.advance()
            return Token(pos, with_equal)
        return Token(pos, plain)

    def _number(self, first: str, pos: int) -> Token:
        cursor = self._cursor
        if first == "0":
            if cursor.ch is not None and cursor.ch in _DIGITS:
                raise self._unexpected(first, pos)
            return Token(pos, TokenKind.NUMBER, 0)

        digits = [first]
        while cursor.ch is not None and cursor.ch in _DIGITS:
            digits.append(cursor.ch)
            cursor.advance()
        text = "".join(digits)
        value = int(text)
        if value >= UNBOUNDED:
            raise GrammarError(pos, f"number {text} out of range")
        return Token(pos, TokenKind.NUMBER, value)

    def scan(self) -> Token:
        cursor = self._cursor
        pos = cursor.col
        ch = cursor.ch
        if ch is None:
            return Token(pos, TokenKind.EOF)
        cursor.advance()

        if ch == " ":
            while cursor.ch == " ":
                cursor.advance()
            return Token(pos, TokenKind.SPACE)
        if ch in _SINGLE:
            return Token(pos, _SINGLE[ch])
        if ch == "!":
            return self._doubled("=", pos, TokenKind.NOT_EQUAL)
        if ch == ">":
            return self._followed_by_equal(pos, TokenKind.GREATER, TokenKind.GREATER_EQUAL)
        if ch == "<":
            return self._followed_by_equal(pos, TokenKind.LESS, TokenKind.LESS_EQUAL)
        if ch == "|":
            return self._doubled("|", pos, TokenKind.OR)
        if ch == "&":
            return self._doubled("&", pos, TokenKind.AND)
        if ch in _DIGITS:
            return self._number(ch, pos)

        raise self._unexpected(ch, pos)


def tokenize(src: str | bytes) -> list[Token]:
    """Return every token of ``src``, ending with EOF."""
    return list(Scanner(src))
