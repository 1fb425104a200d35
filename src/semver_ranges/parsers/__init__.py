"""Hand-written parsers for version strings and range constraints."""

from __future__ import annotations

from .constraint import parse as parse_constraint
from .scanner import Scanner, Token, TokenKind, tokenize
from .version import parse as parse_version

__all__ = [
    "Scanner",
    "Token",
    "TokenKind",
    "parse_constraint",
    "parse_version",
    "tokenize",
]
