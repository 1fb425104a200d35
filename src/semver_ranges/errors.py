"""Error types raised while parsing versions and constraints.

Every parse failure carries the 1-based column of the character that
triggered it and renders as ``"col N: message"``.
"""

from __future__ import annotations


class SemverError(ValueError):
    """Base error for version and constraint parsing failures."""

    def __init__(self, col: int, message: str) -> None:
        super().__init__(f"col {col}: {message}")
        self.col = col
        self.message = message


class LexicalError(SemverError):
    """Raised for NUL bytes, invalid UTF-8, stray newlines or spaces and unknown symbols."""


class GrammarError(SemverError):
    """Raised when the input is made of valid characters in an invalid order."""


class SemanticError(SemverError):
    """Raised when clauses combined with AND cannot describe a single range."""


class ConfigError(RuntimeError):
    """Raised when the policy configuration cannot be loaded or is invalid."""
