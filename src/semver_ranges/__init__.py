"""semver-ranges core package.

Semantic Versioning 2.0.0 parsing, a version range constraint language and
the constraint algebra used to check and compare ranges. The same entry points
back the ``semver-ranges`` command line.
"""

from .core import (
    evaluate_policy,
    filter_satisfying,
    max_satisfying,
    min_satisfying,
    must_parse_constraint,
    must_parse_version,
    satisfies,
)
from .errors import ConfigError, GrammarError, LexicalError, SemanticError, SemverError
from .models import (
    UNBOUNDED,
    And,
    Constraint,
    Not,
    Or,
    PreReleaseIdentifier,
    Range,
    Version,
)
from .parsers import parse_constraint, parse_version
from .sort import ascending, descending, join_versions, sort_ascending, sort_descending

__all__ = [
    "And",
    "ConfigError",
    "Constraint",
    "GrammarError",
    "LexicalError",
    "Not",
    "Or",
    "PreReleaseIdentifier",
    "Range",
    "SemanticError",
    "SemverError",
    "UNBOUNDED",
    "Version",
    "ascending",
    "descending",
    "evaluate_policy",
    "filter_satisfying",
    "join_versions",
    "max_satisfying",
    "min_satisfying",
    "must_parse_constraint",
    "must_parse_version",
    "parse_constraint",
    "parse_version",
    "satisfies",
    "sort_ascending",
    "sort_descending",
]
