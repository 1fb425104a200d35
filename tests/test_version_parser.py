"""Tests for semver_ranges.parsers.version."""

import pytest

from semver_ranges.errors import GrammarError, LexicalError, SemverError
from semver_ranges.models import UNBOUNDED, PreReleaseIdentifier
from semver_ranges.parsers.version import (
    is_alphanumeric_identifier,
    is_build_identifier,
    is_numeric_identifier,
    parse,
)


def test_full_version():
    v = parse("1.2.4-alpha.0+meta")
    assert (v.major, v.minor, v.patch) == (1, 2, 4)
    assert v.pre_release == (PreReleaseIdentifier("alpha"), PreReleaseIdentifier(0))
    assert v.build_metadata == ("meta",)
    assert str(v) == "1.2.4-alpha.0+meta"


@pytest.mark.parametrize(
    "text",
    [
        "0.0.0",
        "1.2.3",
        "10.20.30",
        "1.0.0-1",
        "1.0.0-alpha-1",
        "1.0.0-xy.7.zz.92",
        "1.0.0+001",
        "1.0.0+20130313144700",
        "1.0.0-beta+exp.sha.5114f85",
    ],
)
def test_valid_versions_round_trip(text):
    assert str(parse(text)) == text


def test_bytes_input():
    assert str(parse(b"1.2.3")) == "1.2.3"


def test_largest_number():
    v = parse(f"{UNBOUNDED - 1}.0.0")
    assert v.major == UNBOUNDED - 1


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "col 1: missing major"),
        ("1", "col 2: missing minor"),
        ("1.2", "col 4: missing patch"),
        ("1.2.", "col 5: missing patch"),
        ("01.2.3", "col 1: starts with non-positive integer '0'"),
        ("1.02.3", "col 3: starts with non-positive integer '0'"),
        ("a.2.3", "col 1: starts with non-positive integer 'a'"),
        ("1.2.é", "col 5: starts with non-positive integer 'é'"),
        ("1..3", "col 3: expected number, got nothing"),
        ("1.2.3x", "col 6: invalid character 'x'"),
        ("1-2.3", "col 2: invalid character '-'"),
        ("1.0.0-alpha..", "col 13: pre release identifier empty"),
        ("1.0.0-", "col 7: pre release identifier empty"),
        ("1.0.0-01", 'col 7: invalid pre release identifier "01"'),
        ("1.0.0-al$", 'col 7: invalid pre release identifier "al$"'),
        ("1.0.0-a", 'col 7: invalid pre release identifier "a"'),
        ("1.1.2+.123", "col 7: build identifier empty"),
        ("1.0.0+a", 'col 7: invalid build identifier "a"'),
        ("1.0.0+ok.b_d", 'col 10: invalid build identifier "b_d"'),
        ("1. 2.3", "col 3: semver clause incomplete"),
        ("1.2.  3", "col 5: semver clause incomplete"),
        ("18446744073709551615.0.0", "col 1: number 18446744073709551615 out of range"),
    ],
)
def test_grammar_errors(text, message):
    with pytest.raises(GrammarError) as exc_info:
        parse(text)
    assert str(exc_info.value) == message


@pytest.mark.parametrize(
    "text, message",
    [
        (" 1.2.3", "col 1: illegal character SPACE"),
        ("1.2.3 ", "col 6: illegal character SPACE"),
        ("1.2.3\x00", "col 6: illegal character NUL"),
        (b"\x00", "col 1: illegal character NUL"),
        ("1.2.3\n", "col 6: illegal character NEWLINE"),
        (b"\xc3\x28", "col 1: illegal UTF-8 encoding"),
    ],
)
def test_lexical_errors(text, message):
    with pytest.raises(LexicalError) as exc_info:
        parse(text)
    assert str(exc_info.value) == message


def test_error_exposes_column_and_message():
    with pytest.raises(SemverError) as exc_info:
        parse("1")
    assert exc_info.value.col == 2
    assert exc_info.value.message == "missing minor"


@pytest.mark.parametrize(
    "text, expected",
    [("0", True), ("7", True), ("42", True), ("01", False), ("", False), ("4a", False)],
)
def test_is_numeric_identifier(text, expected):
    assert is_numeric_identifier(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("alpha", True),
        ("rc-1", True),
        ("0a", True),
        ("a", False),
        ("-", False),
        ("123", False),
        ("a.b", False),
    ],
)
def test_is_alphanumeric_identifier(text, expected):
    assert is_alphanumeric_identifier(text) is expected


@pytest.mark.parametrize(
    "text, expected", [("001", True), ("exp", True), ("", False), ("x", False)]
)
def test_is_build_identifier(text, expected):
    assert is_build_identifier(text) is expected
