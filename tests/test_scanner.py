"""Tests for semver_ranges.parsers.scanner."""

import pytest

from semver_ranges.errors import GrammarError, LexicalError
from semver_ranges.parsers.scanner import TokenKind, tokenize


def _kinds(src):
    return [t.kind for t in tokenize(src)]


def test_comparison_tokens_and_positions():
    tokens = tokenize(">=1.2.3")
    assert [t.kind for t in tokens] == [
        TokenKind.GREATER_EQUAL,
        TokenKind.NUMBER,
        TokenKind.DOT,
        TokenKind.NUMBER,
        TokenKind.DOT,
        TokenKind.NUMBER,
        TokenKind.EOF,
    ]
    assert [t.pos for t in tokens] == [1, 3, 4, 5, 6, 7, 7]
    assert [t.value for t in tokens if t.kind is TokenKind.NUMBER] == [1, 2, 3]


@pytest.mark.parametrize(
    "src, kind",
    [
        ("=", TokenKind.EQUAL),
        ("!=", TokenKind.NOT_EQUAL),
        (">", TokenKind.GREATER),
        (">=", TokenKind.GREATER_EQUAL),
        ("<", TokenKind.LESS),
        ("<=", TokenKind.LESS_EQUAL),
        ("~", TokenKind.TILDE),
        ("^", TokenKind.CARET),
        (".", TokenKind.DOT),
        ("-", TokenKind.HYPHEN),
        ("x", TokenKind.WILDCARD),
        ("X", TokenKind.WILDCARD),
        ("*", TokenKind.WILDCARD),
        ("||", TokenKind.OR),
        ("&&", TokenKind.AND),
        (",", TokenKind.AND),
    ],
)
def test_single_token(src, kind):
    assert _kinds(src) == [kind, TokenKind.EOF]


def test_space_runs_collapse():
    assert _kinds("1  ||   2") == [
        TokenKind.NUMBER,
        TokenKind.SPACE,
        TokenKind.OR,
        TokenKind.SPACE,
        TokenKind.NUMBER,
        TokenKind.EOF,
    ]


def test_numbers():
    tokens = tokenize("0 123")
    assert tokens[0].value == 0
    assert tokens[2].value == 123


def test_empty_input_is_just_eof():
    assert _kinds("") == [TokenKind.EOF]


@pytest.mark.parametrize(
    "src, message",
    [
        ("|b", "col 2: unexpected character U+0062 'b'"),
        ("!", "col 1: unexpected character U+0021 '!'"),
        ("!>", "col 2: unexpected character U+003E '>'"),
        ("&", "col 1: unexpected character U+0026 '&'"),
        ("?", "col 1: unexpected character U+003F '?'"),
        ("= \\n", "col 4: unexpected character U+006E 'n'"),
        ("\t", "col 1: unexpected character U+0009"),
        ("007", "col 2: unexpected character U+0030 '0'"),
        ("\x00", "col 1: illegal character NUL"),
        ("1\n", "col 2: illegal character NEWLINE"),
        (b"\xc3\x28", "col 1: illegal UTF-8 encoding"),
    ],
)
def test_lexical_errors(src, message):
    with pytest.raises(LexicalError) as exc_info:
        tokenize(src)
    assert str(exc_info.value) == message


def test_number_out_of_range():
    with pytest.raises(GrammarError, match="col 3: number 99999999999999999999 out of range"):
        tokenize(">=99999999999999999999")


def test_multibyte_characters_count_as_one_column():
    with pytest.raises(LexicalError) as exc_info:
        tokenize("é?")
    assert exc_info.value.col == 2
