"""Character cursor shared by the version parser and the constraint scanner.

The cursor walks UTF-8 input one character at a time and tracks the 1-based
column of the current character. At end of input ``ch`` is None and ``col``
stays on the last character.
"""

from __future__ import annotations

from ..errors import LexicalError


def _utf8_width(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _decode_char(src: bytes, offset: int) -> tuple[str | None, int]:
    width = _utf8_width(src[offset])
    if width == 1:
        return chr(src[offset]), 1
    if width:
        try:
            return src[offset : offset + width].decode("utf-8"), width
        except UnicodeDecodeError:
            pass
    return None, 1


def to_bytes(src: str | bytes) -> bytes:
    if isinstance(src, str):
        # Lone surrogates survive encoding and are rejected while decoding.
        return src.encode("utf-8", errors="surrogatepass")
    return bytes(src)


def describe_char(ch: str) -> str:
    """Render a character as ``U+0062 'b'`` (code point only when unprintable)."""
    code = f"U+{ord(ch):04X}"
    if ch.isprintable():
        return f"{code} '{ch}'"
    return code


class Cursor:
    """Read-ahead of one character over a byte buffer."""

    def __init__(self, src: str | bytes) -> None:
        self._src = to_bytes(src)
        self._offset = 0
        self._width = 0
        self.col = 0
        self.ch: str | None = None
        self.advance()

    @property
    def at_end(self) -> bool:
        return self.ch is None

    def here(self) -> int:
        """Column of the current character, or one past the end of input."""
        return self.col if self.ch is not None else self.col + 1

    def advance(self) -> None:
        self._offset += self._width
        if self._offset >= len(self._src):
            self.ch = None
            self._width = 0
            return

        self.col += 1
        ch, self._width = _decode_char(self._src, self._offset)
        if ch is None:
            raise LexicalError(self.col, "illegal UTF-8 encoding")
        if ch == "\x00":
            raise LexicalError(self.col, "illegal character NUL")
        if ch == "\n":
            raise LexicalError(self.col, "illegal character NEWLINE")
        self.ch = ch
