"""Semantic version model and its total order."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable, Sequence

# Reserved "no upper limit" value for a numeric slot. Rendered as ``x``.
UNBOUNDED = (1 << 64) - 1


def _render_number(value: int) -> str:
    if value == UNBOUNDED:
        return "x"
    return str(value)


def _compare_numbers(a: int, b: int) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def _is_canonical_number(text: str) -> bool:
    if not text or not text.isascii() or not text.isdigit():
        return False
    if len(text) > 1 and text[0] == "0":
        return False
    return int(text) <= UNBOUNDED


@dataclass(frozen=True, slots=True)
class PreReleaseIdentifier:
    """One dot-separated pre-release segment, either numeric or textual."""

    value: int | str

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, str)):
            raise TypeError("Pre-release identifier must be an int or a str")
        if isinstance(self.value, int) and not 0 <= self.value <= UNBOUNDED:
            raise ValueError("Numeric pre-release identifier out of range")
        if isinstance(self.value, str) and not self.value:
            raise ValueError("Textual pre-release identifier must be non-empty")

    @classmethod
    def from_string(cls, text: str) -> PreReleaseIdentifier:
        """Numeric when ``text`` is a canonical unsigned integer, textual otherwise."""
        if _is_canonical_number(text):
            return cls(int(text))
        return cls(text)

    @property
    def is_numeric(self) -> bool:
        return isinstance(self.value, int)

    @property
    def number(self) -> int | None:
        return self.value if isinstance(self.value, int) else None

    @property
    def text(self) -> str | None:
        return self.value if isinstance(self.value, str) else None

    def compare(self, other: PreReleaseIdentifier) -> int:
        """Numbers compare numerically and always sort below text."""
        a, b = self.value, other.value
        if isinstance(a, int) and isinstance(b, int):
            return _compare_numbers(a, b)
        if isinstance(a, int):
            return -1
        if isinstance(b, int):
            return 1
        if a == b:
            return 0
        return -1 if a < b else 1

    def __str__(self) -> str:
        return str(self.value)


def compare_pre_release(
    a: Sequence[PreReleaseIdentifier], b: Sequence[PreReleaseIdentifier]
) -> int:
    """Order two pre-release lists; an empty list is a release and ranks highest."""
    if not a and not b:
        return 0
    if not a:
        return 1
    if not b:
        return -1

    for index in range(max(len(a), len(b))):
        if index >= len(a):
            return -1
        if index >= len(b):
            return 1
        d = a[index].compare(b[index])
        if d != 0:
            return d
    return 0


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """A Semantic Versioning 2.0.0 version.

    Equality, ordering and hashing ignore build metadata; use ``same`` for a
    structural comparison that includes it.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    pre_release: tuple[PreReleaseIdentifier, ...] = ()
    build_metadata: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int")
            if not 0 <= value <= UNBOUNDED:
                raise ValueError(f"{name} must fit in 64 bits")
        # Accept any iterable, store tuples.
        object.__setattr__(self, "pre_release", tuple(self.pre_release))
        object.__setattr__(self, "build_metadata", tuple(self.build_metadata))
        if any(not isinstance(p, PreReleaseIdentifier) for p in self.pre_release):
            raise TypeError("pre_release must contain PreReleaseIdentifier items")
        if any(not part for part in self.build_metadata):
            raise ValueError("Build metadata identifiers must be non-empty strings")

    @classmethod
    def parse(cls, text: str | bytes) -> Version:
        from ..parsers.version import parse

        return parse(text)

    def compare(self, other: Version) -> int:
        """Return -1, 0 or 1 as this version sorts before, with or after ``other``."""
        for a, b in (
            (self.major, other.major),
            (self.minor, other.minor),
            (self.patch, other.patch),
        ):
            d = _compare_numbers(a, b)
            if d != 0:
                return d
        return compare_pre_release(self.pre_release, other.pre_release)

    def equal(self, other: Version) -> bool:
        return self.compare(other) == 0

    def less_than(self, other: Version) -> bool:
        return self.compare(other) < 0

    def greater_than(self, other: Version) -> bool:
        return self.compare(other) > 0

    def same(self, other: Version) -> bool:
        return (
            self.major == other.major
            and self.minor == other.minor
            and self.patch == other.patch
            and self.pre_release == other.pre_release
            and self.build_metadata == other.build_metadata
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.pre_release))

    def __str__(self) -> str:
        s = ".".join(_render_number(n) for n in (self.major, self.minor, self.patch))
        if self.pre_release:
            s += "-" + ".".join(str(p) for p in self.pre_release)
        if self.build_metadata:
            s += "+" + ".".join(self.build_metadata)
        return s

    def __repr__(self) -> str:
        return f"Version({str(self)!r})"

    def to_dict(self) -> dict[str, object]:
        return {
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "preRelease": [p.value for p in self.pre_release],
            "buildMetadata": list(self.build_metadata),
        }

    @classmethod
    def from_parts(
        cls,
        major: int,
        minor: int = 0,
        patch: int = 0,
        pre_release: Iterable[str] = (),
        build_metadata: Iterable[str] = (),
    ) -> Version:
        return cls(
            major=major,
            minor=minor,
            patch=patch,
            pre_release=tuple(PreReleaseIdentifier.from_string(p) for p in pre_release),
            build_metadata=tuple(build_metadata),
        )


ZERO = Version()
UNBOUNDED_VERSION = Version(UNBOUNDED, UNBOUNDED, UNBOUNDED)
