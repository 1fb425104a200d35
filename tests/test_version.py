"""Tests for the Version model and its total order."""

import itertools

import pytest

from semver_ranges.models import (
    UNBOUNDED,
    UNBOUNDED_VERSION,
    PreReleaseIdentifier,
    Version,
    compare_pre_release,
)

V = Version.parse


def test_release_ranks_above_pre_release():
    assert V("1.0.0-alpha") < V("1.0.0")
    assert V("1.0.0-alpha").less_than(V("1.0.0"))
    assert V("1.0.0").greater_than(V("1.0.0-alpha"))


PRECEDENCE = [
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-alpha.beta",
    "1.0.0-beta",
    "1.0.0-beta.2",
    "1.0.0-beta.11",
    "1.0.0-rc.1",
    "1.0.0",
    "1.0.1",
    "1.1.0",
    "2.0.0",
]


@pytest.mark.parametrize("lower, higher", list(zip(PRECEDENCE, PRECEDENCE[1:])))
def test_precedence_chain(lower, higher):
    assert V(lower).compare(V(higher)) == -1
    assert V(higher).compare(V(lower)) == 1


def test_order_is_total():
    versions = [V(s) for s in PRECEDENCE]
    for a, b in itertools.product(versions, repeat=2):
        outcomes = [a < b, a == b, a > b]
        assert outcomes.count(True) == 1


def test_build_metadata_is_ignored_for_ordering():
    a, b = V("1.0.0+build.1"), V("1.0.0+build.2")
    assert a == b
    assert a.equal(b)
    assert hash(a) == hash(b)
    assert not a.same(b)
    assert a.same(V("1.0.0+build.1"))


def test_numeric_identifiers_rank_below_text():
    assert PreReleaseIdentifier(999).compare(PreReleaseIdentifier("a1")) == -1
    assert PreReleaseIdentifier("a1").compare(PreReleaseIdentifier(999)) == 1
    assert PreReleaseIdentifier(2).compare(PreReleaseIdentifier(11)) == -1


def test_missing_identifier_is_lowest():
    short = (PreReleaseIdentifier("alpha"),)
    longer = (PreReleaseIdentifier("alpha"), PreReleaseIdentifier(0))
    assert compare_pre_release(short, longer) == -1
    assert compare_pre_release(longer, short) == 1
    assert compare_pre_release((), longer) == 1
    assert compare_pre_release((), ()) == 0


def test_identifier_accessors():
    num = PreReleaseIdentifier.from_string("12")
    text = PreReleaseIdentifier.from_string("rc")
    assert num.is_numeric and num.number == 12 and num.text is None
    assert not text.is_numeric and text.text == "rc" and text.number is None
    assert PreReleaseIdentifier.from_string("012").value == "012"


def test_identifier_rejects_empty_text():
    with pytest.raises(ValueError):
        PreReleaseIdentifier("")


def test_unbounded_renders_as_x():
    assert str(UNBOUNDED_VERSION) == "x.x.x"
    assert str(Version(1, UNBOUNDED, UNBOUNDED)) == "1.x.x"


def test_version_validates_components():
    with pytest.raises(ValueError):
        Version(-1, 0, 0)
    with pytest.raises(TypeError):
        Version("1", 0, 0)


def test_from_parts_and_to_dict():
    v = Version.from_parts(1, 2, 3, pre_release=["rc", "1"], build_metadata=["sha"])
    assert str(v) == "1.2.3-rc.1+sha"
    assert v.to_dict() == {
        "major": 1,
        "minor": 2,
        "patch": 3,
        "preRelease": ["rc", 1],
        "buildMetadata": ["sha"],
    }
    assert repr(v) == "Version('1.2.3-rc.1+sha')"
