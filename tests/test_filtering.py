"""Unit tests for whitelist and blacklist class filtering."""

from __future__ import annotations

import pytest

from apidoc_pages.config import ConfigError, FilterPolicy
from apidoc_pages.filtering import filter_classes
from apidoc_pages.markdown_parser import ClassBlock, parse_document

DOCUMENT = "# A\n## a1\n## _a2\n# B\nAbout B.\n## b1\n# C\n## c1"


@pytest.fixture
def classes() -> list[ClassBlock]:
    """Return the parsed ``A, B, C`` class blocks."""
    return parse_document(DOCUMENT).classes


def test_whitelist_keeps_included_classes(classes: list[ClassBlock]) -> None:
    """Only classes in ``include`` survive, in their original order."""
    policy = FilterPolicy(mode="whitelist", include=frozenset({"B", "A"}))
    kept = filter_classes(classes, policy)
    assert [block.name for block in kept] == ["A", "B"]
    assert [member.name for member in kept[0].members] == ["a1", "_a2"], (
        "members of a kept class must stay intact"
    )
    assert kept[1].preceding_lines == ["About B."]


def test_blacklist_drops_excluded_classes(classes: list[ClassBlock]) -> None:
    """Classes named in ``exclude`` are dropped with their members."""
    policy = FilterPolicy(mode="blacklist", exclude=frozenset({"C"}))
    kept = filter_classes(classes, policy)
    assert [block.name for block in kept] == ["A", "B"]


def test_inactive_set_is_ignored(classes: list[ClassBlock]) -> None:
    """The set not consulted by the active mode has no effect."""
    whitelist = FilterPolicy(
        mode="whitelist", include=frozenset({"A"}), exclude=frozenset({"A"})
    )
    blacklist = FilterPolicy(
        mode="blacklist", include=frozenset({"A"}), exclude=frozenset()
    )
    assert [block.name for block in filter_classes(classes, whitelist)] == ["A"]
    assert [block.name for block in filter_classes(classes, blacklist)] == [
        "A",
        "B",
        "C",
    ]


@pytest.mark.parametrize(
    "policy",
    [
        FilterPolicy(mode="whitelist", include=frozenset({"A", "C"})),
        FilterPolicy(mode="blacklist", exclude=frozenset({"B"})),
        FilterPolicy(mode="whitelist"),
    ],
)
def test_filter_is_idempotent(classes: list[ClassBlock], policy: FilterPolicy) -> None:
    """Filtering a filtered sequence with the same policy changes nothing."""
    once = filter_classes(classes, policy)
    twice = filter_classes(once, policy)
    assert twice == once


def test_unknown_mode_is_rejected() -> None:
    """Policies only accept the two recognised modes."""
    with pytest.raises(ConfigError, match="Unknown filter mode"):
        FilterPolicy(mode="greylist")  # type: ignore[arg-type]
