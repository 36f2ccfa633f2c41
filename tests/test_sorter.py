"""Unit tests for public-before-internal member ordering."""

from __future__ import annotations

from apidoc_pages._constants import INTERNAL_HEADING, INTERNAL_WARNING
from apidoc_pages.markdown_parser import match_member_heading, parse_document
from apidoc_pages.sorter import partition_members, render_document, sort_class

WARNING_HEADING = f"## {INTERNAL_HEADING}"


def _member_headings(lines: list[str]) -> list[str]:
    return [name for line in lines if (name := match_member_heading(line))]


def test_partition_is_stable() -> None:
    """Each group keeps its relative order from the source document."""
    block = parse_document("# C\n## pub1\n## _int1\n## pub2\n## _int2").classes[0]
    public, internal = partition_members(block.members)
    assert [m.name for m in public] == ["pub1", "pub2"]
    assert [m.name for m in internal] == ["_int1", "_int2"]


def test_sort_class_moves_internals_behind_warning() -> None:
    """One warning section is inserted immediately before the first internal."""
    block = parse_document(
        "# C\nAbout C.\n## pub1\np1\n## _int1\ni1\n## pub2\np2\n## _int2\ni2"
    ).classes[0]
    lines = sort_class(block)
    assert _member_headings(lines) == [
        "pub1",
        "pub2",
        INTERNAL_HEADING,
        "_int1",
        "_int2",
    ]
    assert lines.count(WARNING_HEADING) == 1
    assert INTERNAL_WARNING in lines
    assert lines[:2] == ["# C", "About C."], "class description must stay on top"
    warning_index = lines.index(WARNING_HEADING)
    internal_index = lines.index("## _int1")
    between = lines[warning_index + 1 : internal_index]
    assert "---" in between, "expected a divider closing the warning section"
    assert all(not line.startswith("## ") for line in between)
    assert lines[internal_index + 1] == "i1", "member bodies travel with headings"


def test_no_internal_members_means_no_warning() -> None:
    """Classes without internal members are emitted unchanged."""
    source = "# C\n## pub1\nbody one\n## pub2\nbody two"
    lines = sort_class(parse_document(source).classes[0])
    assert _member_headings(lines) == ["pub1", "pub2"]
    assert WARNING_HEADING not in lines
    assert "\n".join(lines) == source


def test_render_document_keeps_preamble_and_filtered_classes() -> None:
    """Only the provided classes are emitted after the preamble."""
    document = parse_document("Intro\n# A\n## _x\n# B\n## y")
    text = render_document(document, [document.classes[1]])
    assert text == "Intro\n# B\n## y"
    full = render_document(document)
    assert full.startswith("Intro\n# A\n")
    assert WARNING_HEADING in full
