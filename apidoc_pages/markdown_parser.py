r"""Parse a flat API reference document into class and member blocks.

The reference markdown uses exactly two structural heading levels: ``#`` for
a documented class and ``##`` for one of its members. Everything else is
opaque body text that is carried through verbatim. Content that appears
before the first class heading is kept as a preamble so it survives the
round trip through filtering and sorting.

Example
-------
>>> from apidoc_pages.markdown_parser import parse_document
>>> document = parse_document("# Color\nRGBA colour.\n## r\nRed channel.")
>>> document.classes[0].name
'Color'
>>> [member.name for member in document.classes[0].members]
['r']
"""

from __future__ import annotations

import dataclasses as dc
import re

from ._constants import INTERNAL_PREFIX

CLASS_PATTERN = re.compile(r"^# (.+)$")
MEMBER_PATTERN = re.compile(r"^## (.+)$")
SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


@dc.dataclass(slots=True)
class MemberBlock:
    """Second-level heading and the lines that belong to it.

    Attributes
    ----------
    name : str
        Heading text without the ``## `` marker.
    body : list[str]
        Lines following the heading up to the next heading of either level.
    """

    name: str
    body: list[str] = dc.field(default_factory=list)

    @property
    def is_internal(self) -> bool:
        """Return ``True`` when the member name carries the internal marker."""
        return is_internal_name(self.name)

    def lines(self) -> list[str]:
        """Return the heading line followed by the body."""
        return [f"## {self.name}", *self.body]


@dc.dataclass(slots=True)
class ClassBlock:
    """Top-level heading section holding the class description and members.

    Attributes
    ----------
    name : str
        Heading text without the ``# `` marker.
    preceding_lines : list[str]
        Class description lines between the heading and the first member.
    members : list[MemberBlock]
        Member sections in document order.
    """

    name: str
    preceding_lines: list[str] = dc.field(default_factory=list)
    members: list[MemberBlock] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class ParsedDocument:
    """A reference document split into its preamble and class blocks."""

    preamble: list[str]
    classes: list[ClassBlock]


def is_internal_name(name: str) -> bool:
    """Return whether ``name`` denotes an internal member."""
    return name.startswith(INTERNAL_PREFIX)


def match_class_heading(line: str) -> str | None:
    """Return the stripped class name when ``line`` is a ``#`` heading."""
    match = CLASS_PATTERN.match(line)
    return match.group(1).strip() if match else None


def match_member_heading(line: str) -> str | None:
    """Return the stripped member name when ``line`` is a ``##`` heading."""
    match = MEMBER_PATTERN.match(line)
    return match.group(1).strip() if match else None


def split_lines(text: str) -> list[str]:
    """Split ``text`` on newlines, keeping a trailing empty line if present.

    Windows line endings are normalised first so no line keeps a stray
    carriage return.
    """
    return text.replace("\r\n", "\n").split("\n")


def slugify(title: str) -> str:
    """Convert a heading into its anchor id.

    The title is lowercased and every maximal run of characters outside
    ``[a-z0-9]`` becomes a single hyphen, so ``"My Class!! Name"`` and
    ``"my-class----name"`` both yield ``"my-class-name"``.
    """
    return SLUG_PATTERN.sub("-", title.lower())


def unique_slug(base: str, used: set[str]) -> str:
    """Generate a unique slug, appending numeric suffixes when needed."""
    candidate = base
    suffix = 2
    while candidate in used:
        candidate = f"{base}-{suffix}"
        suffix += 1
    used.add(candidate)
    return candidate


def parse_document(markdown_text: str) -> ParsedDocument:
    """Split markdown into a preamble and ordered ``ClassBlock`` objects.

    Parameters
    ----------
    markdown_text : str
        Raw reference markdown using ``#`` class headings and ``##`` member
        headings.

    Returns
    -------
    ParsedDocument
        The lines preceding the first class heading and every class block in
        document order. Body lines are preserved verbatim; headings without a
        space after the hashes are treated as body text.
    """
    preamble: list[str] = []
    classes: list[ClassBlock] = []
    current_class: ClassBlock | None = None
    current_member: MemberBlock | None = None

    for line in split_lines(markdown_text):
        class_name = match_class_heading(line)
        if class_name is not None:
            current_class = ClassBlock(name=class_name)
            current_member = None
            classes.append(current_class)
            continue

        if current_class is None:
            preamble.append(line)
            continue

        member_name = match_member_heading(line)
        if member_name is not None:
            current_member = MemberBlock(name=member_name)
            current_class.members.append(current_member)
        elif current_member is not None:
            current_member.body.append(line)
        else:
            current_class.preceding_lines.append(line)

    return ParsedDocument(preamble=preamble, classes=classes)


__all__ = [
    "CLASS_PATTERN",
    "MEMBER_PATTERN",
    "ClassBlock",
    "MemberBlock",
    "ParsedDocument",
    "is_internal_name",
    "match_class_heading",
    "match_member_heading",
    "parse_document",
    "slugify",
    "split_lines",
    "unique_slug",
]
