r"""Derive the sidebar navigation tree from the final reference text.

Navigation is built from a fresh scan of the transformed markdown rather than
from the parser's blocks, so every entry corresponds to a heading that the
renderer will actually emit. Anchor ids use the shared slug rule and are made
unique per document with numeric suffixes, matching
:class:`~apidoc_pages.generator.anchors.HeadingAnchorExtension`.

Example
-------
>>> from apidoc_pages.navigation import build_navigation
>>> nodes = build_navigation("# Color\n## r\n## g")
>>> [(member.name, member.id) for member in nodes[0].members]
[('r', 'r'), ('g', 'g')]
"""

from __future__ import annotations

import dataclasses as dc

from .markdown_parser import (
    match_class_heading,
    match_member_heading,
    slugify,
    split_lines,
    unique_slug,
)


@dc.dataclass(slots=True)
class NavigationMember:
    """A member link under a class entry."""

    name: str
    id: str


@dc.dataclass(slots=True)
class NavigationNode:
    """A class entry in the sidebar with its member links.

    Attributes
    ----------
    name : str
        Class heading text.
    id : str
        Anchor id of the class heading.
    members : list[NavigationMember]
        Member links in document order.
    """

    name: str
    id: str
    members: list[NavigationMember] = dc.field(default_factory=list)

    def heading_names(self) -> list[str]:
        """Return the class name followed by every member name."""
        return [self.name, *(member.name for member in self.members)]


def build_navigation(markdown_text: str) -> list[NavigationNode]:
    """Scan ``markdown_text`` for class and member headings.

    Parameters
    ----------
    markdown_text : str
        Final reference markdown, after filtering and member sorting.

    Returns
    -------
    list[NavigationNode]
        One node per ``#`` heading in document order. Member headings seen
        before the first class heading have no parent and are skipped.
    """
    nodes: list[NavigationNode] = []
    used: set[str] = set()
    current: NavigationNode | None = None
    for line in split_lines(markdown_text):
        class_name = match_class_heading(line)
        if class_name is not None:
            current = NavigationNode(
                name=class_name, id=unique_slug(slugify(class_name), used)
            )
            nodes.append(current)
            continue
        member_name = match_member_heading(line)
        if member_name is None:
            continue
        # Orphan headings still claim their anchor in the rendered page.
        member_id = unique_slug(slugify(member_name), used)
        if current is not None:
            current.members.append(NavigationMember(name=member_name, id=member_id))
    return nodes


__all__ = ["NavigationMember", "NavigationNode", "build_navigation"]
