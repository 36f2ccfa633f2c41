"""Reorder class members so public entries precede internal ones.

Members whose names start with the internal marker are moved behind their
public siblings and announced by a warning section. The partition is stable:
each group keeps the order it had in the source document. The sorter emits
text rather than blocks so the navigation builder reads exactly what the
renderer will see.
"""

from __future__ import annotations

import typing as typ

from ._constants import INTERNAL_HEADING, INTERNAL_WARNING

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .markdown_parser import ClassBlock, MemberBlock, ParsedDocument


def partition_members(
    members: cabc.Iterable[MemberBlock],
) -> tuple[list[MemberBlock], list[MemberBlock]]:
    """Split ``members`` into public and internal groups, preserving order."""
    public: list[MemberBlock] = []
    internal: list[MemberBlock] = []
    for member in members:
        (internal if member.is_internal else public).append(member)
    return public, internal


def warning_section() -> list[str]:
    """Return the divider, heading, and warning prose placed before internals."""
    return [
        "",
        "---",
        "",
        f"## {INTERNAL_HEADING}",
        "",
        INTERNAL_WARNING,
        "",
        "---",
        "",
    ]


def sort_class(block: ClassBlock) -> list[str]:
    """Return the lines of ``block`` with internal members moved to the end."""
    lines = [f"# {block.name}", *block.preceding_lines]
    public, internal = partition_members(block.members)
    for member in public:
        lines.extend(member.lines())
    if internal:
        lines.extend(warning_section())
        for member in internal:
            lines.extend(member.lines())
    return lines


def render_document(
    document: ParsedDocument, classes: cabc.Iterable[ClassBlock] | None = None
) -> str:
    """Reassemble the preamble and sorted classes into one markdown text.

    Parameters
    ----------
    document : ParsedDocument
        Parsed source whose preamble is emitted first.
    classes : Iterable[ClassBlock], optional
        Class blocks to emit, typically the output of the class filter.
        Defaults to every class in ``document``.

    Returns
    -------
    str
        Newline-joined markdown ready for navigation extraction and
        rendering.
    """
    blocks = document.classes if classes is None else classes
    lines = list(document.preamble)
    for block in blocks:
        lines.extend(sort_class(block))
    return "\n".join(lines)


__all__ = ["partition_members", "render_document", "sort_class", "warning_section"]
