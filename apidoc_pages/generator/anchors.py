"""Markdown extension that gives class and member headings stable anchors."""

from __future__ import annotations

import re
import typing as typ

from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from markdown.treeprocessors import Treeprocessor

from apidoc_pages.markdown_parser import slugify, unique_slug

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any

ANCHORED_TAGS = frozenset({"h1", "h2"})
UNSPACED_HEADING_PATTERN = re.compile(r"^(#{1,2})(?=[^#\s])")


class HeadingAnchorExtension(Extension):
    """Assign ``id`` attributes to top-level ``h1`` and ``h2`` headings.

    Ids follow :func:`~apidoc_pages.markdown_parser.slugify` and collisions
    receive ``-2``, ``-3`` suffixes in document order, the same rule used by
    :func:`~apidoc_pages.navigation.build_navigation`. The processor runs
    before inline processing so it slugs the raw heading source, exactly as
    the navigation scan sees it.

    Lines such as ``#Color`` are body text in the reference grammar, so they
    are escaped before block parsing and never become headings.
    """

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the heading preprocessor and anchor treeprocessor."""
        md.preprocessors.register(
            UnspacedHeadingPreprocessor(md), "apidoc_unspaced_headings", 15
        )
        md.treeprocessors.register(
            HeadingAnchorTreeprocessor(md), "apidoc_heading_anchors", 25
        )


class UnspacedHeadingPreprocessor(Preprocessor):
    """Escape ``#`` and ``##`` lines that lack a space after the hashes.

    Registered below the fenced code preprocessor, so code blocks are already
    stashed and their comment lines are left alone.
    """

    def run(self, lines: list[str]) -> list[str]:
        return [UNSPACED_HEADING_PATTERN.sub(r"\\\1", line) for line in lines]


class HeadingAnchorTreeprocessor(Treeprocessor):
    """Attach slug ids to the document's structural headings."""

    def run(self, root: Element) -> Element:
        """Set ``id`` on each direct ``h1``/``h2`` child of ``root``."""
        used: set[str] = set()
        for element in root:
            if element.tag not in ANCHORED_TAGS:
                continue
            title = (element.text or "").strip()
            element.set("id", unique_slug(slugify(title), used))
        return root


__all__ = [
    "HeadingAnchorExtension",
    "HeadingAnchorTreeprocessor",
    "UnspacedHeadingPreprocessor",
]
