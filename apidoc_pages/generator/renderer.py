"""Render reference markdown into HTML with highlighted code blocks."""

from __future__ import annotations

import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from .anchors import HeadingAnchorExtension

CODEHILITE_CLASS = "codehilite"
LANGUAGE_PREFIX = "language-"


class LanguageTaggedFormatter(HtmlFormatter):
    """Pygments HTML formatter that records the block language on its wrapper.

    Python-Markdown's codehilite extension hands custom formatters a
    ``lang_str`` option such as ``"language-lua"``. The language is exposed as
    a ``data-language`` attribute on the ``div.codehilite`` wrapper so the
    stylesheet can label each block.
    """

    def __init__(self, lang_str: str = "", **options: typ.Any) -> None:
        super().__init__(**options)
        self.language = lang_str.removeprefix(LANGUAGE_PREFIX) or "text"

    def _wrap_div(
        self, inner: typ.Iterator[tuple[int, str]]
    ) -> typ.Iterator[tuple[int, str]]:
        language = escape(self.language, quote=True)
        yield 0, f'<div class="{self.cssclass}" data-language="{language}">'
        yield from inner
        yield 0, "</div>\n"


class HtmlContentRenderer:
    """Render reference markdown with anchored headings and Pygments styling."""

    def __init__(self, pygments_style: str = "github-dark") -> None:
        """Initialize a renderer with the Pygments style used for code blocks.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults
            to ``"github-dark"``.
        """
        self.pygments_style = pygments_style

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        formatter = HtmlFormatter(style=self.pygments_style, cssclass=CODEHILITE_CLASS)
        return formatter.get_style_defs(f".{CODEHILITE_CLASS}")

    def markdown(self, text: str) -> str:
        """Render markdown into HTML, anchoring class and member headings."""
        if not text.strip():
            return ""
        md = Markdown(
            extensions=[
                "fenced_code",
                "codehilite",
                "tables",
                "sane_lists",
                HeadingAnchorExtension(),
            ],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": CODEHILITE_CLASS,
                    "lang_prefix": LANGUAGE_PREFIX,
                    "pygments_style": self.pygments_style,
                    "pygments_formatter": LanguageTaggedFormatter,
                }
            },
        )
        return md.convert(text)


__all__ = ["HtmlContentRenderer", "LanguageTaggedFormatter"]
