"""High-level orchestration for API reference page generation.

This module reads the flat reference markdown, runs it through the class
filter and member sorter, derives the sidebar navigation from the final text,
discovers archived versions, and renders a single themed HTML page. It exposes
:class:`ApiReferenceGenerator`, which consumes a
:class:`~apidoc_pages.config.BuildConfig`.

Example
-------
>>> from pathlib import Path
>>> from apidoc_pages.config import load_build_config
>>> from apidoc_pages.generator import ApiReferenceGenerator
>>> config = load_build_config(Path("config/apidoc.yaml"))  # doctest: +SKIP
>>> ApiReferenceGenerator(config).run()  # doctest: +SKIP
PosixPath('docs/api.html')
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from apidoc_pages.filtering import filter_classes
from apidoc_pages.generator.models import ReferencePage
from apidoc_pages.generator.renderer import HtmlContentRenderer
from apidoc_pages.markdown_parser import parse_document
from apidoc_pages.navigation import NavigationNode, build_navigation
from apidoc_pages.sorter import render_document
from apidoc_pages.source_version import extract_version
from apidoc_pages.versions import VersionEntry, discover_versions

if typ.TYPE_CHECKING:
    from apidoc_pages.config import BuildConfig, FilterPolicy

logger = logging.getLogger(__name__)


class SourceDocumentError(RuntimeError):
    """Raised when the reference markdown cannot be read."""


@dc.dataclass(slots=True)
class TransformResult:
    """Final markdown of a reference build and the navigation derived from it."""

    markdown: str
    navigation: list[NavigationNode]


def transform_markdown(markdown_text: str, policy: FilterPolicy) -> TransformResult:
    """Filter classes, sort members, and build navigation for ``markdown_text``.

    Parameters
    ----------
    markdown_text : str
        Raw reference markdown.
    policy : FilterPolicy
        Class filter applied before member sorting.

    Returns
    -------
    TransformResult
        The reassembled markdown and navigation scanned from that same text.
    """
    document = parse_document(markdown_text)
    kept = filter_classes(document.classes, policy)
    logger.debug(
        "kept %d of %d classes (%s mode)",
        len(kept),
        len(document.classes),
        policy.mode,
    )
    final_markdown = render_document(document, kept)
    return TransformResult(
        markdown=final_markdown, navigation=build_navigation(final_markdown)
    )


class ApiReferenceGenerator:
    """Read reference markdown and emit the themed API reference page."""

    def __init__(
        self,
        config: BuildConfig,
        *,
        templates_dir: Path | None = None,
        output_path: Path | None = None,
    ) -> None:
        """Initialize the generator with configuration and template context.

        Parameters
        ----------
        config : BuildConfig
            Build configuration describing paths, filter policy, and theming.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        output_path : Path, optional
            Override for the HTML output file; defaults to ``config.output``.
        """
        self.config = config
        self.output_path = output_path or config.output
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.renderer = HtmlContentRenderer(config.pygments_style)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("api_page.jinja")
        self.versions: list[VersionEntry] = []

    def run(self) -> Path:
        """Render the reference page and write it to the output path.

        Returns
        -------
        Path
            Path of the written HTML file.

        Raises
        ------
        SourceDocumentError
            Raised when the source markdown cannot be read; nothing is
            written in that case.
        """
        markdown_source = self._read_source()
        result = transform_markdown(markdown_source, self.config.filter)
        self.versions = discover_versions(
            self.config.versions_dir, self.config.artifact_name
        )
        page = self._build_page(result)
        html = self.template.render(page=page)

        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text(html, encoding="utf-8")
        return self.output_path

    def _read_source(self) -> str:
        """Return the reference markdown or raise ``SourceDocumentError``."""
        source = self.config.source
        try:
            return source.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"Could not read reference markdown '{source}': {exc}"
            raise SourceDocumentError(msg) from exc

    def _build_page(self, result: TransformResult) -> ReferencePage:
        """Assemble the template model for the transformed document."""
        project = self.config.project
        version = extract_version(project.version_file, project.version_pattern)
        return ReferencePage(
            project_name=project.name,
            version=version,
            html_title=f"{project.name} v{version} - API Reference",
            navigation=result.navigation,
            versions=self.versions,
            body_html=self.renderer.markdown(result.markdown),
            pygments_css=self.renderer.stylesheet,
            artifact_name=self.config.artifact_name,
        )


__all__ = [
    "ApiReferenceGenerator",
    "SourceDocumentError",
    "TransformResult",
    "transform_markdown",
]
