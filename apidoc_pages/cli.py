"""Cyclopts CLI entrypoint for building the API reference page.

The ``apidoc`` console script defined here renders the filtered, sorted, and
navigable ``api.html`` from the flat reference markdown, and stamps the
landing page with the current project version. Typical usage involves running
``apidoc generate`` locally or in CI after regenerating ``doc.md``, followed by
``apidoc stamp`` when a release bumps the version.

Examples
--------
Generate the reference page for the default configuration:

>>> from apidoc_pages.cli import main
>>> main()  # doctest: +SKIP

Write the reference page somewhere else:

>>> from apidoc_pages.cli import app
>>> app(["generate", "--output", "dist/api.html"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import UNKNOWN_VERSION
from .config import load_build_config
from .generator import ApiReferenceGenerator
from .source_version import extract_version, stamp_index_version

DEFAULT_CONFIG = Path("config/apidoc.yaml")

app = App(name="apidoc", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Generate the API reference HTML page from markdown.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to build config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the output HTML file", env_var="INPUT_OUTPUT"),
    ] = None,
) -> None:
    """Generate the API reference page for the requested build configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``apidoc.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output : Path or None, optional
        Override for the output HTML path.

    Returns
    -------
    None
        Writes the rendered page and reports the archived versions found.

    Raises
    ------
    SourceDocumentError
        If the reference markdown cannot be read. No output is written.
    """
    build_config = load_build_config(config)
    generator = ApiReferenceGenerator(build_config, output_path=output)
    written = generator.run()
    summary = f"found {len(generator.versions)} archived version(s)"
    if generator.versions:
        summary += ": " + ", ".join(entry.name for entry in generator.versions)
    print(summary)
    print(f"wrote {_format_path(written)}")


@app.command(help="Stamp the landing page with the current project version.")
def stamp(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to build config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Rewrite project version mentions in the configured landing page.

    Parameters
    ----------
    config : Path, optional
        Path to the ``apidoc.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).

    Raises
    ------
    ValueError
        If the configuration does not name an ``index_page``, or the current
        version cannot be read from the configured version file.
    """
    build_config = load_build_config(config)
    index_page = build_config.index_page
    if index_page is None:
        msg = "No 'index_page' configured; nothing to stamp."
        raise ValueError(msg)
    project = build_config.project
    version = extract_version(project.version_file, project.version_pattern)
    if version == UNKNOWN_VERSION:
        msg = (
            f"Could not read the {project.name} version from "
            f"'{project.version_file}'; refusing to stamp "
            f"{_format_path(index_page)}."
        )
        raise ValueError(msg)
    count = stamp_index_version(index_page, project.name, version)
    print(f"stamped {_format_path(index_page)} with v{version} ({count} mention(s))")


def main() -> None:
    """Invoke the Cyclopts application that powers the `apidoc` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
