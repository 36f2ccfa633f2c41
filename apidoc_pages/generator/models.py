"""Shared dataclasses used by the reference page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from apidoc_pages.navigation import NavigationNode
    from apidoc_pages.versions import VersionEntry


@dc.dataclass(slots=True)
class ReferencePage:
    """Structured data passed to the API reference template.

    Attributes
    ----------
    project_name : str
        Display name of the documented project.
    version : str
        Current project version, or ``"unknown"``.
    html_title : str
        Contents of the ``<title>`` element.
    navigation : list[NavigationNode]
        Sidebar entries derived from the final markdown.
    versions : list[VersionEntry]
        Archived versions, newest first; empty hides the version selector.
    body_html : str
        Rendered reference body.
    pygments_css : str
        Stylesheet for highlighted code blocks.
    artifact_name : str
        File name of each archived build, used by the version selector.
    """

    project_name: str
    version: str
    html_title: str
    navigation: list[NavigationNode]
    versions: list[VersionEntry]
    body_html: str
    pygments_css: str
    artifact_name: str


__all__ = ["ReferencePage"]
