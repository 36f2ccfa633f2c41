"""Typed dataclasses describing apidoc build configuration structures."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from .._constants import DEFAULT_ARTIFACT_NAME

FilterMode = typ.Literal["whitelist", "blacklist"]
FILTER_MODES: tuple[str, ...] = ("whitelist", "blacklist")
DEFAULT_VERSION_PATTERN = r"flexlove\._VERSION\s*=\s*[\"']([^\"']+)[\"']"


class ConfigError(ValueError):
    """Raised when the build configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class FilterPolicy:
    """Decide which classes survive into the rendered reference.

    Attributes
    ----------
    mode : {"whitelist", "blacklist"}
        ``whitelist`` keeps only classes named in ``include``; ``blacklist``
        keeps every class not named in ``exclude``. The set the active mode
        does not consult is ignored.
    include : frozenset[str]
        Class names allowed through in whitelist mode.
    exclude : frozenset[str]
        Class names dropped in blacklist mode.
    """

    mode: FilterMode = "blacklist"
    include: frozenset[str] = frozenset()
    exclude: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        """Reject unknown filter modes."""
        if self.mode not in FILTER_MODES:
            allowed = ", ".join(FILTER_MODES)
            msg = f"Unknown filter mode '{self.mode}'. Expected one of: {allowed}"
            raise ConfigError(msg)

    def allows(self, class_name: str) -> bool:
        """Return whether ``class_name`` passes this policy."""
        if self.mode == "whitelist":
            return class_name in self.include
        return class_name not in self.exclude


@dc.dataclass(slots=True)
class ProjectConfig:
    """Project identity used in page titles and the landing page."""

    name: str = "FlexLöve"
    version_file: Path | None = None
    version_pattern: str = DEFAULT_VERSION_PATTERN


@dc.dataclass(slots=True)
class BuildConfig:
    """A fully resolved reference build definition sourced from YAML config."""

    source: Path
    output: Path
    project: ProjectConfig = dc.field(default_factory=ProjectConfig)
    filter: FilterPolicy = dc.field(default_factory=FilterPolicy)
    versions_dir: Path | None = None
    artifact_name: str = DEFAULT_ARTIFACT_NAME
    index_page: Path | None = None
    pygments_style: str = "github-dark"


__all__ = [
    "DEFAULT_VERSION_PATTERN",
    "FILTER_MODES",
    "BuildConfig",
    "ConfigError",
    "FilterMode",
    "FilterPolicy",
    "ProjectConfig",
]
