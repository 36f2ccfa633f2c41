"""Load build configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .._constants import DEFAULT_ARTIFACT_NAME
from .helpers import _build_filter_policy, _optional_str, _resolve_path
from .models import DEFAULT_VERSION_PATTERN, BuildConfig, ConfigError, ProjectConfig


def load_build_config(path: Path) -> BuildConfig:
    """Load the YAML configuration describing one reference build.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/apidoc.yaml``). Relative paths inside the file are resolved
        against the file's directory.

    Returns
    -------
    BuildConfig
        Parsed configuration including source and output paths, the class
        filter policy, archived version discovery settings, and project
        identity.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    ConfigError
        If required fields are missing or the filter section is invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from apidoc_pages.config import load_build_config
    >>> config = load_build_config(Path("config/apidoc.yaml"))  # doctest: +SKIP
    >>> config.filter.mode  # doctest: +SKIP
    'whitelist'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.resolve().parent

    source = _resolve_path(base_dir, raw.get("source"))
    if source is None:
        msg = "Configuration is missing the 'source' document path."
        raise ConfigError(msg)
    output = _resolve_path(base_dir, raw.get("output"))
    if output is None:
        output = source.with_name(DEFAULT_ARTIFACT_NAME)

    return BuildConfig(
        source=source,
        output=output,
        project=_build_project_config(raw.get("project"), base_dir),
        filter=_build_filter_policy(raw.get("filter")),
        versions_dir=_resolve_path(base_dir, raw.get("versions_dir")),
        artifact_name=_optional_str(raw.get("artifact_name")) or output.name,
        index_page=_resolve_path(base_dir, raw.get("index_page")),
        pygments_style=_optional_str(raw.get("pygments_style")) or "github-dark",
    )


def _build_project_config(
    payload: typ.Mapping[str, typ.Any] | None, base_dir: Path
) -> ProjectConfig:
    """Build a ProjectConfig from the optional ``project`` mapping."""
    if not payload:
        return ProjectConfig()
    if not isinstance(payload, dict):
        msg = "The 'project' section must be a mapping."
        raise ConfigError(msg)
    base = ProjectConfig()
    return ProjectConfig(
        name=_optional_str(payload.get("name")) or base.name,
        version_file=_resolve_path(base_dir, payload.get("version_file")),
        version_pattern=payload.get("version_pattern") or DEFAULT_VERSION_PATTERN,
    )


__all__ = ["load_build_config"]
