"""Load and validate build configuration YAML for API reference builds.

This subpackage parses the project's ``apidoc.yaml`` file, resolves the
source, output, landing page, and archive paths relative to the file, and
produces strongly typed dataclasses (:class:`BuildConfig`,
:class:`FilterPolicy`, :class:`ProjectConfig`) that the generator consumes.
The primary entry point is :func:`load_build_config`.

Examples
--------
>>> from pathlib import Path
>>> from apidoc_pages.config import load_build_config
>>> config = load_build_config(Path("config/apidoc.yaml"))  # doctest: +SKIP
>>> config.filter.allows("Color")  # doctest: +SKIP
True
"""

from .loader import load_build_config
from .models import (
    FILTER_MODES,
    BuildConfig,
    ConfigError,
    FilterMode,
    FilterPolicy,
    ProjectConfig,
)

__all__ = [
    "FILTER_MODES",
    "BuildConfig",
    "ConfigError",
    "FilterMode",
    "FilterPolicy",
    "ProjectConfig",
    "load_build_config",
]
