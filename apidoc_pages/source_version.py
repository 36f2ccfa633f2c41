r"""Read the current library version and stamp it into the landing page.

The version advertised in the reference title comes from a project source
file (for example ``flexlove._VERSION = "0.4.1"``) matched with a configurable
regular expression. The landing page repeats that version wherever it names
the project, and :func:`stamp_index_version` keeps those mentions current.

Example
-------
>>> from pathlib import Path
>>> from apidoc_pages.source_version import extract_version
>>> extract_version(Path("FlexLove.lua"))  # doctest: +SKIP
'0.4.1'
"""

from __future__ import annotations

import logging
import re
import typing as typ

from ._constants import UNKNOWN_VERSION
from .config.models import DEFAULT_VERSION_PATTERN

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def extract_version(
    path: Path | None, pattern: str = DEFAULT_VERSION_PATTERN
) -> str:
    """Return the first capture group of ``pattern`` within ``path``.

    Returns ``"unknown"`` when no path is configured, the file cannot be read,
    or the pattern does not match.
    """
    if path is None:
        return UNKNOWN_VERSION
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("could not read version file %s: %s", path, exc)
        return UNKNOWN_VERSION
    match = re.search(pattern, content)
    if match is None or not match.groups():
        return UNKNOWN_VERSION
    return match.group(1)


def stamp_index_version(index_path: Path, project_name: str, version: str) -> int:
    """Rewrite ``<project_name> v<x.y.z>`` mentions in the landing page.

    Parameters
    ----------
    index_path : Path
        HTML landing page to update in place.
    project_name : str
        Project name that precedes the version in the page copy.
    version : str
        Version string written after the ``v`` prefix.

    Returns
    -------
    int
        Number of mentions that were rewritten.

    Raises
    ------
    FileNotFoundError
        If ``index_path`` does not exist.
    """
    content = index_path.read_text(encoding="utf-8")
    pattern = re.compile(rf"{re.escape(project_name)} v\d+(?:\.\d+)*")
    replacement = f"{project_name} v{version}"
    updated, count = pattern.subn(lambda _match: replacement, content)
    index_path.write_text(updated, encoding="utf-8")
    return count


__all__ = ["extract_version", "stamp_index_version"]
