"""Discover archived reference versions for the version selector.

Archived builds live in ``<versions_dir>/v<major>.<minor>.<patch>/`` and are
only offered once their rendered artifact exists. Discovery is best effort:
a missing or unreadable archive directory yields an empty list so the main
build can proceed without a version selector.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import re
import typing as typ

from ._constants import DEFAULT_ARTIFACT_NAME

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

VERSION_DIR_PATTERN = re.compile(r"^v(\d+)\.(\d+)\.(\d+)$")


@dc.dataclass(frozen=True, slots=True)
class VersionEntry:
    """An archived version directory with its parsed numeric triple."""

    name: str
    major: int
    minor: int
    patch: int

    @property
    def key(self) -> tuple[int, int, int]:
        """Return the ``(major, minor, patch)`` tuple used for ordering."""
        return (self.major, self.minor, self.patch)


def parse_version_name(name: str) -> VersionEntry | None:
    """Parse ``v<major>.<minor>.<patch>`` or return ``None`` when malformed."""
    match = VERSION_DIR_PATTERN.match(name)
    if match is None:
        return None
    major, minor, patch = (int(part) for part in match.groups())
    return VersionEntry(name=name, major=major, minor=minor, patch=patch)


def sort_versions(entries: typ.Iterable[VersionEntry]) -> list[VersionEntry]:
    """Return ``entries`` ordered newest first by their numeric triple."""
    return sorted(entries, key=lambda entry: entry.key, reverse=True)


def discover_versions(
    root: Path | None, artifact_name: str = DEFAULT_ARTIFACT_NAME
) -> list[VersionEntry]:
    """Return archived versions under ``root`` that contain ``artifact_name``.

    Parameters
    ----------
    root : Path or None
        Directory holding one subdirectory per archived version. ``None``
        disables discovery.
    artifact_name : str, optional
        File that marks a completed archived build. Defaults to
        ``"api.html"``.

    Returns
    -------
    list[VersionEntry]
        Versions ordered newest first. Directories whose names do not parse
        as ``v<major>.<minor>.<patch>`` are excluded. A missing or unreadable
        ``root`` produces an empty list.
    """
    if root is None:
        return []

    entries: list[VersionEntry] = []
    try:
        if not root.is_dir():
            return []
        for child in root.iterdir():
            if not child.name.startswith("v") or not child.is_dir():
                continue
            if not (child / artifact_name).exists():
                continue
            entry = parse_version_name(child.name)
            if entry is None:
                logger.debug("skipping malformed version directory %s", child)
                continue
            entries.append(entry)
    except OSError as exc:
        logger.warning("could not scan versions directory %s: %s", root, exc)
        return []
    return sort_versions(entries)


__all__ = [
    "VERSION_DIR_PATTERN",
    "VersionEntry",
    "discover_versions",
    "parse_version_name",
    "sort_versions",
]
