"""Utility helpers shared by the apidoc configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import ConfigError, FilterPolicy

if typ.TYPE_CHECKING:
    from .models import FilterMode


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_path(base_dir: Path, value: object | None) -> Path | None:
    """Resolve ``value`` relative to ``base_dir`` unless it is absolute."""
    text = _optional_str(value)
    if text is None:
        return None
    path = Path(text).expanduser()
    if path.is_absolute():
        return path
    return base_dir / path


def _normalize_names(value: object, *, field: str) -> frozenset[str]:
    """Normalize a YAML list of class names into a frozenset of strings."""
    match value:
        case None:
            return frozenset()
        case list() | tuple():
            names: set[str] = set()
            for entry in value:
                text = _optional_str(entry)
                if text:
                    names.add(text)
            return frozenset(names)
        case _:
            msg = f"Filter '{field}' must be a list of class names."
            raise ConfigError(msg)


def _build_filter_policy(payload: typ.Mapping[str, typ.Any] | None) -> FilterPolicy:
    """Build a FilterPolicy from the ``filter`` mapping of the config file."""
    if payload is None:
        return FilterPolicy()
    if not isinstance(payload, dict):
        msg = "The 'filter' section must be a mapping."
        raise ConfigError(msg)
    mode = str(payload.get("mode", "blacklist")).strip().lower()
    return FilterPolicy(
        mode=typ.cast("FilterMode", mode),
        include=_normalize_names(payload.get("include"), field="include"),
        exclude=_normalize_names(payload.get("exclude"), field="exclude"),
    )


__all__ = [
    "_build_filter_policy",
    "_normalize_names",
    "_optional_str",
    "_resolve_path",
]
