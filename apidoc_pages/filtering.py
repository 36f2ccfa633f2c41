"""Drop whole class blocks according to the configured filter policy."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import FilterPolicy
    from .markdown_parser import ClassBlock


def filter_classes(
    classes: cabc.Iterable[ClassBlock], policy: FilterPolicy
) -> list[ClassBlock]:
    """Return the classes that satisfy ``policy``, in their original order.

    Parameters
    ----------
    classes : Iterable[ClassBlock]
        Parsed class blocks in document order.
    policy : FilterPolicy
        Whitelist or blacklist policy deciding which class names survive.

    Returns
    -------
    list[ClassBlock]
        Surviving blocks with all of their members intact. Rejected classes
        are dropped together with every member; the operation is idempotent.
    """
    return [block for block in classes if policy.allows(block.name)]


__all__ = ["filter_classes"]
