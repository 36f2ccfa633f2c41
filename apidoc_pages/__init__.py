"""Utilities for generating a filtered, navigable API reference page.

This package exposes the CLI entry points used by ``apidoc`` to turn a flat
markdown API reference into a single HTML page with sidebar navigation and an
archived-version selector.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from apidoc_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
