"""Utilities for building the yakitori.dev static blog.

This package exposes the CLI entry points used by ``uv run pages`` to validate
content front matter and render the homepage, section indexes, and entry
pages.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from yakitori_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
