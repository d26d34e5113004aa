"""Site configuration tooling for the MLOps Training documentation site.

This package holds the typed navigation model of the site, the built-in
configuration variants, and the ``pages`` CLI used by ``uv run pages`` to
export the renderer configuration and check navigation links.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from mlops_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
