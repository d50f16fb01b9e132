"""Compile declarative landing page models into static HTML documents.

This package exposes the ``landing`` console script, which compiles page
models exported by the editor and validates compiled documents.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from landing_pages import main
>>> main(["compile", "--page", "page.yaml", "--output", "index.html"])  # doctest: +SKIP
>>> from landing_pages import app
>>> app.name  # doctest: +SKIP
('landing',)
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
