"""Convert plain-text documents into paginated HTML.

This package exposes the CLI entry points used by ``pagedtext`` to turn a
plain-text source (a URL or a local file) into a single HTML document whose
pages are navigated client-side.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``convert_to_paged_html``: Core text to paged HTML conversion.

Examples
--------
>>> from pagedtext import convert_to_paged_html
>>> "Page: " in convert_to_paged_html("Hello\\n World\\n")
True
>>> from pagedtext import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .generator import convert_to_paged_html

__all__ = ["app", "convert_to_paged_html", "main"]
