"""Stitch rendered pages together with client-side page navigation.

The emitter renders ``paged_body.jinja``: a shared stylesheet, one ``<div>``
per page (only the first visible), Previous/Next controls, and a small script
that shows exactly one page at a time and stops at the first and last page.
:meth:`PagedHtmlEmitter.wrap` places that body inside a complete HTML
document for writing to disk.

Example
-------
>>> from pagedtext.generator.emitter import PagedHtmlEmitter
>>> emitter = PagedHtmlEmitter()
>>> html = emitter.emit(["<h2>One</h2>", "<h2>Two</h2>"])
>>> "const totalPages = 2;" in html
True
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from pagedtext._constants import BASE_CLASS

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class PagedHtmlEmitter:
    """Render page fragments into a navigable HTML body."""

    def __init__(
        self,
        *,
        templates_dir: Path | None = None,
        base_class: str = BASE_CLASS,
        page_width: str = "75%",
        page_height: str = "80vh",
        prev_label: str = "Previous Page",
        next_label: str = "Next Page",
    ) -> None:
        """Initialize the emitter and its Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing ``paged_body.jinja`` and ``document.jinja``.
            Defaults to ``pagedtext/templates``.
        base_class : str, optional
            Class the stylesheet applies the content font rule to; must match
            the class used by :class:`~pagedtext.generator.renderer.NodeRenderer`.
        page_width, page_height : str, optional
            CSS dimensions of each page block.
        prev_label, next_label : str, optional
            Labels of the navigation buttons.
        """
        self.templates_dir = (
            templates_dir or Path(__file__).resolve().parents[1] / "templates"
        )
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.body_template = self.env.get_template("paged_body.jinja")
        self.document_template = self.env.get_template("document.jinja")
        self.base_class = base_class
        self.page_width = page_width
        self.page_height = page_height
        self.prev_label = prev_label
        self.next_label = next_label

    def emit(self, fragments: cabc.Sequence[str]) -> str:
        """Return the paged HTML body for the rendered page ``fragments``.

        Parameters
        ----------
        fragments : Sequence[str]
            Rendered HTML for each page, in display order. Fragments are
            inserted verbatim.

        Returns
        -------
        str
            Stylesheet, page blocks, navigation controls and script.
        """
        context = {
            "pages": list(fragments),
            "total_pages": len(fragments),
            "base_class": self.base_class,
            "page_width": self.page_width,
            "page_height": self.page_height,
            "prev_label": self.prev_label,
            "next_label": self.next_label,
        }
        return self.body_template.render(**context)

    def wrap(self, body: str, *, title: str = "") -> str:
        """Return a complete UTF-8 HTML document around ``body``."""
        html = self.document_template.render(body=body, title=title)
        if not html.endswith("\n"):
            html += "\n"
        return html


__all__ = ["PagedHtmlEmitter"]
