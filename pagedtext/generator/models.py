"""Shared dataclasses used by the paging pipeline."""

from __future__ import annotations

import dataclasses as dc

from pagedtext.nodes import Container, ContentNode  # noqa: TC001 - dataclass fields
from pagedtext.text_parser import InsertionDirective  # noqa: TC001 - dataclass fields


@dc.dataclass(slots=True)
class Page:
    """One navigable unit of the output document.

    Attributes
    ----------
    index : int
        Zero-based page position.
    primary : tuple[ContentNode, ...]
        Primary nodes sliced from the flat node sequence, in source order.
    container : Container
        Container rendered for the page: the primary nodes plus any inserted
        directive elements.
    """

    index: int
    primary: tuple[ContentNode, ...]
    container: Container

    @property
    def number(self) -> int:
        """Return the 1-based page number used by directives."""
        return self.index + 1


@dc.dataclass(slots=True)
class Document:
    """Ordered pages produced by the assembler.

    Attributes
    ----------
    pages : list[Page]
        Pages in display order.
    dropped : list[InsertionDirective]
        Directives whose target page does not exist.
    """

    pages: list[Page] = dc.field(default_factory=list)
    dropped: list[InsertionDirective] = dc.field(default_factory=list)

    @property
    def page_count(self) -> int:
        """Return the number of assembled pages."""
        return len(self.pages)


__all__ = ["Document", "Page"]
