"""Group primary nodes into fixed-size pages and apply image directives.

Example
-------
>>> from pagedtext.generator.assembler import assemble_pages
>>> from pagedtext.nodes import HeadingMinor
>>> document = assemble_pages([HeadingMinor(str(i)) for i in range(5)], [], 2)
>>> document.page_count
3
"""

from __future__ import annotations

import logging
import math
import typing as typ

from pagedtext._constants import DEFAULT_ELEMENTS_PER_PAGE
from pagedtext.generator.models import Document, Page
from pagedtext.nodes import Container

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from pagedtext.nodes import ContentNode
    from pagedtext.text_parser import InsertionDirective

logger = logging.getLogger(__name__)


def count_pages(node_count: int, elements_per_page: int) -> int:
    """Return ``ceil(node_count / elements_per_page)``."""
    return math.ceil(node_count / elements_per_page)


def assemble_pages(
    nodes: cabc.Sequence[ContentNode],
    directives: cabc.Iterable[InsertionDirective] = (),
    elements_per_page: int = DEFAULT_ELEMENTS_PER_PAGE,
) -> Document:
    """Split ``nodes`` into pages and insert directive elements.

    Parameters
    ----------
    nodes : Sequence[ContentNode]
        Primary nodes in source order.
    directives : Iterable[InsertionDirective], optional
        Insertion directives, applied in the order given.
    elements_per_page : int, optional
        Maximum number of primary nodes per page. Defaults to 70.

    Returns
    -------
    Document
        Assembled pages. Directives aimed at a page that does not exist are
        listed in ``Document.dropped`` rather than creating new pages.

    Raises
    ------
    ValueError
        If ``elements_per_page`` is smaller than 1.
    """
    if elements_per_page < 1:
        msg = f"elements_per_page must be a positive integer, got {elements_per_page}"
        raise ValueError(msg)

    document = Document()
    for index in range(count_pages(len(nodes), elements_per_page)):
        start = index * elements_per_page
        primary = tuple(nodes[start : start + elements_per_page])
        document.pages.append(
            Page(index=index, primary=primary, container=Container(list(primary)))
        )

    for directive in directives:
        page_index = directive.target_page - 1
        if not 0 <= page_index < document.page_count:
            logger.debug(
                "No page %d for image %r; directive dropped",
                directive.target_page,
                getattr(directive.element, "source", directive.element),
            )
            document.dropped.append(directive)
            continue
        document.pages[page_index].container.insert_after(
            directive.after_index, directive.element
        )
    return document


__all__ = ["assemble_pages", "count_pages"]
