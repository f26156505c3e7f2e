"""Utilities for assembling, rendering, and generating paged HTML documents."""

from .assembler import assemble_pages
from .emitter import PagedHtmlEmitter
from .models import Document, Page
from .page_generator import (
    GenerationResult,
    PagedDocumentGenerator,
    PagedResult,
    build_paged_document,
    convert_to_paged_html,
)
from .renderer import DEFAULT_STYLES, NodeRenderer

__all__ = [
    "DEFAULT_STYLES",
    "Document",
    "GenerationResult",
    "NodeRenderer",
    "Page",
    "PagedDocumentGenerator",
    "PagedHtmlEmitter",
    "PagedResult",
    "assemble_pages",
    "build_paged_document",
    "convert_to_paged_html",
]
