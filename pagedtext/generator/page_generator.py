r"""High-level orchestration for paged document generation.

This module ties the pipeline together: it retrieves the source text (over
HTTP or from disk), parses it into nodes and image directives, assembles
fixed-size pages, renders each page, and stitches everything into a single
navigable HTML document. :func:`convert_to_paged_html` is the pure core;
:class:`PagedDocumentGenerator` adds retrieval and persistence for a
:class:`~pagedtext.config.DocumentConfig`.

Example
-------
>>> from pagedtext.generator import convert_to_paged_html
>>> html = convert_to_paged_html("Hello\n World\n", elements_per_page=70)
>>> "id='page0'" in html
True
"""

from __future__ import annotations

import dataclasses as dc
import json
import logging
import typing as typ
from pathlib import Path

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from pagedtext._constants import DEFAULT_ELEMENTS_PER_PAGE, DOC_META_TEMPLATE
from pagedtext.errors import RetrievalFailure
from pagedtext.generator.assembler import assemble_pages
from pagedtext.generator.emitter import PagedHtmlEmitter
from pagedtext.generator.renderer import NodeRenderer
from pagedtext.text_parser import parse_document

if typ.TYPE_CHECKING:
    from pagedtext.config import DocumentConfig
    from pagedtext.errors import MalformedDirective
    from pagedtext.generator.models import Document
    from pagedtext.text_parser import InsertionDirective

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class PagedResult:
    """Outcome of converting one text blob.

    Attributes
    ----------
    html : str
        Paged HTML body (stylesheet, pages, controls, script).
    document : Document
        Assembled pages the HTML was rendered from.
    errors : list[MalformedDirective]
        Image directives dropped while parsing.
    """

    html: str
    document: Document
    errors: list[MalformedDirective]

    @property
    def page_count(self) -> int:
        """Return the number of pages in the output."""
        return self.document.page_count

    @property
    def dropped(self) -> list[InsertionDirective]:
        """Return directives aimed at pages that do not exist."""
        return self.document.dropped


@dc.dataclass(slots=True)
class GenerationResult:
    """Files written by :meth:`PagedDocumentGenerator.run`."""

    output_path: Path
    metadata_path: Path | None
    page_count: int
    byte_size: int


def build_paged_document(
    text: str,
    elements_per_page: int = DEFAULT_ELEMENTS_PER_PAGE,
    *,
    renderer: NodeRenderer | None = None,
    emitter: PagedHtmlEmitter | None = None,
) -> PagedResult:
    """Run the parse, assemble, render and emit stages over ``text``.

    Parameters
    ----------
    text : str
        Source document.
    elements_per_page : int, optional
        Maximum number of primary nodes per page. Defaults to 70.
    renderer : NodeRenderer, optional
        Renderer used for each page container.
    emitter : PagedHtmlEmitter, optional
        Emitter producing the navigable HTML body.

    Returns
    -------
    PagedResult
        Rendered HTML together with the assembled document and parse errors.
    """
    renderer = renderer or NodeRenderer()
    emitter = emitter or PagedHtmlEmitter()
    parsed = parse_document(text)
    document = assemble_pages(parsed.nodes, parsed.directives, elements_per_page)
    fragments = [renderer.render(page.container) for page in document.pages]
    return PagedResult(
        html=emitter.emit(fragments), document=document, errors=parsed.errors
    )


def convert_to_paged_html(
    text: str,
    elements_per_page: int = DEFAULT_ELEMENTS_PER_PAGE,
    *,
    renderer: NodeRenderer | None = None,
    emitter: PagedHtmlEmitter | None = None,
) -> str:
    """Return the paged HTML body for ``text``."""
    return build_paged_document(
        text, elements_per_page, renderer=renderer, emitter=emitter
    ).html


def fetch_text(url: str, *, timeout: float = 30.0) -> str:
    """Download ``url`` with a single GET and return its body as text.

    Failed requests are not retried; the first error status or transport
    error ends the fetch.

    Raises
    ------
    RetrievalFailure
        If the request fails or the server answers with an error status.
    """
    session = requests.Session()
    adapter = HTTPAdapter(max_retries=Retry(total=0, raise_on_status=False))
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    try:
        logger.info("Fetching %s", url)
        resp = session.get(url, timeout=timeout)
        resp.raise_for_status()
        if resp.encoding is None or resp.encoding.lower() == "iso-8859-1":
            resp.encoding = "utf-8"
        return resp.text
    except requests.RequestException as exc:
        msg = f"Unable to fetch '{url}': {exc}"
        raise RetrievalFailure(msg) from exc
    finally:
        session.close()


def read_text(path: Path) -> str:
    """Read a UTF-8 text file, raising RetrievalFailure when it is unreadable."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Unable to read '{path}': {exc}"
        raise RetrievalFailure(msg) from exc


class PagedDocumentGenerator:
    """Fetch a document's text and write it out as paged HTML."""

    def __init__(
        self,
        document_config: DocumentConfig,
        *,
        templates_dir: Path | None = None,
        source_url: str | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the generator with configuration and rendering helpers.

        Parameters
        ----------
        document_config : DocumentConfig
            Source, paging and output settings for the document.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        source_url : str, optional
            Override for the source URL; takes precedence over both
            ``source_url`` and ``source_path`` in the config.
        output_dir : Path, optional
            Override for the HTML output directory.
        """
        self.document = document_config
        self.source_url_override = source_url
        self.output_dir = output_dir or document_config.output_dir
        self.output_path = (
            output_dir / document_config.output_name
            if output_dir
            else document_config.output_path
        )
        self.renderer = NodeRenderer(document_config.styles)
        self.emitter = PagedHtmlEmitter(templates_dir=templates_dir)

    def run(self) -> GenerationResult:
        """Render the configured document and write it to disk.

        Returns
        -------
        GenerationResult
            Paths written, page count, and size of the HTML in bytes.

        Raises
        ------
        RetrievalFailure
            If the source text cannot be fetched or read.
        """
        text = self._load_text()
        if self.document.extra_lines:
            text = "\n".join([text, *self.document.extra_lines])
        result = build_paged_document(
            text,
            self.document.elements_per_page,
            renderer=self.renderer,
            emitter=self.emitter,
        )
        for directive in result.dropped:
            logger.warning(
                "Document '%s' has %d pages; image for page %d was not inserted",
                self.document.key,
                result.page_count,
                directive.target_page,
            )

        html = self.emitter.wrap(result.html, title=self.document.title)
        byte_size = write_document(self.output_path, html)
        metadata_path = self._write_metadata(
            self.output_path, result.page_count, byte_size
        )
        return GenerationResult(
            output_path=self.output_path,
            metadata_path=metadata_path,
            page_count=result.page_count,
            byte_size=byte_size,
        )

    def _load_text(self) -> str:
        """Return the source text from the override URL, config URL, or file."""
        if self.source_url_override:
            return fetch_text(self.source_url_override)
        if self.document.source_url:
            return fetch_text(self.document.source_url)
        if self.document.source_path is None:
            msg = f"Document '{self.document.key}' has no source configured."
            raise RetrievalFailure(msg)
        return read_text(self.document.source_path)

    def _metadata_path(self) -> Path:
        """Return the path to the metadata JSON file for this document."""
        return self.output_dir / DOC_META_TEMPLATE.format(key=self.document.key)

    def _write_metadata(
        self, output_path: Path, page_count: int, byte_size: int
    ) -> Path | None:
        """Persist page count and size next to the generated HTML."""
        metadata = {
            "output": output_path.name,
            "pages": page_count,
            "bytes": byte_size,
            "source": self.source_url_override or self.document.source_label,
        }
        path = self._metadata_path()
        try:
            path.write_text(json.dumps(metadata), encoding="utf-8")
        except OSError:  # pragma: no cover - IO issues
            logger.warning("Could not write metadata file %s", path)
            return None
        return path


def write_document(path: Path, html: str) -> int:
    """Write ``html`` to ``path`` as UTF-8 and return its size in bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = html.encode("utf-8")
    path.write_bytes(payload)
    logger.info("Wrote %s (%d bytes)", path, len(payload))
    return len(payload)


__all__ = [
    "GenerationResult",
    "PagedDocumentGenerator",
    "PagedResult",
    "build_paged_document",
    "convert_to_paged_html",
    "fetch_text",
    "read_text",
    "write_document",
]
