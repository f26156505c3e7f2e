"""Cyclopts CLI entrypoint for generating paged HTML documents.

The ``pagedtext`` console script defined here renders plain-text sources into
single-file HTML documents with client-side page navigation. ``pagedtext
generate`` renders the documents listed in ``config/pagedtext.yaml``;
``pagedtext render`` converts a single URL or file without a config file.

Examples
--------
Generate every configured document:

>>> from pagedtext.cli import main
>>> main()  # doctest: +SKIP

Render one Gutenberg book with 50 elements per page:

>>> from pagedtext.cli import app
>>> app(
...     ["render", "https://www.gutenberg.org/cache/epub/1513/pg1513.txt",
...      "--elements-per-page", "50"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_ELEMENTS_PER_PAGE
from .config import DocumentConfig, load_config
from .generator import PagedDocumentGenerator

DEFAULT_CONFIG = Path("config/pagedtext.yaml")

app = App(name="pagedtext", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(help="Render the documents listed in the config file.")
def generate(
    *,
    document: typ.Annotated[
        str | None, Parameter(help="Document identifier", env_var="INPUT_DOCUMENT")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to the config file", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    source_url: typ.Annotated[
        str | None,
        Parameter(help="Override the document source URL", env_var="INPUT_SOURCE_URL"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log pipeline details to stderr")
    ] = False,
) -> None:
    """Generate paged HTML for the requested documents.

    Parameters
    ----------
    document : str or None, optional
        Specific document key to render; when ``None`` (default) the config's
        ``default_document`` is rendered, or every document if none is set.
    config : Path, optional
        Path to the ``pagedtext.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    source_url : str or None, optional
        Override source URL for single-document rendering.
    output_dir : Path or None, optional
        Override output directory for single-document rendering.
    verbose : bool, optional
        Enable debug logging, including per-node render lifecycle records.

    Raises
    ------
    ValueError
        If ``source_url`` or ``output_dir`` overrides are supplied when more
        than one document is requested.
    RetrievalFailure
        If a document's source text cannot be fetched or read.
    """
    _configure_logging(verbose)
    project = load_config(config)

    selected = document or project.default_document
    if selected:
        targets = [project.get_document(selected)]
    else:
        targets = list(project.documents.values())

    if len(targets) > 1 and (source_url or output_dir):
        msg = "Cannot override source_url/output_dir when generating multiple documents."
        raise ValueError(msg)

    for document_config in targets:
        generator = PagedDocumentGenerator(
            document_config, source_url=source_url, output_dir=output_dir
        )
        result = generator.run()
        print(
            f"wrote {_format_path(result.output_path)} "
            f"({result.page_count} pages, {result.byte_size} bytes)"
        )


@app.command(help="Render a single text URL or file without a config file.")
def render(
    source: typ.Annotated[str, Parameter(help="URL or path of the text to render")],
    *,
    output: typ.Annotated[
        Path, Parameter(help="Where to write the HTML document")
    ] = Path("output.html"),
    elements_per_page: typ.Annotated[
        int, Parameter(help="Number of text elements per page")
    ] = DEFAULT_ELEMENTS_PER_PAGE,
    title: typ.Annotated[str, Parameter(help="HTML document title")] = "Paged document",
    verbose: typ.Annotated[
        bool, Parameter(help="Log pipeline details to stderr")
    ] = False,
) -> None:
    """Render ``source`` into a paged HTML file at ``output``."""
    _configure_logging(verbose)
    if elements_per_page < 1:
        msg = f"--elements-per-page must be a positive integer, got {elements_per_page}."
        raise ValueError(msg)
    is_url = source.startswith(("http://", "https://"))
    document_config = DocumentConfig(
        key=output.stem,
        title=title,
        source_url=source if is_url else None,
        source_path=None if is_url else Path(source),
        output_dir=output.parent,
        output_name=output.name,
        elements_per_page=elements_per_page,
    )
    result = PagedDocumentGenerator(document_config).run()
    print(
        f"wrote {_format_path(result.output_path)} "
        f"({result.page_count} pages, {result.byte_size} bytes)"
    )


def main() -> None:
    """Invoke the Cyclopts application that powers the ``pagedtext`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
