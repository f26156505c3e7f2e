"""Typed dataclasses describing pagedtext configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from pagedtext._constants import DEFAULT_ELEMENTS_PER_PAGE
from pagedtext.errors import ConfigError
from pagedtext.nodes import NodeKind  # noqa: TC001 - used for runtime type metadata


@dc.dataclass(slots=True)
class DocumentConfig:
    """Settings for rendering one text source into a paged HTML file.

    Attributes
    ----------
    key : str
        Identifier of the document within the configuration file.
    title : str
        Value of the generated page's ``<title>``.
    source_url : str | None
        HTTP(S) location of the text; mutually exclusive with ``source_path``.
    source_path : Path | None
        Local text file to read instead of fetching ``source_url``.
    output_dir : Path
        Directory receiving the HTML and metadata files.
    output_name : str
        Filename of the generated HTML document.
    elements_per_page : int
        Number of primary nodes per page.
    extra_lines : list[str]
        Lines appended to the source text before parsing, typically
        ``image:`` directives kept outside the upstream text.
    styles : dict[NodeKind, str]
        Inline style overrides per node kind.
    """

    key: str
    title: str
    source_url: str | None = None
    source_path: Path | None = None
    output_dir: Path = dc.field(default_factory=lambda: Path("public"))
    output_name: str = "index.html"
    elements_per_page: int = DEFAULT_ELEMENTS_PER_PAGE
    extra_lines: list[str] = dc.field(default_factory=list)
    styles: dict[NodeKind, str] = dc.field(default_factory=dict)

    @property
    def output_path(self) -> Path:
        """Return the full path of the generated HTML file."""
        return self.output_dir / self.output_name

    @property
    def source_label(self) -> str:
        """Return the URL or path the text is read from."""
        return self.source_url or str(self.source_path)


@dc.dataclass(slots=True)
class ProjectConfig:
    """Top-level configuration containing every document definition."""

    documents: dict[str, DocumentConfig]
    default_document: str | None = None

    def get_document(self, key: str) -> DocumentConfig:
        """Return the configuration for ``key``.

        Raises
        ------
        ConfigError
            If ``key`` is not defined.
        """
        try:
            return self.documents[key]
        except KeyError:
            known = ", ".join(sorted(self.documents)) or "none"
            msg = f"Unknown document '{key}'. Known documents: {known}."
            raise ConfigError(msg) from None


__all__ = ["ConfigError", "DocumentConfig", "ProjectConfig"]
