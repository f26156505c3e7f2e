"""Load document configuration YAML into typed dataclasses."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from pagedtext._constants import DEFAULT_ELEMENTS_PER_PAGE

from .helpers import (
    _build_styles,
    _merge_styles,
    _normalize_lines,
    _optional_str,
    _positive_int,
)
from .models import ConfigError, DocumentConfig, ProjectConfig

if typ.TYPE_CHECKING:
    from pagedtext.nodes import NodeKind


def load_config(path: Path) -> ProjectConfig:
    """Load the YAML configuration describing the documents to render.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/pagedtext.yaml``).

    Returns
    -------
    ProjectConfig
        Parsed configuration with one :class:`DocumentConfig` per entry under
        ``documents``, each merged over the ``defaults`` block.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    ConfigError
        If no documents are defined, the top-level structure is not a mapping,
        or a document entry is invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from pagedtext.config import load_config
    >>> config = load_config(Path("config/pagedtext.yaml"))  # doctest: +SKIP
    >>> config.get_document("romeo").elements_per_page  # doctest: +SKIP
    70
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise ConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}
    if not isinstance(defaults, dict):
        msg = "'defaults' must be a mapping."
        raise ConfigError(msg)

    document_defaults = _DocumentDefaults(
        title=_optional_str(defaults.get("title")) or "Paged document",
        output_dir=Path(defaults.get("output_dir", "public")),
        elements_per_page=_positive_int(
            defaults.get("elements_per_page", DEFAULT_ELEMENTS_PER_PAGE),
            field="defaults.elements_per_page",
        ),
        extra_lines=_normalize_lines(
            defaults.get("extra_lines"), field="defaults.extra_lines"
        ),
        styles=_build_styles(defaults.get("styles")),
    )

    documents_raw = raw.get("documents") or {}
    if not documents_raw:
        msg = "No documents defined in configuration."
        raise ConfigError(msg)

    documents: dict[str, DocumentConfig] = {}
    for key, payload in documents_raw.items():
        match payload:
            case dict():
                documents[str(key)] = _build_document_config(
                    key=str(key), payload=payload, defaults=document_defaults
                )
            case _:
                continue

    default_document = _optional_str(defaults.get("default_document"))
    if default_document and default_document not in documents:
        msg = f"Default document '{default_document}' is not defined."
        raise ConfigError(msg)

    return ProjectConfig(documents=documents, default_document=default_document)


@dc.dataclass(slots=True)
class _DocumentDefaults:
    """Internal container for document default configuration values."""

    title: str
    output_dir: Path
    elements_per_page: int
    extra_lines: list[str]
    styles: dict[NodeKind, str]


def _build_document_config(
    *,
    key: str,
    payload: typ.Mapping[str, typ.Any],
    defaults: _DocumentDefaults,
) -> DocumentConfig:
    """Build a DocumentConfig for a single entry using defaults and overrides."""
    source_url = _optional_str(payload.get("source_url"))
    source_path_raw = _optional_str(payload.get("source_path"))
    if not source_url and not source_path_raw:
        msg = f"Document '{key}' is missing 'source_url' or 'source_path'."
        raise ConfigError(msg)
    if source_url and source_path_raw:
        msg = f"Document '{key}' sets both 'source_url' and 'source_path'."
        raise ConfigError(msg)

    elements_per_page = _positive_int(
        payload.get("elements_per_page", defaults.elements_per_page),
        field=f"documents.{key}.elements_per_page",
    )
    extra_lines = defaults.extra_lines + _normalize_lines(
        payload.get("extra_lines"), field=f"documents.{key}.extra_lines"
    )
    styles = _merge_styles(defaults.styles, _build_styles(payload.get("styles")))

    return DocumentConfig(
        key=key,
        title=_optional_str(payload.get("title")) or defaults.title,
        source_url=source_url,
        source_path=Path(source_path_raw) if source_path_raw else None,
        output_dir=Path(payload.get("output_dir", defaults.output_dir)),
        output_name=_optional_str(payload.get("output")) or f"{key}.html",
        elements_per_page=elements_per_page,
        extra_lines=extra_lines,
        styles=styles,
    )


__all__ = ["load_config"]
