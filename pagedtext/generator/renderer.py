"""Serialize content node trees into HTML fragments."""

from __future__ import annotations

import logging
import types
import typing as typ
from html import escape

from pagedtext._constants import BASE_CLASS
from pagedtext.nodes import (
    Container,
    HeadingMajor,
    HeadingMinor,
    Image,
    NodeKind,
    QuotedBlock,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from pagedtext.nodes import ContentNode

logger = logging.getLogger(__name__)

DEFAULT_STYLES: cabc.Mapping[NodeKind, str] = types.MappingProxyType(
    {
        NodeKind.HEADING_MAJOR: "font-size: 32px; color: darkblue; margin-top: 20px;",
        NodeKind.HEADING_MINOR: "font-size: 24px; color: darkgreen; margin-top: 16px;",
        NodeKind.QUOTED_BLOCK: "margin-left: 20px; font-style: italic; color: gray;",
        NodeKind.IMAGE: "max-width: 100%; display: block; margin: 12px auto;",
    }
)


class NodeRenderer:
    """Render content nodes with a fixed lifecycle.

    Every call to :meth:`render` runs the same hooks in order: creation,
    style application, class-list application, content rendering (children
    first for containers), text-rendered, and inserted. The creation,
    text-rendered and inserted hooks only emit debug log records.
    """

    def __init__(
        self,
        styles: cabc.Mapping[NodeKind, str] | None = None,
        *,
        base_class: str = BASE_CLASS,
    ) -> None:
        """Initialize a renderer with optional per-kind style overrides.

        Parameters
        ----------
        styles : Mapping[NodeKind, str], optional
            Inline style per node kind, merged over :data:`DEFAULT_STYLES`.
            Kinds mapped to an empty string render without a style attribute.
        base_class : str, optional
            Class added to every rendered element. Defaults to
            ``"contentText"``, which the page stylesheet targets.
        """
        merged = dict(DEFAULT_STYLES)
        if styles:
            merged.update(styles)
        self.styles: cabc.Mapping[NodeKind, str] = types.MappingProxyType(merged)
        self.base_class = base_class

    def render(self, node: ContentNode) -> str:
        """Return the HTML fragment for ``node`` and its descendants."""
        self._on_created(node)
        style = self._apply_style(node)
        class_list = self._apply_class_list(node)
        html = self._render_content(node, style, class_list)
        self._on_text_rendered(node)
        self._on_inserted(node)
        return html

    def _apply_style(self, node: ContentNode) -> str:
        if isinstance(node, Container):
            return ""
        return self.styles.get(node.kind, "")

    def _apply_class_list(self, node: ContentNode) -> str:  # noqa: ARG002
        return self.base_class

    def _render_content(self, node: ContentNode, style: str, class_list: str) -> str:
        """Produce the markup for ``node`` from the style and class computed earlier."""
        classes = escape(class_list, quote=True)
        style_attr = f' style="{escape(style, quote=True)}"' if style else ""
        match node:
            case Container():
                inner = "".join(self.render(child) for child in node.iter_children())
                return f"<div class='{classes}'>{inner}</div>"
            case HeadingMajor(content=content):
                return f"<h1{style_attr} class='{classes}'>{escape(content)}</h1>"
            case HeadingMinor(content=content):
                return f"<h2{style_attr} class='{classes}'>{escape(content)}</h2>"
            case QuotedBlock(content=content):
                return (
                    f"<blockquote class='{classes}'{style_attr}>"
                    f"{escape(content)}</blockquote>"
                )
            case Image(source=source):
                src = escape(source, quote=True)
                return f"<img src=\"{src}\"{style_attr} class='{classes}'>"
            case _:  # pragma: no cover - exhaustive over ContentNode
                msg = f"Unsupported node type: {type(node).__name__}"
                raise TypeError(msg)

    @staticmethod
    def _on_created(node: ContentNode) -> None:
        logger.debug("%s: created", type(node).__name__)

    @staticmethod
    def _on_text_rendered(node: ContentNode) -> None:
        logger.debug("%s: text rendered", type(node).__name__)

    @staticmethod
    def _on_inserted(node: ContentNode) -> None:
        logger.debug("%s: inserted", type(node).__name__)


__all__ = ["DEFAULT_STYLES", "NodeRenderer"]
