"""Content node variants that make up a paged document tree.

Each variant is a small dataclass tagged with a :class:`NodeKind`. Leaves
(headings, quotes, images) are immutable; a :class:`Container` owns an ordered
list of children and is the only node that can grow. Styling and class lists
are not stored on the nodes: the renderer derives them from ``kind`` each
time a tree is serialized.

Example
-------
>>> from pagedtext.nodes import Container, HeadingMinor, Image
>>> page = Container([HeadingMinor("Short")])
>>> page.insert_after(0, Image("cover.png"))
1
>>> [child.kind.value for child in page.iter_children()]
['heading-minor', 'image']
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class NodeKind(enum.StrEnum):
    """Tag identifying a content node variant."""

    HEADING_MAJOR = "heading-major"
    HEADING_MINOR = "heading-minor"
    QUOTED_BLOCK = "quoted-block"
    IMAGE = "image"
    CONTAINER = "container"


@dc.dataclass(frozen=True, slots=True)
class HeadingMajor:
    """Long text line rendered as a top-level heading."""

    content: str
    kind: typ.ClassVar[NodeKind] = NodeKind.HEADING_MAJOR

    def iter_children(self) -> cabc.Iterator[ContentNode]:
        """Leaves have no children."""
        return iter(())


@dc.dataclass(frozen=True, slots=True)
class HeadingMinor:
    """Short text line rendered as a second-level heading."""

    content: str
    kind: typ.ClassVar[NodeKind] = NodeKind.HEADING_MINOR

    def iter_children(self) -> cabc.Iterator[ContentNode]:
        """Leaves have no children."""
        return iter(())


@dc.dataclass(frozen=True, slots=True)
class QuotedBlock:
    """Indented text line rendered as a blockquote."""

    content: str
    kind: typ.ClassVar[NodeKind] = NodeKind.QUOTED_BLOCK

    def iter_children(self) -> cabc.Iterator[ContentNode]:
        """Leaves have no children."""
        return iter(())


@dc.dataclass(frozen=True, slots=True)
class Image:
    """Image reference; ``source`` is emitted verbatim and never fetched."""

    source: str
    kind: typ.ClassVar[NodeKind] = NodeKind.IMAGE

    def iter_children(self) -> cabc.Iterator[ContentNode]:
        """Leaves have no children."""
        return iter(())


@dc.dataclass(slots=True)
class Container:
    """Block-level group that owns an ordered sequence of child nodes.

    Attributes
    ----------
    children : list[ContentNode]
        Child nodes rendered in order. The container owns them exclusively;
        the same node instance should not be added to two containers.
    """

    children: list[ContentNode] = dc.field(default_factory=list)
    kind: typ.ClassVar[NodeKind] = NodeKind.CONTAINER

    def iter_children(self) -> cabc.Iterator[ContentNode]:
        """Yield child nodes in render order."""
        return iter(self.children)

    def append(self, node: ContentNode) -> int:
        """Add ``node`` after the last child and return its index."""
        self.children.append(node)
        return len(self.children) - 1

    def insert_after(self, index: int, node: ContentNode) -> int:
        """Insert ``node`` immediately after the child at ``index``.

        Parameters
        ----------
        index : int
            Zero-based position of the child that should precede ``node``.
        node : ContentNode
            Node to insert.

        Returns
        -------
        int
            Position ``node`` ended up at. Out-of-range indices (negative or
            past the last child) append instead of raising.
        """
        if index < 0 or index >= len(self.children):
            return self.append(node)
        self.children.insert(index + 1, node)
        return index + 1


ContentNode: typ.TypeAlias = HeadingMajor | HeadingMinor | QuotedBlock | Image | Container
LeafNode: typ.TypeAlias = HeadingMajor | HeadingMinor | QuotedBlock | Image


__all__ = [
    "Container",
    "ContentNode",
    "HeadingMajor",
    "HeadingMinor",
    "Image",
    "LeafNode",
    "NodeKind",
    "QuotedBlock",
]
