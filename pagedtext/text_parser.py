r"""Parse plain text into content nodes and image insertion directives.

This module powers the first stage of the paging pipeline: every line of the
source text is either classified into a primary content node, turned into an
:class:`InsertionDirective`, or skipped. The results are returned as a
:class:`ParsedText` that the document assembler consumes.

Example
-------
>>> from pagedtext.text_parser import parse_document
>>> parsed = parse_document("Hello\n World\nimage:x.png,page=1,after=0\n")
>>> [node.kind.value for node in parsed.nodes]
['heading-minor', 'quoted-block']
>>> parsed.directives[0].target_page
1
"""

from __future__ import annotations

import dataclasses as dc
import logging
import re

from pagedtext._constants import (
    BUTTON_PREFIX,
    DIRECTIVE_MARKER,
    HEADING_MINOR_MAX_LENGTH,
    IMAGE_PREFIX,
    QUOTE_MARKER,
)
from pagedtext.errors import MalformedDirective
from pagedtext.nodes import (
    ContentNode,
    HeadingMajor,
    HeadingMinor,
    Image,
    LeafNode,
    QuotedBlock,
)

logger = logging.getLogger(__name__)

LINE_SPLIT_PATTERN = re.compile(r"\r\n|\n")


@dc.dataclass(frozen=True, slots=True)
class InsertionDirective:
    """Deferred request to insert ``element`` into a rendered page.

    Attributes
    ----------
    target_page : int
        1-based page number the element belongs to.
    after_index : int
        Zero-based position, within the page's container, of the child the
        element should follow.
    element : ContentNode
        Node to insert.
    """

    target_page: int
    after_index: int
    element: ContentNode


@dc.dataclass(slots=True)
class ParsedText:
    """Primary nodes and directives extracted from one text blob.

    Attributes
    ----------
    nodes : list[ContentNode]
        Primary nodes in source order.
    directives : list[InsertionDirective]
        Insertion directives in source order.
    errors : list[MalformedDirective]
        Directives that were dropped because their position did not parse.
    """

    nodes: list[ContentNode] = dc.field(default_factory=list)
    directives: list[InsertionDirective] = dc.field(default_factory=list)
    errors: list[MalformedDirective] = dc.field(default_factory=list)


def split_lines(text: str) -> list[str]:
    """Split ``text`` on CRLF or LF, dropping the empty tail of a final newline."""
    lines = LINE_SPLIT_PATTERN.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def classify_line(raw_line: str, stripped_line: str | None = None) -> LeafNode | None:
    """Return the primary node for ``raw_line`` or ``None`` when it is skipped.

    Parameters
    ----------
    raw_line : str
        Line as it appears in the source, leading whitespace included.
    stripped_line : str, optional
        Trimmed copy of the line; computed from ``raw_line`` when omitted.

    Returns
    -------
    LeafNode | None
        ``QuotedBlock`` for indented lines, ``HeadingMinor`` for short lines,
        ``HeadingMajor`` otherwise. Blank lines, ``image:`` lines (handled by
        :func:`parse_directive`) and ``button:`` lines produce ``None``.
    """
    stripped = raw_line.strip() if stripped_line is None else stripped_line
    if not stripped:
        return None
    if raw_line.startswith((IMAGE_PREFIX, BUTTON_PREFIX)):
        return None
    if raw_line.startswith(QUOTE_MARKER):
        return QuotedBlock(raw_line)
    if len(stripped) < HEADING_MINOR_MAX_LENGTH:
        return HeadingMinor(raw_line)
    return HeadingMajor(raw_line)


def is_directive(line: str) -> bool:
    """Return ``True`` when ``line`` is an ``image:`` line with a page position."""
    return line.startswith(IMAGE_PREFIX) and DIRECTIVE_MARKER in line


def _parse_position(key: str, value: str | None, line: str) -> int:
    """Convert a directive position value into an int."""
    if value is None:
        msg = f"Image directive is missing '{key}=': {line!r}"
        raise MalformedDirective(msg, line=line)
    try:
        number = int(value.strip())
    except ValueError:
        msg = f"Image directive has a non-integer '{key}' value {value!r}"
        raise MalformedDirective(msg, line=line) from None
    return number


def parse_directive(line: str) -> InsertionDirective:
    """Parse an ``image:<source>,page=<int>,after=<int>`` line.

    Parameters
    ----------
    line : str
        Line beginning with ``image:`` and containing ``,page=``.

    Returns
    -------
    InsertionDirective
        Directive carrying an :class:`~pagedtext.nodes.Image` element.

    Raises
    ------
    MalformedDirective
        If ``page`` or ``after`` is missing or not an integer. Range checks
        are left to the assembler, which drops directives for missing pages
        and appends elements whose ``after`` position is out of range.
    """
    source, *segments = line.removeprefix(IMAGE_PREFIX).split(",")
    options: dict[str, str] = {}
    for segment in segments:
        key, sep, value = segment.partition("=")
        if sep:
            options[key.strip()] = value
    page = _parse_position("page", options.get("page"), line)
    after = _parse_position("after", options.get("after"), line)
    return InsertionDirective(
        target_page=page, after_index=after, element=Image(source.strip())
    )


def parse_document(text: str) -> ParsedText:
    """Split ``text`` into primary nodes and insertion directives.

    Parameters
    ----------
    text : str
        Raw document text.

    Returns
    -------
    ParsedText
        Parsed nodes and directives. Directives that fail to parse are
        collected in ``errors`` and otherwise ignored so one bad line never
        aborts the rest of the document.
    """
    parsed = ParsedText()
    for number, raw_line in enumerate(split_lines(text), start=1):
        stripped = raw_line.strip()
        if not stripped:
            continue
        if is_directive(raw_line):
            try:
                parsed.directives.append(parse_directive(raw_line))
            except MalformedDirective as exc:
                exc.line_number = number
                logger.warning("Dropping image directive on line %d: %s", number, exc)
                parsed.errors.append(exc)
            continue
        if raw_line.startswith(IMAGE_PREFIX):
            source = raw_line.removeprefix(IMAGE_PREFIX).split(",", 1)[0].strip()
            if source:
                parsed.nodes.append(Image(source))
            continue
        node = classify_line(raw_line, stripped)
        if node is not None:
            parsed.nodes.append(node)
    return parsed


__all__ = [
    "InsertionDirective",
    "ParsedText",
    "classify_line",
    "is_directive",
    "parse_directive",
    "parse_document",
    "split_lines",
]
