"""Unit tests for page assembly and image insertion.

These tests exercise ``pagedtext.generator.assembler.assemble_pages``: chunking
primary nodes into fixed-size pages, preserving their order, and applying
insertion directives with the append-when-out-of-range policy.
"""

from __future__ import annotations

import math

import pytest

from pagedtext.generator.assembler import assemble_pages, count_pages
from pagedtext.nodes import HeadingMinor, Image
from pagedtext.text_parser import InsertionDirective


def _nodes(count: int) -> list[HeadingMinor]:
    """Return ``count`` distinct minor headings."""
    return [HeadingMinor(f"node {idx}") for idx in range(count)]


@pytest.mark.parametrize(
    ("count", "per_page"), [(0, 70), (1, 70), (70, 70), (71, 70), (140, 70), (5, 2), (7, 1)]
)
def test_page_count_is_ceiling_of_nodes_per_page(count: int, per_page: int) -> None:
    """The number of pages is ``ceil(nodes / per_page)``."""
    document = assemble_pages(_nodes(count), [], per_page)
    expected = math.ceil(count / per_page)
    assert document.page_count == expected == count_pages(count, per_page)


def test_empty_input_yields_no_pages() -> None:
    """No primary nodes means no pages, even with directives present."""
    directive = InsertionDirective(1, 0, Image("x.png"))
    document = assemble_pages([], [directive])
    assert document.pages == []
    assert document.dropped == [directive]


def test_pages_split_in_source_order() -> None:
    """140 nodes at 70 per page give two pages holding 0-69 and 70-139."""
    nodes = _nodes(140)
    document = assemble_pages(nodes, [], 70)
    assert document.page_count == 2
    assert list(document.pages[0].primary) == nodes[:70]
    assert list(document.pages[1].primary) == nodes[70:]
    assert [page.number for page in document.pages] == [1, 2]


def test_concatenated_primary_slices_reconstruct_input() -> None:
    """Inserted elements never leak into the primary slices."""
    nodes = _nodes(23)
    directives = [
        InsertionDirective(1, 2, Image("a.png")),
        InsertionDirective(3, 0, Image("b.png")),
    ]
    document = assemble_pages(nodes, directives, 10)
    rebuilt = [node for page in document.pages for node in page.primary]
    assert rebuilt == nodes


def test_directive_inserts_after_requested_position() -> None:
    """A directive for page 1 after 5 puts the image at index 6 of 11."""
    nodes = _nodes(10)
    image = Image("x.png")
    document = assemble_pages(nodes, [InsertionDirective(1, 5, image)], 70)
    children = document.pages[0].container.children
    assert len(children) == 11
    assert children[6] is image
    assert children[:6] == nodes[:6]
    assert children[7:] == nodes[6:]


def test_directive_targets_one_based_page() -> None:
    """Directive page 2 applies to the second assembled page."""
    nodes = _nodes(4)
    image = Image("second.png")
    document = assemble_pages(nodes, [InsertionDirective(2, 0, image)], 2)
    assert image not in document.pages[0].container.children
    assert document.pages[1].container.children == [nodes[2], image, nodes[3]]


@pytest.mark.parametrize("after", [3, 50, -1])
def test_out_of_range_position_appends(after: int) -> None:
    """Positions outside the current children append instead of failing."""
    nodes = _nodes(3)
    image = Image("tail.png")
    document = assemble_pages(nodes, [InsertionDirective(1, after, image)], 70)
    assert document.pages[0].container.children == [*nodes, image]


def test_directives_apply_in_order_and_shift_positions() -> None:
    """Later directives see the children added by earlier ones."""
    nodes = _nodes(3)
    first, second = Image("first.png"), Image("second.png")
    directives = [InsertionDirective(1, 0, first), InsertionDirective(1, 0, second)]
    document = assemble_pages(nodes, directives, 70)
    assert document.pages[0].container.children == [
        nodes[0],
        second,
        first,
        nodes[1],
        nodes[2],
    ]


def test_position_can_address_previous_insertions() -> None:
    """Positions count children inserted by earlier directives."""
    nodes = _nodes(2)
    first, second = Image("first.png"), Image("second.png")
    directives = [InsertionDirective(1, 0, first), InsertionDirective(1, 1, second)]
    document = assemble_pages(nodes, directives, 70)
    assert document.pages[0].container.children == [nodes[0], first, second, nodes[1]]


def test_unmatched_page_is_dropped() -> None:
    """A directive for page 99 of a two-page document creates no page."""
    directive = InsertionDirective(99, 0, Image("x.png"))
    document = assemble_pages(_nodes(140), [directive], 70)
    assert document.page_count == 2
    assert document.dropped == [directive]
    assert all(
        directive.element not in page.container.children for page in document.pages
    )


def test_page_zero_is_unmatched() -> None:
    """Directive pages are 1-based, so page 0 never matches."""
    directive = InsertionDirective(0, 0, Image("x.png"))
    document = assemble_pages(_nodes(3), [directive], 70)
    assert document.dropped == [directive]


@pytest.mark.parametrize("per_page", [0, -5])
def test_non_positive_page_size_is_rejected(per_page: int) -> None:
    """Page size must be at least one element."""
    with pytest.raises(ValueError, match="positive integer"):
        assemble_pages(_nodes(3), [], per_page)
