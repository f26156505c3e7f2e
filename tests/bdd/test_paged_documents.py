"""Behaviour tests for paging and image insertion.

These pytest-bdd scenarios drive ``build_paged_document`` with generated text
and inspect the resulting HTML with BeautifulSoup. The feature files
``image_directives.feature`` and ``page_navigation.feature`` describe how
directive images are placed, how unmatched or malformed directives are
dropped, and how page visibility is initialised.

Usage
-----
Run ``pytest tests/bdd/test_paged_documents.py -v`` after installing the test
extra (``pip install -e '.[test]'``). No network access is required.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from pagedtext.generator import build_paged_document

if typ.TYPE_CHECKING:
    from pagedtext.generator import PagedResult

FEATURE_DIR = Path(__file__).resolve().parents[2] / "features"
scenarios(
    FEATURE_DIR / "image_directives.feature",
    FEATURE_DIR / "page_navigation.feature",
)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {"lines": []}


def _lines(scenario_state: dict[str, object]) -> list[str]:
    return typ.cast("list[str]", scenario_state["lines"])


def _soup(scenario_state: dict[str, object]) -> BeautifulSoup:
    return typ.cast("BeautifulSoup", scenario_state["soup"])


def _page_elements(scenario_state: dict[str, object], number: int) -> list[typ.Any]:
    """Return the elements inside the container of 1-based page ``number``."""
    container = _soup(scenario_state).select_one(f"#page{number - 1} > div.contentText")
    assert container is not None, f"page {number} was not rendered"
    return container.find_all(recursive=False)


@given(parsers.parse("a text with {count:d} short lines"))
def given_short_lines(scenario_state: dict[str, object], count: int) -> None:
    """Add ``count`` distinct lines short enough to become minor headings."""
    _lines(scenario_state).extend(f"line {idx}" for idx in range(count))


@given(parsers.parse('the directive line "{line}"'))
def given_directive_line(scenario_state: dict[str, object], line: str) -> None:
    """Append an ``image:`` directive line to the text."""
    _lines(scenario_state).append(line)


@when(parsers.parse("the text is converted with {per_page:d} elements per page"))
def when_converted(scenario_state: dict[str, object], per_page: int) -> None:
    """Run the paging pipeline and parse the resulting HTML."""
    text = "\n".join(_lines(scenario_state)) + "\n"
    result = build_paged_document(text, per_page)
    scenario_state["result"] = result
    scenario_state["soup"] = BeautifulSoup(result.html, "html.parser")


@then(
    parsers.re(r"the document has (?P<count>\d+) pages?"),
    converters={"count": int},
)
def then_page_count(scenario_state: dict[str, object], count: int) -> None:
    """Verify both the assembled and rendered page counts."""
    result = typ.cast("PagedResult", scenario_state["result"])
    assert result.page_count == count
    assert len(_soup(scenario_state).select("div.page")) == count


@then(parsers.parse("page {number:d} holds {count:d} elements"))
def then_page_holds(scenario_state: dict[str, object], number: int, count: int) -> None:
    """Verify the number of elements rendered on a page."""
    elements = _page_elements(scenario_state, number)
    assert len(elements) == count, f"expected {count} elements, got {len(elements)}"


@then(parsers.parse('element {position:d} of page {number:d} is the image "{source}"'))
def then_element_is_image(
    scenario_state: dict[str, object], position: int, number: int, source: str
) -> None:
    """Verify that the 1-based ``position`` on page ``number`` is an image."""
    element = _page_elements(scenario_state, number)[position - 1]
    assert element.name == "img"
    assert element["src"] == source


@then("no image is rendered")
def then_no_image(scenario_state: dict[str, object]) -> None:
    """Verify that no ``<img>`` appears anywhere in the output."""
    assert not _soup(scenario_state).find_all("img")


@then(parsers.parse("{count:d} directive was rejected"))
def then_rejected(scenario_state: dict[str, object], count: int) -> None:
    """Verify how many directives failed to parse."""
    result = typ.cast("PagedResult", scenario_state["result"])
    assert len(result.errors) == count


@then(parsers.parse("only page {number:d} is visible"))
def then_only_page_visible(scenario_state: dict[str, object], number: int) -> None:
    """Verify the initial display style of every page block."""
    pages = _soup(scenario_state).select("div.page")
    visible = [idx + 1 for idx, page in enumerate(pages) if page["style"] == "display:block"]
    assert visible == [number]


@then(parsers.parse("the navigation script counts {count:d} pages"))
def then_script_counts(scenario_state: dict[str, object], count: int) -> None:
    """Verify the page total embedded in the navigation script."""
    script = _soup(scenario_state).find("script").get_text()
    assert f"const totalPages = {count};" in script
