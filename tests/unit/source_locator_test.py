"""Tests for the line-based source-element locator."""

from __future__ import annotations

import pytest

from designtools.core.errors import AmbiguousError, NotFoundError, UnparsableError
from designtools.core.source_locator import (
    LineSpan,
    class_boundary_regex,
    find_attribute_near,
    find_class_near,
    find_markers,
    find_opening_tag,
    find_tag_extent,
    locate_element,
)

CARDS = """\
export function Cards() {
  return (
    <div className="grid gap-4">
      <div className="card p-4">
        <h2 className="text-lg">One</h2>
      </div>
      <div className="card p-4">
        <h2 className="text-lg">Two</h2>
      </div>
    </div>
  )
}"""


class TestLocateElement:
    def test_unique_match_without_hint(self) -> None:
        span = locate_element(CARDS, "grid gap-4")
        assert span.anchor == 2
        assert (span.start, span.end) == (0, 4)

    def test_duplicates_without_hint_are_ambiguous(self) -> None:
        with pytest.raises(AmbiguousError) as exc_info:
            locate_element(CARDS, "card p-4")
        assert exc_info.value.count == 2

    def test_hint_picks_nearest_duplicate(self) -> None:
        assert locate_element(CARDS, "card p-4", line_hint=7).anchor == 6
        assert locate_element(CARDS, "card p-4", line_hint=4).anchor == 3

    def test_far_hint_falls_back_to_whole_file(self) -> None:
        text = "\n".join(["<p>x</p>"] * 20 + ['<span className="tag">t</span>'])
        assert locate_element(text, 'className="tag"', line_hint=1).anchor == 20

    def test_missing_identifier(self) -> None:
        with pytest.raises(NotFoundError):
            locate_element(CARDS, "does-not-exist")

    def test_eid_marker_wins(self) -> None:
        lines = CARDS.split("\n")
        lines[6] = lines[6].replace("<div", '<div data-studio-eid="sabcdef01"')
        text = "\n".join(lines)
        assert locate_element(text, "card p-4", eid="sabcdef01").anchor == 6

    def test_unknown_eid_is_not_found(self) -> None:
        with pytest.raises(NotFoundError):
            locate_element(CARDS, "card p-4", eid="s00000000")


class TestNearSearches:
    def test_class_boundaries(self) -> None:
        regex = class_boundary_regex("p-4")
        assert regex.search('className="card p-4"')
        assert not regex.search('className="card p-40"')
        assert not regex.search('className="sm:p-4"')

    def test_find_class_prefers_anchor_line(self) -> None:
        span = LineSpan(anchor=3, start=1, end=5)
        match = find_class_near(CARDS, span, "p-4")
        assert match.line == 3

    def test_find_class_outside_window_is_not_found(self) -> None:
        with pytest.raises(NotFoundError):
            find_class_near(CARDS, LineSpan(anchor=0, start=0, end=1), "text-lg")

    def test_find_attribute_value_span(self) -> None:
        match = find_attribute_near(CARDS, LineSpan(3, 3, 3), "className")
        assert match is not None
        line = CARDS.split("\n")[3]
        assert line[match.start : match.end] == "card p-4"

    def test_missing_attribute_is_none(self) -> None:
        assert find_attribute_near(CARDS, LineSpan(3, 3, 3), "id") is None

    def test_expression_attribute_is_unparsable(self) -> None:
        with pytest.raises(UnparsableError):
            find_attribute_near("<Button className={cn(a)} />", LineSpan(0, 0, 0), "className")

    def test_opening_tag_on_anchor_line(self) -> None:
        tag = find_opening_tag(CARDS, LineSpan(4, 2, 6))
        assert tag.line == 4
        assert CARDS.split("\n")[4][tag.start : tag.end] == "h2"

    def test_opening_tag_on_previous_line(self) -> None:
        text = '<Button\n  variant="outline"\n  size="sm"\n>'
        tag = find_opening_tag(text, LineSpan(2, 0, 3))
        assert (tag.line, text.split("\n")[0][tag.start : tag.end]) == (0, "Button")

    def test_find_markers(self) -> None:
        assert find_markers('<a data-studio-eid="s0123abcd" href="#">') == ["s0123abcd"]


class TestTagExtent:
    def test_single_line_tag(self) -> None:
        text = '<div className="a"><span id="x">x</span></div>'
        extent = find_tag_extent(text, LineSpan(0, 0, 0))
        assert text[extent.start : extent.end] == '<div className="a">'

    def test_arrow_inside_expression_does_not_close_tag(self) -> None:
        text = '<Button\n  onClick={() => go()}\n  size="sm"\n>'
        extent = find_tag_extent(text, LineSpan(0, 0, 3))
        assert (extent.line, extent.end_line) == (0, 3)

    def test_attribute_search_stays_inside_tag(self) -> None:
        text = '<div className="wrapper">\n  <section id="hero">'
        span = LineSpan(1, 0, 1)
        assert find_attribute_near(text, span, "className") is not None
        assert find_attribute_near(text, span, "className", within=find_tag_extent(text, span)) is None

    def test_unclosed_tag(self) -> None:
        with pytest.raises(NotFoundError):
            find_tag_extent('<div className="a"', LineSpan(0, 0, 0))
