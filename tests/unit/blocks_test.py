"""Tests for the brace-balanced block locator."""

from __future__ import annotations

from designtools.core.blocks import (
    THEME_HEAD,
    BlockSpan,
    find_block,
    find_selector_block,
    iter_blocks,
    match_close_brace,
    resolve_head,
    splice_block,
)


class TestFindBlock:
    def test_finds_root_block_body(self) -> None:
        css = ":root {\n  --a: 1;\n}\n"
        span = find_block(css, ":root")
        assert span is not None
        assert span.body(css) == "\n  --a: 1;\n"

    def test_nested_braces_do_not_end_block(self) -> None:
        css = "@media (min-width: 1px) {\n  .a { color: red; }\n  .b { color: blue; }\n}\n.c { x: 1; }"
        span = find_block(css, "@media (min-width: 1px)")
        assert span is not None
        assert ".b { color: blue; }" in span.body(css)
        assert ".c" not in span.body(css)

    def test_returns_first_occurrence_only(self) -> None:
        css = ":root { --a: 1; }\n:root { --a: 2; }"
        span = find_block(css, ":root")
        assert span is not None
        assert span.body(css) == " --a: 1; "

    def test_unbalanced_block_is_absent(self) -> None:
        assert find_block(":root { --a: 1;", ":root") is None

    def test_missing_selector_is_absent(self) -> None:
        assert find_block(".dark { --a: 1; }", ":root") is None

    def test_selector_is_matched_literally(self) -> None:
        css = ".dark { --a: 1; }"
        assert find_block(css, "xdark") is None
        assert find_block(css, ".dark") is not None

    def test_theme_pattern_matches_inline_variant(self) -> None:
        css = "@theme inline {\n  --shadow-x: 0 1px red;\n}"
        span = find_block(css, THEME_HEAD, pattern=True)
        assert span is not None
        assert "--shadow-x" in span.body(css)


class TestIterBlocks:
    def test_yields_every_occurrence(self) -> None:
        css = "@theme { --a: 1; }\n@theme inline { --b: 2; }"
        bodies = [s.body(css).strip() for s in iter_blocks(css, THEME_HEAD, pattern=True)]
        assert bodies == ["--a: 1;", "--b: 2;"]


class TestHelpers:
    def test_resolve_head_maps_theme(self) -> None:
        assert resolve_head("@theme") == (THEME_HEAD, True)
        assert resolve_head(":root") == (":root", False)

    def test_find_selector_block_understands_theme(self) -> None:
        css = "@theme {\n  --a: 1;\n}"
        assert find_selector_block(css, "@theme") is not None

    def test_match_close_brace(self) -> None:
        text = "{ { } }"
        assert match_close_brace(text, 0) == 6
        assert match_close_brace("{ {", 0) is None

    def test_splice_keeps_bytes_outside_span(self) -> None:
        css = "a { x } b"
        span = BlockSpan(2, 6)
        assert splice_block(css, span, " y ") == "a { y } b"
