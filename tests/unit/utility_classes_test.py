"""Tests for the utility-class mapper."""

from __future__ import annotations

import pytest

from designtools.core.ports.patterns import ClassMatch
from designtools.core.utility_classes import (
    add_class,
    build_class,
    parse_classes,
    remove_class,
    replace_class,
    split_variant_prefix,
)


class TestParseClasses:
    def test_prefixed_color_and_spacing(self) -> None:
        parsed = parse_classes("sm:bg-red-500 p-4")
        assert len(parsed.color) == 1
        color = parsed.color[0]
        assert (color.property, color.value, color.variant_prefix) == ("backgroundColor", "red-500", "sm:")
        assert color.full_class_text == "sm:bg-red-500"
        assert len(parsed.spacing) == 1
        assert (parsed.spacing[0].property, parsed.spacing[0].value) == ("padding", "4")
        assert parsed.spacing[0].variant_prefix is None

    @pytest.mark.parametrize(
        ("cls", "category", "prop", "value"),
        [
            ("text-lg", "typography", "fontSize", "lg"),
            ("text-primary", "color", "textColor", "primary"),
            ("text-center", "typography", "textAlign", "center"),
            ("text-[14px]", "typography", "fontSize", "[14px]"),
            ("text-[#333]", "color", "textColor", "[#333]"),
            ("border", "shape", "borderWidth", "1"),
            ("border-2", "shape", "borderWidth", "2"),
            ("border-input", "color", "borderColor", "input"),
            ("border-[3px]", "shape", "borderWidth", "[3px]"),
            ("border-[#fff]", "color", "borderColor", "[#fff]"),
            ("ring-2", "shape", "ringWidth", "2"),
            ("ring-[2px]", "shape", "ringWidth", "[2px]"),
            ("ring-primary", "color", "ringColor", "primary"),
            ("outline-[2px]", "shape", "outlineWidth", "[2px]"),
            ("outline-[#000]", "color", "outlineColor", "[#000]"),
            ("rounded", "shape", "borderRadius", "DEFAULT"),
            ("rounded-lg", "shape", "borderRadius", "lg"),
            ("px-2.5", "spacing", "paddingX", "2.5"),
            ("mx-auto", "spacing", "marginX", "auto"),
            ("gap-x-4", "spacing", "gapX", "4"),
            ("font-semibold", "typography", "fontWeight", "semibold"),
            ("font-mono", "typography", "fontFamily", "mono"),
            ("flex", "layout", "display", "flex"),
            ("items-center", "layout", "alignItems", "center"),
            ("w-full", "size", "width", "full"),
            ("h-[42px]", "size", "height", "[42px]"),
            ("bg-primary/90", "color", "backgroundColor", "primary/90"),
        ],
    )
    def test_classification(self, cls: str, category: str, prop: str, value: str) -> None:
        (parsed,) = parse_classes(cls).all()
        assert (parsed.category, parsed.property, parsed.value) == (category, prop, value)

    def test_unknown_class_goes_to_other(self) -> None:
        parsed = parse_classes("animate-spin")
        assert parsed.other[0].property == "unknown"
        assert parsed.other[0].value == "animate-spin"

    def test_custom_table_is_used(self) -> None:
        class OnlyBrand:
            def match(self, core: str) -> ClassMatch | None:
                return ClassMatch("color", "brand", "Brand", core) if core == "brand" else None

            def format(self, property: str, value: str) -> str | None:
                return None

        parsed = parse_classes("brand p-4", table=OnlyBrand())
        assert [p.property for p in parsed.all()] == ["brand", "unknown"]


class TestVariantPrefix:
    def test_stacked_prefixes(self) -> None:
        assert split_variant_prefix("md:hover:bg-red-500") == ("md:hover:", "bg-red-500")

    def test_colon_inside_arbitrary_value(self) -> None:
        assert split_variant_prefix("bg-[url(a:b)]") == (None, "bg-[url(a:b)]")


class TestBuildClass:
    @pytest.mark.parametrize(
        ("prop", "value", "expected"),
        [
            ("backgroundColor", "red-500", "bg-red-500"),
            ("padding", "4", "p-4"),
            ("borderRadius", "DEFAULT", "rounded"),
            ("borderRadius", "md", "rounded-md"),
            ("borderWidth", "1", "border"),
            ("fontSize", "lg", "text-lg"),
            ("display", "grid", "grid"),
        ],
    )
    def test_builds_class(self, prop: str, value: str, expected: str) -> None:
        assert build_class(prop, value) == expected

    def test_prefix_is_reapplied(self) -> None:
        assert build_class("backgroundColor", "blue-500", "sm:") == "sm:bg-blue-500"
        assert build_class("backgroundColor", "blue-500", "hover") == "hover:bg-blue-500"

    def test_unknown_property_passes_value_through(self) -> None:
        assert build_class("unknown", "animate-spin") == "animate-spin"

    def test_parse_then_build_round_trip(self) -> None:
        for prop in parse_classes("sm:bg-red-500 p-4 rounded text-lg border-2").all():
            assert build_class(prop.property, prop.value, prop.variant_prefix) == prop.full_class_text


class TestClassListEdits:
    def test_replace(self) -> None:
        assert replace_class("a b c", "b", "x") == "a x c"
        assert replace_class("a b c", "z", "x") == "a b c"

    def test_add_is_idempotent(self) -> None:
        assert add_class("a b", "c") == "a b c"
        assert add_class("a b", "b") == "a b"

    def test_remove(self) -> None:
        assert remove_class("a b c", "b") == "a c"
