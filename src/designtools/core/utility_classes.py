"""Bidirectional Tailwind class mapping.

``parse_classes`` turns a class string into categorized
:class:`~designtools.models.StructuredProperty` entries; ``build_class`` goes
the other way. Both go through a :class:`ClassPatternTable`, so the regex
table can be replaced without touching callers.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from designtools.core.ports.patterns import ClassMatch, ClassPatternTable
from designtools.models import ClassCategory, ParsedClasses, StructuredProperty

SPACING_SCALE = (
    "0", "px", "0.5", "1", "1.5", "2", "2.5", "3", "3.5", "4", "5", "6",
    "7", "8", "9", "10", "11", "12", "14", "16", "20", "24", "28", "32",
    "36", "40", "44", "48", "52", "56", "60", "64", "72", "80", "96",
)  # fmt: skip
RADIUS_SCALE = ("none", "sm", "DEFAULT", "md", "lg", "xl", "2xl", "3xl", "full")
FONT_SIZE_SCALE = ("xs", "sm", "base", "lg", "xl", "2xl", "3xl", "4xl", "5xl", "6xl", "7xl", "8xl", "9xl")
FONT_WEIGHT_SCALE = ("thin", "extralight", "light", "normal", "medium", "semibold", "bold", "extrabold", "black")
LINE_HEIGHT_SCALE = ("none", "tight", "snug", "normal", "relaxed", "loose")
LETTER_SPACING_SCALE = ("tighter", "tight", "normal", "wide", "wider", "widest")

_ARBITRARY = r"\[[^\]\s]+\]"
_COLOR_VALUE = rf"([\w-]+(?:/\d+)?|{_ARBITRARY})"
_SPACING_VALUE = rf"([\d.]+|px|{_ARBITRARY})"
_MARGIN_VALUE = rf"([\d.]+|px|auto|{_ARBITRARY})"
_ARBITRARY_LENGTH_RE = re.compile(r"^\[-?[\d.]+(?:px|rem|em|%|vh|vw|pt)?\]$")

_TEXT_ALIGN = ("left", "center", "right", "justify")
_BORDER_WIDTHS = ("0", "2", "4", "8")
_RING_WIDTHS = ("0", "1", "2", "4", "8")


@dataclass(frozen=True)
class ClassPattern:
    regex: re.Pattern[str]
    category: ClassCategory
    property: str
    label: str
    fixed_value: str | None = None

    def value(self, m: re.Match[str]) -> str:
        if self.fixed_value is not None:
            return self.fixed_value
        return m.group(1)


def _p(regex: str, category: ClassCategory, prop: str, label: str, fixed: str | None = None) -> ClassPattern:
    return ClassPattern(re.compile(f"^{regex}$"), category, prop, label, fixed)


CLASS_PATTERNS: tuple[ClassPattern, ...] = (
    # Colors
    _p(f"bg-{_COLOR_VALUE}", "color", "backgroundColor", "Background"),
    _p(f"text-{_COLOR_VALUE}", "color", "textColor", "Text"),
    _p(f"border-{_COLOR_VALUE}", "color", "borderColor", "Border"),
    _p(f"ring-{_COLOR_VALUE}", "color", "ringColor", "Ring"),
    _p(f"outline-{_COLOR_VALUE}", "color", "outlineColor", "Outline"),
    # Spacing
    _p(f"p-{_SPACING_VALUE}", "spacing", "padding", "Padding"),
    _p(f"px-{_SPACING_VALUE}", "spacing", "paddingX", "Padding X"),
    _p(f"py-{_SPACING_VALUE}", "spacing", "paddingY", "Padding Y"),
    _p(f"pt-{_SPACING_VALUE}", "spacing", "paddingTop", "Padding Top"),
    _p(f"pr-{_SPACING_VALUE}", "spacing", "paddingRight", "Padding Right"),
    _p(f"pb-{_SPACING_VALUE}", "spacing", "paddingBottom", "Padding Bottom"),
    _p(f"pl-{_SPACING_VALUE}", "spacing", "paddingLeft", "Padding Left"),
    _p(f"m-{_MARGIN_VALUE}", "spacing", "margin", "Margin"),
    _p(f"mx-{_MARGIN_VALUE}", "spacing", "marginX", "Margin X"),
    _p(f"my-{_MARGIN_VALUE}", "spacing", "marginY", "Margin Y"),
    _p(f"mt-{_MARGIN_VALUE}", "spacing", "marginTop", "Margin Top"),
    _p(f"mr-{_MARGIN_VALUE}", "spacing", "marginRight", "Margin Right"),
    _p(f"mb-{_MARGIN_VALUE}", "spacing", "marginBottom", "Margin Bottom"),
    _p(f"ml-{_MARGIN_VALUE}", "spacing", "marginLeft", "Margin Left"),
    _p(f"gap-{_SPACING_VALUE}", "spacing", "gap", "Gap"),
    _p(f"gap-x-{_SPACING_VALUE}", "spacing", "gapX", "Gap X"),
    _p(f"gap-y-{_SPACING_VALUE}", "spacing", "gapY", "Gap Y"),
    _p(r"space-x-([\d.]+)", "spacing", "spaceX", "Space X"),
    _p(r"space-y-([\d.]+)", "spacing", "spaceY", "Space Y"),
    # Shape
    _p("rounded", "shape", "borderRadius", "Radius", fixed="DEFAULT"),
    _p(f"rounded-(none|sm|md|lg|xl|2xl|3xl|full|{_ARBITRARY})", "shape", "borderRadius", "Radius"),
    _p("border", "shape", "borderWidth", "Border Width", fixed="1"),
    _p(f"border-(0|2|4|8|{_ARBITRARY})", "shape", "borderWidth", "Border Width"),
    _p(f"ring-(0|1|2|4|8|{_ARBITRARY})", "shape", "ringWidth", "Ring Width"),
    _p(f"outline-(0|1|2|4|8|{_ARBITRARY})", "shape", "outlineWidth", "Outline Width"),
    # Typography
    _p(f"text-(xs|sm|base|lg|xl|[2-9]xl|{_ARBITRARY})", "typography", "fontSize", "Font Size"),
    _p("font-(thin|extralight|light|normal|medium|semibold|bold|extrabold|black)", "typography", "fontWeight", "Font Weight"),
    _p("leading-(none|tight|snug|normal|relaxed|loose)", "typography", "lineHeight", "Line Height"),
    _p("tracking-(tighter|tight|normal|wide|wider|widest)", "typography", "letterSpacing", "Letter Spacing"),
    _p("font-(sans|serif|mono)", "typography", "fontFamily", "Font Family"),
    _p("text-(left|center|right|justify)", "typography", "textAlign", "Text Align"),
    _p("(uppercase|lowercase|capitalize|normal-case)", "typography", "textTransform", "Text Transform"),
    _p("(underline|overline|line-through|no-underline)", "typography", "textDecoration", "Text Decoration"),
    _p("(truncate|whitespace-nowrap|whitespace-normal)", "typography", "overflow", "Overflow"),
    # Layout
    _p("(flex|inline-flex|grid|inline-grid|block|inline-block|inline|hidden)", "layout", "display", "Display"),
    _p("(flex-row|flex-col|flex-row-reverse|flex-col-reverse)", "layout", "flexDirection", "Direction"),
    _p("(flex-wrap|flex-nowrap|flex-wrap-reverse)", "layout", "flexWrap", "Wrap"),
    _p("items-(start|end|center|baseline|stretch)", "layout", "alignItems", "Align Items"),
    _p("justify-(start|end|center|between|around|evenly)", "layout", "justifyContent", "Justify"),
    _p("(self-auto|self-start|self-end|self-center|self-stretch)", "layout", "alignSelf", "Align Self"),
    _p(r"grid-cols-(\d+|none)", "layout", "gridCols", "Grid Columns"),
    _p(r"grid-rows-(\d+|none)", "layout", "gridRows", "Grid Rows"),
    _p(r"col-span-(\d+|full)", "layout", "colSpan", "Column Span"),
    _p(r"row-span-(\d+)", "layout", "rowSpan", "Row Span"),
    _p("(relative|absolute|fixed|sticky)", "layout", "position", "Position"),
    _p("(overflow-hidden|overflow-auto|overflow-scroll|overflow-visible)", "layout", "overflow", "Overflow"),
    # Size
    _p(rf"w-([\d.]+|full|screen|auto|min|max|fit|px|{_ARBITRARY})", "size", "width", "Width"),
    _p(rf"h-([\d.]+|full|screen|auto|min|max|fit|px|{_ARBITRARY})", "size", "height", "Height"),
    _p(r"min-w-([\d.]+|full|min|max|fit|0)", "size", "minWidth", "Min Width"),
    _p(r"min-h-([\d.]+|full|screen|min|max|fit|0)", "size", "minHeight", "Min Height"),
    _p(r"max-w-([\w.]+)", "size", "maxWidth", "Max Width"),
    _p(r"max-h-([\w.]+)", "size", "maxHeight", "Max Height"),
    _p(r"size-([\d.]+|full|auto|px)", "size", "size", "Size"),
    _p("(flex-1|flex-auto|flex-initial|flex-none)", "size", "flex", "Flex"),
    _p("(grow|grow-0|shrink|shrink-0)", "size", "flexGrowShrink", "Grow/Shrink"),
)


def _excluded(pattern: ClassPattern, value: str) -> bool:
    """Values a color pattern must leave to a later pattern with the same prefix."""
    if pattern.property == "textColor":
        return value in FONT_SIZE_SCALE or value in _TEXT_ALIGN or bool(_ARBITRARY_LENGTH_RE.match(value))
    if pattern.property == "borderColor":
        return value in _BORDER_WIDTHS or bool(_ARBITRARY_LENGTH_RE.match(value))
    if pattern.property in ("ringColor", "outlineColor"):
        return value in _RING_WIDTHS or bool(_ARBITRARY_LENGTH_RE.match(value))
    return False


def _keep(prefix: str) -> Callable[[str], str]:
    return lambda v: f"{prefix}-{v}"


_FORMATTERS: dict[str, Callable[[str], str]] = {
    "backgroundColor": _keep("bg"),
    "textColor": _keep("text"),
    "borderColor": _keep("border"),
    "ringColor": _keep("ring"),
    "outlineColor": _keep("outline"),
    "padding": _keep("p"),
    "paddingX": _keep("px"),
    "paddingY": _keep("py"),
    "paddingTop": _keep("pt"),
    "paddingRight": _keep("pr"),
    "paddingBottom": _keep("pb"),
    "paddingLeft": _keep("pl"),
    "margin": _keep("m"),
    "marginX": _keep("mx"),
    "marginY": _keep("my"),
    "marginTop": _keep("mt"),
    "marginRight": _keep("mr"),
    "marginBottom": _keep("mb"),
    "marginLeft": _keep("ml"),
    "gap": _keep("gap"),
    "gapX": _keep("gap-x"),
    "gapY": _keep("gap-y"),
    "spaceX": _keep("space-x"),
    "spaceY": _keep("space-y"),
    "borderRadius": lambda v: "rounded" if v == "DEFAULT" else f"rounded-{v}",
    "borderWidth": lambda v: "border" if v == "1" else f"border-{v}",
    "ringWidth": _keep("ring"),
    "outlineWidth": _keep("outline"),
    "fontSize": _keep("text"),
    "fontWeight": _keep("font"),
    "lineHeight": _keep("leading"),
    "letterSpacing": _keep("tracking"),
    "fontFamily": _keep("font"),
    "textAlign": _keep("text"),
    "display": lambda v: v,
    "flexDirection": lambda v: v,
    "flexWrap": lambda v: v,
    "alignItems": _keep("items"),
    "justifyContent": _keep("justify"),
    "gridCols": _keep("grid-cols"),
    "gridRows": _keep("grid-rows"),
    "colSpan": _keep("col-span"),
    "rowSpan": _keep("row-span"),
    "width": _keep("w"),
    "height": _keep("h"),
    "minWidth": _keep("min-w"),
    "minHeight": _keep("min-h"),
    "maxWidth": _keep("max-w"),
    "maxHeight": _keep("max-h"),
    "size": _keep("size"),
}


class TailwindPatternTable:
    """Ordered regex table; the first matching pattern wins.

    Implements the ``ClassPatternTable`` protocol.
    """

    def __init__(self, patterns: tuple[ClassPattern, ...] = CLASS_PATTERNS) -> None:
        self._patterns = patterns

    def match(self, core: str) -> ClassMatch | None:
        for pattern in self._patterns:
            m = pattern.regex.match(core)
            if m is None:
                continue
            value = pattern.value(m)
            if _excluded(pattern, value):
                continue
            return ClassMatch(pattern.category, pattern.property, pattern.label, value)
        return None

    def format(self, property: str, value: str) -> str | None:
        formatter = _FORMATTERS.get(property)
        if formatter is None:
            return None
        return formatter(value)


DEFAULT_TABLE = TailwindPatternTable()


def split_variant_prefix(cls: str) -> tuple[str | None, str]:
    """Split ``sm:hover:bg-red-500`` into ``("sm:hover:", "bg-red-500")``.

    Colons inside an arbitrary ``[...]`` value do not count as separators.
    """
    depth = 0
    split_at = -1
    for i, ch in enumerate(cls):
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth = max(0, depth - 1)
        elif ch == ":" and depth == 0:
            split_at = i
    if split_at < 0:
        return None, cls
    return cls[: split_at + 1], cls[split_at + 1 :]


def split_classes(text: str) -> list[str]:
    return text.split()


def parse_classes(text: str, table: ClassPatternTable | None = None) -> ParsedClasses:
    table = table or DEFAULT_TABLE
    result = ParsedClasses()
    for cls in split_classes(text):
        prefix, core = split_variant_prefix(cls)
        match = table.match(core)
        if match is None:
            prop = StructuredProperty(
                category="other",
                property="unknown",
                label=cls,
                value=cls,
                full_class_text=cls,
                variant_prefix=prefix,
            )
        else:
            prop = StructuredProperty(
                category=match.category,
                property=match.property,
                label=match.label,
                value=match.value,
                full_class_text=cls,
                variant_prefix=prefix,
            )
        getattr(result, prop.category).append(prop)
    return result


def build_class(property: str, value: str, prefix: str | None = None, table: ClassPatternTable | None = None) -> str:
    """Build the class for *property* at *value*, re-prepending *prefix*.

    Unknown properties return *value* unchanged so raw classes pass through.
    """
    core = (table or DEFAULT_TABLE).format(property, value)
    if core is None:
        return value
    if prefix:
        return f"{prefix if prefix.endswith(':') else prefix + ':'}{core}"
    return core


def replace_class(text: str, old: str, new: str) -> str:
    classes = split_classes(text)
    if old not in classes:
        return text
    classes[classes.index(old)] = new
    return " ".join(c for c in classes if c)


def add_class(text: str, cls: str) -> str:
    classes = split_classes(text)
    if cls in classes:
        return text
    return " ".join([*classes, cls])


def remove_class(text: str, cls: str) -> str:
    return " ".join(c for c in split_classes(text) if c != cls)
