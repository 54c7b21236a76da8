"""Map a rendered (computed) CSS value onto the nearest utility class.

An exact scale hit produces the scale class (``pt-4``); anything else uses
the arbitrary-value form (``pt-[13px]``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from designtools.core.errors import UnparsableError
from designtools.core.utility_classes import SPACING_SCALE

ROOT_FONT_SIZE_PX = 16.0

# CSS property -> (class prefix, scale kind)
CSS_PROPERTY_PREFIXES: dict[str, tuple[str, str]] = {
    "font-size": ("text", "font-size"),
    "font-weight": ("font", "font-weight"),
    "line-height": ("leading", "line-height"),
    "letter-spacing": ("tracking", "letter-spacing"),
    "gap": ("gap", "spacing"),
    "row-gap": ("gap-y", "spacing"),
    "column-gap": ("gap-x", "spacing"),
    "padding": ("p", "spacing"),
    "padding-top": ("pt", "spacing"),
    "padding-right": ("pr", "spacing"),
    "padding-bottom": ("pb", "spacing"),
    "padding-left": ("pl", "spacing"),
    "margin": ("m", "spacing"),
    "margin-top": ("mt", "spacing"),
    "margin-right": ("mr", "spacing"),
    "margin-bottom": ("mb", "spacing"),
    "margin-left": ("ml", "spacing"),
    "width": ("w", "spacing"),
    "height": ("h", "spacing"),
    "border-radius": ("rounded", "radius"),
    "border-top-left-radius": ("rounded-tl", "radius"),
    "border-top-right-radius": ("rounded-tr", "radius"),
    "border-bottom-right-radius": ("rounded-br", "radius"),
    "border-bottom-left-radius": ("rounded-bl", "radius"),
    "color": ("text", "color"),
    "background-color": ("bg", "color"),
    "border-color": ("border", "color"),
}

# Pixel sizes of the default theme scales.
FONT_SIZE_PX = {
    12: "xs", 14: "sm", 16: "base", 18: "lg", 20: "xl", 24: "2xl", 30: "3xl",
    36: "4xl", 48: "5xl", 60: "6xl", 72: "7xl", 96: "8xl", 128: "9xl",
}  # fmt: skip
FONT_WEIGHT_NAMES = {
    100: "thin", 200: "extralight", 300: "light", 400: "normal", 500: "medium",
    600: "semibold", 700: "bold", 800: "extrabold", 900: "black",
}  # fmt: skip
RADIUS_PX = {0: "none", 2: "sm", 4: "DEFAULT", 6: "md", 8: "lg", 12: "xl", 16: "2xl", 24: "3xl", 9999: "full"}
LINE_HEIGHT_RATIOS = {1.0: "none", 1.25: "tight", 1.375: "snug", 1.5: "normal", 1.625: "relaxed", 2.0: "loose"}
LETTER_SPACING_EM = {-0.05: "tighter", -0.025: "tight", 0.0: "normal", 0.025: "wide", 0.05: "wider", 0.1: "widest"}

_NUMBER_RE = re.compile(r"^(-?\d*\.?\d+)\s*(px|rem|em|%)?$")


@dataclass(frozen=True)
class ClassSuggestion:
    class_name: str
    exact: bool


def _parse_number(value: str) -> tuple[float, str] | None:
    m = _NUMBER_RE.match(value.strip())
    if m is None:
        return None
    return float(m.group(1)), m.group(2) or ""


def _to_px(value: str) -> float | None:
    parsed = _parse_number(value)
    if parsed is None:
        return None
    number, unit = parsed
    if unit in ("rem", "em"):
        return number * ROOT_FONT_SIZE_PX
    if unit in ("px", "") or number == 0:
        return number
    return None


def _format_number(number: float) -> str:
    return f"{number:g}"


def _spacing_step(value: str) -> str | None:
    if value.strip() == "auto":
        return "auto"
    px = _to_px(value)
    if px is None:
        return None
    if px == 1:
        return "px"
    step = _format_number(px / 4)
    return step if step in SPACING_SCALE else None


def _lookup(kind: str, value: str) -> str | None:
    if kind == "spacing":
        return _spacing_step(value)
    if kind == "font-size":
        px = _to_px(value)
        return FONT_SIZE_PX.get(int(px)) if px is not None and px == int(px) else None
    if kind == "font-weight":
        parsed = _parse_number(value)
        if parsed is None:
            return value if value in FONT_WEIGHT_NAMES.values() else None
        return FONT_WEIGHT_NAMES.get(int(parsed[0]))
    if kind == "radius":
        px = _to_px(value)
        if px is None:
            return None
        return RADIUS_PX.get(9999 if px >= 9999 else int(px)) if px == int(px) else None
    if kind == "line-height":
        parsed = _parse_number(value)
        if parsed is None or parsed[1] not in ("", "em"):
            return None
        return LINE_HEIGHT_RATIOS.get(parsed[0])
    if kind == "letter-spacing":
        parsed = _parse_number(value)
        if parsed is None or parsed[1] not in ("em", ""):
            return None
        return LETTER_SPACING_EM.get(round(parsed[0], 3))
    return None


def arbitrary_class(prefix: str, value: str) -> str:
    return f"{prefix}-[{'_'.join(value.split())}]"


def computed_to_class(css_property: str, value: str, variant_prefix: str | None = None) -> ClassSuggestion:
    """Suggest a class that renders *css_property* as *value*.

    Raises ``UnparsableError`` for properties without a class prefix.
    """
    entry = CSS_PROPERTY_PREFIXES.get(css_property)
    if entry is None:
        raise UnparsableError(f"No utility class prefix for CSS property {css_property!r}")
    if not value.strip():
        raise UnparsableError(f"Empty value for CSS property {css_property!r}")

    prefix, kind = entry
    step = _lookup(kind, value)
    if step is None:
        suggestion = ClassSuggestion(arbitrary_class(prefix, value), exact=False)
    elif kind == "radius" and step == "DEFAULT":
        suggestion = ClassSuggestion(prefix, exact=True)
    else:
        suggestion = ClassSuggestion(f"{prefix}-{step}", exact=True)

    if variant_prefix:
        joined = variant_prefix if variant_prefix.endswith(":") else f"{variant_prefix}:"
        return ClassSuggestion(f"{joined}{suggestion.class_name}", suggestion.exact)
    return suggestion
