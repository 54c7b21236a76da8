"""Shadow codec.

Converts between a raw ``box-shadow`` declaration, a list of
:class:`~designtools.models.ShadowLayer` and the nested object form used by
design-token files. The nested form has no inset field, so
:func:`to_nested_token` reports when it had to drop one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from designtools.core.errors import UnparsableError
from designtools.models import ShadowLayer

DEFAULT_SHADOW_COLOR = "rgb(0 0 0 / 0.1)"
DEFAULT_TOKEN_COLOR = "rgb(0, 0, 0, 0.1)"
DEFAULT_TOKEN_LENGTH = "0px"

_INSET_RE = re.compile(r"^inset\b\s*", re.IGNORECASE)
_HEX_COLOR_RE = re.compile(r"(?:^|\s)(#[\da-fA-F]{3,8})$")
_LENGTH = r"-?\d*\.?\d+(?:px|rem|em)"
_LENGTH_PAIR_RE = re.compile(rf"{_LENGTH}\s+{_LENGTH}")
_FUNC_NAME_RE = re.compile(r"(?:^|\s)([a-zA-Z][\w-]*)$")

_MATH_FUNCTIONS = frozenset({"calc", "min", "max", "clamp"})
_COLOR_KEYWORDS = frozenset(
    {
        "black",
        "white",
        "transparent",
        "currentcolor",
        "red",
        "green",
        "blue",
        "gray",
        "grey",
        "silver",
        "navy",
        "purple",
        "orange",
        "yellow",
    }
)


@dataclass(frozen=True)
class NestedShadow:
    value: dict[str, str] | list[dict[str, str]]
    inset_dropped: bool = False


def split_layers(raw: str) -> list[str]:
    """Split on commas that are not nested inside parentheses."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in raw:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        if ch == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(ch)
    tail = "".join(current).strip()
    if tail:
        parts.append(tail)
    return [p for p in parts if p]


def _strip_color(part: str) -> tuple[str, str | None]:
    """Split a trailing color token off a single layer."""
    if part.endswith(")"):
        depth = 0
        for i in range(len(part) - 1, -1, -1):
            if part[i] == ")":
                depth += 1
            elif part[i] == "(":
                depth -= 1
                if depth == 0:
                    name_match = _FUNC_NAME_RE.search(part[:i])
                    if name_match and name_match.group(1).lower() not in _MATH_FUNCTIONS:
                        start = name_match.start(1)
                        return part[:start].rstrip(), part[start:]
                    break
        return part, None

    hex_match = _HEX_COLOR_RE.search(part)
    if hex_match:
        return part[: hex_match.start(1)].rstrip(), hex_match.group(1)

    head, _, last = part.rpartition(" ")
    if last.lower() in _COLOR_KEYWORDS:
        return head.rstrip(), last
    return part, None


def parse_layer(part: str) -> ShadowLayer | None:
    text = part.strip()
    inset = False
    inset_match = _INSET_RE.match(text)
    if inset_match:
        inset = True
        text = text[inset_match.end() :]

    rest, color = _strip_color(text)
    tokens = rest.split()
    if len(tokens) < 2:
        return None

    offset_x, offset_y, blur, spread = (tokens + ["0", "0"])[:4]
    return ShadowLayer(
        offset_x=offset_x,
        offset_y=offset_y,
        blur=blur,
        spread=spread,
        color=color or DEFAULT_SHADOW_COLOR,
        inset=inset,
    )


def _is_empty(raw: str) -> bool:
    stripped = raw.strip()
    return not stripped or stripped.lower() == "none"


def parse_layers(raw: str) -> list[ShadowLayer]:
    """Parse a declaration value, omitting layers that do not fit the shape."""
    if _is_empty(raw):
        return []
    layers = (parse_layer(part) for part in split_layers(raw))
    return [layer for layer in layers if layer is not None]


def parse_layers_strict(raw: str) -> list[ShadowLayer]:
    if _is_empty(raw):
        return []
    layers: list[ShadowLayer] = []
    for part in split_layers(raw):
        layer = parse_layer(part)
        if layer is None:
            raise UnparsableError(f"Shadow layer {part!r} needs at least an x and y offset")
        layers.append(layer)
    return layers


def format_layer(layer: ShadowLayer) -> str:
    fields = [layer.offset_x, layer.offset_y, layer.blur, layer.spread, layer.color]
    if layer.inset:
        fields.insert(0, "inset")
    return " ".join(fields)


def format_layers(layers: list[ShadowLayer]) -> str:
    if not layers:
        return "none"
    return ", ".join(format_layer(layer) for layer in layers)


def is_shadow_value(value: str) -> bool:
    return bool(_LENGTH_PAIR_RE.search(value)) or "inset" in value


# ---------------------------------------------------------------------------
# Nested design-token form
# ---------------------------------------------------------------------------


def _layer_to_token(layer: ShadowLayer) -> dict[str, str]:
    return {
        "offsetX": layer.offset_x,
        "offsetY": layer.offset_y,
        "blur": layer.blur,
        "spread": layer.spread,
        "color": layer.color,
    }


def to_nested_token(layers: list[ShadowLayer]) -> NestedShadow:
    """Convert layers to a token ``$value``.

    One layer becomes a single object and several become a list. Inset flags
    cannot be represented; ``inset_dropped`` tells the caller one was lost.
    """
    dropped = any(layer.inset for layer in layers)
    items = [_layer_to_token(layer) for layer in layers]
    if len(items) == 1:
        return NestedShadow(items[0], dropped)
    return NestedShadow(items, dropped)


def _token_to_layer(entry: Any) -> ShadowLayer:
    if not isinstance(entry, dict):
        raise UnparsableError(f"Shadow token layer must be an object, got {type(entry).__name__}")
    return ShadowLayer(
        offset_x=str(entry.get("offsetX", DEFAULT_TOKEN_LENGTH)),
        offset_y=str(entry.get("offsetY", DEFAULT_TOKEN_LENGTH)),
        blur=str(entry.get("blur", DEFAULT_TOKEN_LENGTH)),
        spread=str(entry.get("spread", DEFAULT_TOKEN_LENGTH)),
        color=str(entry.get("color", DEFAULT_TOKEN_COLOR)),
    )


def from_nested_token(value: Any) -> list[ShadowLayer]:
    if isinstance(value, list):
        return [_token_to_layer(entry) for entry in value]
    return [_token_to_layer(value)]


def css_to_nested(raw: str) -> NestedShadow:
    return to_nested_token(parse_layers_strict(raw))


def nested_to_css(value: Any) -> str:
    return format_layers(from_nested_token(value))
