from __future__ import annotations

import logging
import re

from designtools.core.blocks import find_block
from designtools.models import ColorFormat, Token, TokenCategory, TokenMap

logger = logging.getLogger(__name__)

ROOT_SELECTOR = ":root"
DEFAULT_DARK_SELECTOR = ".dark"

_CUSTOM_PROPERTY_RE = re.compile(r"(--[\w-]+)\s*:\s*([^;]+);")
_NUMERIC_SCALE_RE = re.compile(r"^(\w+)-\d+$")
_LENGTH_SUFFIX_RE = re.compile(r"(?:rem|px|em)$")

_SEMANTIC_PREFIXES = ("primary", "secondary", "neutral", "success", "destructive", "warning")
_SURFACE_NAMES = frozenset(
    {"background", "foreground", "card", "card-foreground", "popover", "popover-foreground"}
)
_UTILITY_NAMES = frozenset(
    {"border", "input", "ring", "muted", "muted-foreground", "accent", "accent-foreground"}
)
_BUCKET_PREFIXES = ("chart", "sidebar", "radius", "shadow")


def parse_custom_properties(body: str) -> dict[str, str]:
    """Collect ``--name: value;`` declarations from a block body, in order."""
    return {m.group(1): m.group(2).strip() for m in _CUSTOM_PROPERTY_RE.finditer(body)}


def parse_block_properties(css: str, selector: str) -> dict[str, str]:
    span = find_block(css, selector)
    if span is None:
        return {}
    return parse_custom_properties(span.body(css))


def detect_color_format(value: str) -> ColorFormat:
    if "oklch" in value:
        return "oklch"
    if "hsl" in value:
        return "hsl"
    if "rgb" in value:
        return "rgb"
    if value.startswith("#"):
        return "hex"
    return "none"


def categorize_token(name: str, value: str) -> TokenCategory:
    if any(fn in value for fn in ("oklch", "hsl", "rgb")) or value.startswith("#"):
        return "color"
    if "radius" in name:
        return "radius"
    if "shadow" in name:
        return "shadow"
    if "spacing" in name:
        return "spacing"
    if any(word in name for word in ("font", "text", "tracking", "leading")):
        return "typography"
    if _LENGTH_SUFFIX_RE.search(value):
        return "spacing"
    return "other"


def _has_prefix(bare: str, prefix: str) -> bool:
    return bare == prefix or bare.startswith(prefix + "-")


def get_token_group(name: str) -> str:
    """Derive a display group from a token name such as ``--primary-500``."""
    bare = name[2:] if name.startswith("--") else name

    m = _NUMERIC_SCALE_RE.match(bare)
    if m:
        return m.group(1)
    for prefix in _SEMANTIC_PREFIXES:
        if _has_prefix(bare, prefix):
            return prefix
    if bare in _SURFACE_NAMES:
        return "surface"
    if bare in _UTILITY_NAMES:
        return "utility"
    for prefix in _BUCKET_PREFIXES:
        if _has_prefix(bare, prefix):
            return prefix
    return "other"


def scan_tokens(
    css: str,
    *,
    dark_selector: str = DEFAULT_DARK_SELECTOR,
    css_file_path: str | None = None,
) -> TokenMap:
    light = parse_block_properties(css, ROOT_SELECTOR)
    dark = parse_block_properties(css, dark_selector)

    tokens: list[Token] = []
    for name in [*light, *(n for n in dark if n not in light)]:
        light_value = light.get(name, "")
        dark_value = dark.get(name, "")
        sample = light_value or dark_value
        tokens.append(
            Token(
                name=name,
                category=categorize_token(name, sample),
                group=get_token_group(name),
                light_value=light_value,
                dark_value=dark_value,
                color_format=detect_color_format(sample),
            )
        )

    groups: dict[str, list[Token]] = {}
    for token in tokens:
        groups.setdefault(token.group, []).append(token)

    logger.debug("Scanned %d tokens from %s", len(tokens), css_file_path or "<text>")
    return TokenMap(tokens=tokens, groups=groups, css_file_path=css_file_path)
