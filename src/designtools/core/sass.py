"""Sass variable lookup and Bootstrap shadow override discovery."""

from __future__ import annotations

import re

_BOOTSTRAP_SCSS_OVERRIDE_RE = re.compile(r"\$(box-shadow(?:-sm|-lg|-inset)?)\s*:\s*(.+?)(?:\s*!default)?\s*;")
_BOOTSTRAP_CSS_OVERRIDE_RE = re.compile(r"(--bs-box-shadow(?:-sm|-lg|-inset)?)\s*:\s*([^;]+);")

_SASS_COLOR_SUBSTITUTIONS = (
    (re.compile(r"rgba\(\s*\$black\s*,\s*([^)]+)\)"), r"rgba(0, 0, 0, \1)"),
    (re.compile(r"rgba\(\s*\$white\s*,\s*([^)]+)\)"), r"rgba(255, 255, 255, \1)"),
    (re.compile(r"\$black\b"), "#000"),
    (re.compile(r"\$white\b"), "#fff"),
)


def normalize_variable(name: str) -> str:
    """Return the bare variable name, without a leading ``$``."""
    return name[1:] if name.startswith("$") else name


def sass_declaration_regex(name: str) -> re.Pattern[str]:
    """Match ``$name: value [!default];`` with the value in group 2."""
    bare = re.escape(normalize_variable(name))
    return re.compile(rf"(\${bare}\s*:\s*)(.+?)(\s*(?:!default)?\s*;)")


def resolve_sass_colors(value: str) -> str:
    """Inline the Bootstrap ``$black``/``$white`` helpers into plain colors."""
    for pattern, replacement in _SASS_COLOR_SUBSTITUTIONS:
        value = pattern.sub(replacement, value)
    return value


def scan_bootstrap_scss_overrides(scss: str) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for line in scss.splitlines():
        m = _BOOTSTRAP_SCSS_OVERRIDE_RE.search(line)
        if m:
            overrides[m.group(1)] = resolve_sass_colors(m.group(2).strip())
    return overrides


def scan_bootstrap_css_overrides(css: str) -> dict[str, str]:
    """Map ``--bs-box-shadow*`` declarations to their bare preset names."""
    return {m.group(1)[len("--bs-") :]: m.group(2).strip() for m in _BOOTSTRAP_CSS_OVERRIDE_RE.finditer(css)}
