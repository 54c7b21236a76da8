"""Merge shadow definitions from every source a project can declare them in.

Precedence when names collide, highest first: author custom properties,
design-token files, framework variable overrides, framework presets.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from designtools.core.blocks import THEME_HEAD, find_block, iter_blocks
from designtools.core.design_tokens import extract_shadow_tokens, find_design_token_files, load_token_file
from designtools.core.errors import UnparsableError
from designtools.core.presets import framework_presets
from designtools.core.project import ProjectConfig
from designtools.core.sass import scan_bootstrap_css_overrides, scan_bootstrap_scss_overrides
from designtools.core.shadows import is_shadow_value, parse_layers
from designtools.core.tokens import ROOT_SELECTOR, parse_custom_properties
from designtools.models import ShadowDefinition, ShadowMap

logger = logging.getLogger(__name__)

SOURCE_ORDER = {"custom": 0, "design-token": 1, "framework-preset": 2}
SIZE_ORDER = {"2xs": 0, "xs": 1, "sm": 2, "": 3, "md": 4, "lg": 5, "xl": 6, "2xl": 7}
UNKNOWN_SIZE_RANK = 99

_DIGITS_RE = re.compile(r"(\d+)")


def size_rank(name: str) -> int:
    parts = name.split("-")
    last = parts[-1]
    if len(parts) > 1 and last in SIZE_ORDER:
        return SIZE_ORDER[last]
    if len(parts) == 1 or last == "shadow":
        return SIZE_ORDER[""]
    return UNKNOWN_SIZE_RANK


def natural_key(name: str) -> tuple[str | int, ...]:
    """Sort key comparing digit runs numerically and text case-insensitively."""
    return tuple(int(part) if i % 2 else part.casefold() for i, part in enumerate(_DIGITS_RE.split(name)))


def shadow_sort_key(shadow: ShadowDefinition) -> tuple[int, int, tuple[str | int, ...]]:
    return SOURCE_ORDER[shadow.source], size_rank(shadow.name), natural_key(shadow.name)


def sort_shadows(shadows: list[ShadowDefinition]) -> list[ShadowDefinition]:
    return sorted(shadows, key=shadow_sort_key)


def _read(path: Path) -> str | None:
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8")


def _is_shadow_like(name: str, value: str) -> bool:
    return "shadow" in name or is_shadow_value(value)


def scan_custom_shadows(css: str, file_path: str | None = None) -> list[ShadowDefinition]:
    """Shadow-like custom properties from ``:root`` and ``@theme`` blocks."""
    found: dict[str, ShadowDefinition] = {}

    span = find_block(css, ROOT_SELECTOR)
    if span is not None:
        for prop, value in parse_custom_properties(span.body(css)).items():
            if _is_shadow_like(prop, value):
                found[prop] = _custom(prop, value, file_path)

    for theme in iter_blocks(css, THEME_HEAD, pattern=True):
        for prop, value in parse_custom_properties(theme.body(css)).items():
            if prop.startswith("--shadow") and prop not in found:
                found[prop] = _custom(prop, value, file_path)

    return list(found.values())


def _custom(prop: str, value: str, file_path: str | None) -> ShadowDefinition:
    return ShadowDefinition(
        name=prop[2:],
        value=value,
        layers=parse_layers(value),
        source="custom",
        is_overridden=True,
        css_variable=prop,
        file_path=file_path,
    )


def scan_design_token_shadows(root: Path, token_files: list[str]) -> list[ShadowDefinition]:
    shadows: list[ShadowDefinition] = []
    for rel in token_files:
        try:
            tokens = extract_shadow_tokens(load_token_file(root / rel))
        except UnparsableError as exc:
            logger.warning("Skipping design-token file %s: %s", rel, exc)
            continue
        for token in tokens:
            try:
                value = token.css_value
            except UnparsableError as exc:
                logger.warning("Skipping token %s in %s: %s", token.token_path, rel, exc)
                continue
            shadows.append(
                ShadowDefinition(
                    name=token.name,
                    value=value,
                    layers=parse_layers(value),
                    source="design-token",
                    token_path=token.token_path,
                    token_file_path=rel,
                    description=token.description,
                )
            )
    return shadows


def scan_framework_shadows(
    styling: str | None,
    css_texts: dict[str, str],
    scss_texts: dict[str, str],
) -> list[ShadowDefinition]:
    """Framework presets, with Bootstrap variable overrides applied."""
    scss_overrides: dict[str, tuple[str, str]] = {}
    css_overrides: dict[str, tuple[str, str]] = {}
    if styling == "bootstrap":
        for rel, text in scss_texts.items():
            for name, value in scan_bootstrap_scss_overrides(text).items():
                scss_overrides[name] = (value, rel)
        for rel, text in css_texts.items():
            for name, value in scan_bootstrap_css_overrides(text).items():
                css_overrides[name] = (value, rel)

    shadows: list[ShadowDefinition] = []
    for preset in framework_presets(styling):
        value, file_path, overridden = preset.value, None, False
        override = css_overrides.get(preset.name) or scss_overrides.get(preset.name)
        if override is not None:
            (value, file_path), overridden = override, True
        shadows.append(
            ShadowDefinition(
                name=preset.name,
                value=value,
                layers=parse_layers(value),
                source="framework-preset",
                is_overridden=overridden,
                css_variable=f"--bs-{preset.name}" if styling == "bootstrap" else f"--{preset.name}",
                sass_variable=f"${preset.name}" if styling == "bootstrap" else None,
                file_path=file_path,
            )
        )
    return shadows


def merge_shadows(*sources: list[ShadowDefinition]) -> list[ShadowDefinition]:
    """Merge source lists given highest precedence first; first name wins."""
    merged: dict[str, ShadowDefinition] = {}
    for source in sources:
        for shadow in source:
            merged.setdefault(shadow.name, shadow)
    return sort_shadows(list(merged.values()))


def scan_shadows(config: ProjectConfig) -> ShadowMap:
    css_texts = {rel: text for rel in config.css_files if (text := _read(config.root / rel)) is not None}
    scss_texts = {rel: text for rel in config.scss_files if (text := _read(config.root / rel)) is not None}
    token_files = find_design_token_files(config.root, config.token_dirs)

    custom: list[ShadowDefinition] = []
    for rel, text in css_texts.items():
        custom.extend(scan_custom_shadows(text, rel))
    if config.styling == "bootstrap":
        # --bs-box-shadow* are reported as overrides of the Bootstrap presets
        custom = [s for s in custom if not (s.css_variable or "").startswith("--bs-box-shadow")]

    shadows = merge_shadows(
        custom,
        scan_design_token_shadows(config.root, token_files),
        scan_framework_shadows(config.styling, css_texts, scss_texts),
    )
    logger.info("Scanned %d shadows in %s", len(shadows), config.root)
    return ShadowMap(
        shadows=shadows,
        styling=config.styling,
        css_file_path=config.primary_css,
        token_files=token_files,
    )
