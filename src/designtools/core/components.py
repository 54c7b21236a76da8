"""Registry of UI components declared with ``cva(...)`` variants."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from designtools.core.blocks import match_close_brace
from designtools.core.project import ProjectConfig
from designtools.models import ComponentEntry, VariantDimension

logger = logging.getLogger(__name__)

COMPONENT_SUFFIXES = (".tsx", ".jsx")

_CVA_RE = re.compile(r"const\s+(\w+)\s*=\s*cva\(\s*([\"'`])([\s\S]*?)\2\s*,\s*\{")
_DATA_SLOT_RE = re.compile(r"data-slot=[\"']([\w-]+)[\"']")
_FUNCTION_RE = re.compile(r"(?:function\s+|const\s+)([A-Z]\w*)\s*(?:\(|=)")
_VARIANTS_RE = re.compile(r"(?<!\w)variants\s*:\s*\{")
_DEFAULT_VARIANTS_RE = re.compile(r"defaultVariants\s*:\s*\{")
_DIMENSION_RE = re.compile(r"[\"']?(\w+)[\"']?\s*:\s*\{")
_OPTION_RE = re.compile(r"[\"']?([\w-]+)[\"']?\s*:\s*\n?\s*([\"'`])([^\"'`]*)\2")
_STRING_LITERAL_RE = re.compile(r"[\"'`][^\"'`]*[\"'`]")
_TOKEN_REF_RE = re.compile(r"(?:bg|text|border|ring|shadow|outline|fill|stroke)-([a-z][\w-]*(?:/\d+)?)")

_NON_TOKEN_VALUES = frozenset({"xs", "sm", "md", "lg", "xl", "2xl", "3xl", "full", "none"})


def _object_body(source: str, regex: re.Pattern[str], start: int = 0) -> str | None:
    m = regex.search(source, start)
    if m is None:
        return None
    close = match_close_brace(source, m.end() - 1)
    return None if close is None else source[m.end() : close]


def _default_variants(source: str) -> dict[str, str]:
    body = _object_body(source, _DEFAULT_VARIANTS_RE)
    if body is None:
        return {}
    return {m.group(1): m.group(3) for m in _OPTION_RE.finditer(body)}


def parse_variants(source: str, cva_start: int = 0) -> list[VariantDimension]:
    body = _object_body(source, _VARIANTS_RE, cva_start)
    if body is None:
        return []
    defaults = _default_variants(source)

    dimensions: list[VariantDimension] = []
    pos = 0
    while (m := _DIMENSION_RE.search(body, pos)) is not None:
        close = match_close_brace(body, m.end() - 1)
        if close is None:
            break
        classes = {o.group(1): o.group(3).strip() for o in _OPTION_RE.finditer(body, m.end(), close)}
        if classes:
            options = list(classes)
            dimensions.append(
                VariantDimension(
                    name=m.group(1),
                    options=options,
                    default=defaults.get(m.group(1), options[0]),
                    classes=classes,
                )
            )
        pos = close + 1
    return dimensions


def extract_token_references(source: str) -> list[str]:
    """Design-token names referenced by color-ish utilities in string literals."""
    found: dict[str, None] = {}
    for literal in _STRING_LITERAL_RE.findall(source):
        for m in _TOKEN_REF_RE.finditer(literal):
            value = m.group(1)
            if value[0].isdigit() or value in _NON_TOKEN_VALUES:
                continue
            found.setdefault(value.split("/")[0], None)
    return list(found)


def parse_component(source: str, file_path: str) -> ComponentEntry | None:
    slot = _DATA_SLOT_RE.search(source)
    if slot is None:
        return None
    data_slot = slot.group(1)
    name = "".join(part.capitalize() for part in data_slot.split("-"))
    export = _FUNCTION_RE.search(source)

    cva = _CVA_RE.search(source)
    return ComponentEntry(
        name=name,
        file_path=file_path,
        export_name=export.group(1) if export else name,
        data_slot=data_slot,
        base_classes=cva.group(3).strip() if cva else "",
        variants=parse_variants(source, cva.start()) if cva else [],
        token_references=extract_token_references(source),
    )


def scan_components(config: ProjectConfig) -> list[ComponentEntry]:
    component_dir: Path | None = None
    for rel in config.component_dirs:
        if (config.root / rel).is_dir():
            component_dir = config.root / rel
            break
    if component_dir is None:
        return []

    components: list[ComponentEntry] = []
    for path in sorted(component_dir.iterdir()):
        if not path.name.endswith(COMPONENT_SUFFIXES):
            continue
        entry = parse_component(path.read_text(encoding="utf-8"), path.relative_to(config.root).as_posix())
        if entry is not None:
            components.append(entry)
    logger.info("Scanned %d components in %s", len(components), component_dir)
    return components
