"""File-level write operations.

Every operation resolves the path inside the project root, reads the whole
file, computes the new text with a pure mutator and writes it back in a
single call. An exception anywhere before the write leaves the file as it
was.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel

from designtools.core import mutators
from designtools.core.design_tokens import build_design_tokens_json, dump_tokens, update_design_token
from designtools.core.errors import NotFoundError, UnparsableError
from designtools.core.paths import safe_path
from designtools.core.shadows import css_to_nested

logger = logging.getLogger(__name__)

SCSS_SELECTOR = "scss"
MARKER_FILE_SUFFIXES = (".tsx", ".jsx", ".html")
SKIPPED_DIRS = frozenset({"node_modules", ".next", "dist", ".git"})

ElementEditKind = Literal["class", "add-class", "remove-class", "prop"]


class WriteResult(BaseModel):
    ok: bool = True
    file_path: str
    identifier: str
    value: str | None = None
    eid: str | None = None
    changed: bool = True
    inset_dropped: bool = False


def _read(path: Path, *, missing_ok: bool = False) -> str:
    if not path.is_file():
        if missing_ok:
            return ""
        raise NotFoundError(f"File {path.name} not found")
    return path.read_text(encoding="utf-8")


def rewrite_file(
    root: str | Path,
    rel_path: str,
    transform: Callable[[str], str],
    *,
    missing_ok: bool = False,
) -> bool:
    """Apply *transform* to a file's text and write it once if it changed."""
    path = safe_path(root, rel_path)
    original = _read(path, missing_ok=missing_ok)
    updated = transform(original)
    if updated == original:
        logger.debug("No change to %s", rel_path)
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(updated, encoding="utf-8")
    logger.info("Wrote %s", rel_path)
    return True


def write_token(root: str | Path, rel_path: str, selector: str, token: str, value: str) -> WriteResult:
    changed = rewrite_file(root, rel_path, lambda text: mutators.write_custom_property(text, selector, token, value))
    return WriteResult(file_path=rel_path, identifier=token, value=value, changed=changed)


def write_shadow(
    root: str | Path,
    rel_path: str,
    variable: str,
    value: str,
    selector: str = ":root",
    *,
    create: bool = False,
) -> WriteResult:
    """Write a shadow value into a selector block, ``@theme``, or a Sass file.

    ``selector="scss"`` targets a ``$variable`` declaration; any other
    selector targets a ``--variable`` custom property in that block.
    """
    if selector == SCSS_SELECTOR:
        mutate = mutators.create_sass_variable if create else mutators.write_sass_variable

        def transform(text: str) -> str:
            return mutate(text, variable, value)

    else:
        mutate_block = mutators.create_custom_property if create else mutators.write_custom_property

        def transform(text: str) -> str:
            return mutate_block(text, selector, variable, value)

    changed = rewrite_file(root, rel_path, transform, missing_ok=create)
    return WriteResult(file_path=rel_path, identifier=variable, value=value, changed=changed)


def create_shadow(
    root: str | Path, rel_path: str, variable: str, value: str, selector: str = ":root"
) -> WriteResult:
    return write_shadow(root, rel_path, variable, value, selector, create=True)


def write_design_token(root: str | Path, rel_path: str, token_path: str, value: str) -> WriteResult:
    """Replace a shadow token's ``$value`` with the nested form of a CSS value."""
    nested = css_to_nested(value)
    if nested.inset_dropped:
        logger.warning("Inset flag dropped writing %s to %s", token_path, rel_path)
    changed = rewrite_file(root, rel_path, lambda text: update_design_token(text, token_path, nested.value))
    return WriteResult(
        file_path=rel_path,
        identifier=token_path,
        value=value,
        changed=changed,
        inset_dropped=nested.inset_dropped,
    )


def export_design_tokens(
    root: str | Path,
    rel_path: str,
    shadows: Iterable[tuple[str, str, str | None]],
) -> WriteResult:
    """Write ``(name, css value, description)`` shadows to a new token file."""
    entries: list[tuple[str, Any, str | None]] = []
    dropped = False
    for name, value, description in shadows:
        nested = css_to_nested(value)
        dropped = dropped or nested.inset_dropped
        entries.append((name, nested.value, description))
    document = dump_tokens(build_design_tokens_json(entries))
    changed = rewrite_file(root, rel_path, lambda _text: document, missing_ok=True)
    return WriteResult(
        file_path=rel_path,
        identifier="shadow",
        value=str(len(entries)),
        changed=changed,
        inset_dropped=dropped,
    )


def write_component_class(
    root: str | Path,
    rel_path: str,
    old_class: str,
    new_class: str,
    variant_context: str | None = None,
) -> WriteResult:
    changed = rewrite_file(
        root,
        rel_path,
        lambda text: mutators.replace_class_in_component(text, old_class, new_class, variant_context),
    )
    return WriteResult(file_path=rel_path, identifier=old_class, value=new_class, changed=changed)


def write_element(
    root: str | Path,
    rel_path: str,
    kind: ElementEditKind,
    identifier: str,
    *,
    value: str,
    old_value: str | None = None,
    prop: str | None = None,
    line_hint: int | None = None,
    eid: str | None = None,
    mark: bool = False,
) -> WriteResult:
    """Edit one rendered element instance in a component source file.

    ``kind`` selects the edit: ``class`` swaps *old_value* for *value*,
    ``add-class``/``remove-class`` change the class list and ``prop`` sets
    the string prop *prop* to *value*. With *mark*, an unmarked element is
    tagged with an eid in the same write so later edits can target it.
    """
    hints: dict[str, Any] = {"line_hint": line_hint, "eid": eid}

    def transform(text: str) -> str:
        if mark and not hints["eid"]:
            text, hints["eid"] = mutators.mark_element(text, identifier, line_hint=line_hint)
        if kind == "class":
            if not old_value:
                raise UnparsableError("A class edit needs the class being replaced")
            return mutators.replace_element_class(text, identifier, old_value, value, **hints)
        if kind == "add-class":
            return mutators.add_element_class(text, identifier, value, **hints)
        if kind == "remove-class":
            return mutators.remove_element_class(text, identifier, value, **hints)
        if not prop:
            raise UnparsableError("A prop edit needs the prop name")
        return mutators.set_element_prop(text, identifier, prop, value, **hints)

    changed = rewrite_file(root, rel_path, transform)
    return WriteResult(file_path=rel_path, identifier=identifier, value=value, eid=hints["eid"], changed=changed)


def mark_element(root: str | Path, rel_path: str, identifier: str, line_hint: int | None = None) -> WriteResult:
    marked: dict[str, str] = {}

    def transform(text: str) -> str:
        new_text, marked["eid"] = mutators.mark_element(text, identifier, line_hint=line_hint)
        return new_text

    changed = rewrite_file(root, rel_path, transform)
    return WriteResult(file_path=rel_path, identifier=identifier, eid=marked["eid"], changed=changed)


def unmark_element(root: str | Path, rel_path: str, eid: str) -> WriteResult:
    changed = rewrite_file(root, rel_path, lambda text: mutators.remove_marker(text, eid))
    return WriteResult(file_path=rel_path, identifier=eid, eid=eid, changed=changed)


def iter_marker_files(root: Path) -> Iterable[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if d not in SKIPPED_DIRS]
        for filename in filenames:
            if filename.endswith(MARKER_FILE_SUFFIXES):
                yield Path(dirpath) / filename


def strip_markers_in(root: str | Path, rel_path: str) -> int:
    """Strip every element marker from one file; returns how many were removed."""
    removed = {"count": 0}

    def transform(text: str) -> str:
        new_text, removed["count"] = mutators.strip_markers(text)
        return new_text

    rewrite_file(root, rel_path, transform)
    if removed["count"]:
        logger.info("Removed %d marker(s) from %s", removed["count"], rel_path)
    return removed["count"]


def marker_file_paths(root: str | Path) -> list[str]:
    base = Path(root).resolve()
    return [path.relative_to(base).as_posix() for path in iter_marker_files(base)]


def cleanup_stale_markers(root: str | Path) -> list[str]:
    """Strip leftover element markers from every source file in the project."""
    return [rel for rel in marker_file_paths(root) if strip_markers_in(root, rel)]

