"""Nested JSON design-token files (``*.tokens`` / ``*.tokens.json``).

A node is a shadow token when it has ``$type: "shadow"`` and a ``$value``.
A group may declare ``$type`` once for its direct children; deeper levels
have to restate it.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from designtools.core.errors import NotFoundError, UnparsableError
from designtools.core.shadows import nested_to_css

logger = logging.getLogger(__name__)

TOKEN_FILE_SUFFIXES = (".tokens.json", ".tokens")


@dataclass(frozen=True)
class ShadowToken:
    name: str
    value: Any
    token_path: str
    description: str | None = None

    @property
    def css_value(self) -> str:
        return nested_to_css(self.value)


def is_token_file(path: Path) -> bool:
    return path.is_file() and path.name.endswith(TOKEN_FILE_SUFFIXES)


def find_design_token_files(root: Path, token_dirs: Iterable[str]) -> list[str]:
    """List token files in the candidate directories (not recursive)."""
    found: list[str] = []
    for rel_dir in token_dirs:
        directory = root / rel_dir
        if not directory.is_dir():
            continue
        for entry in sorted(directory.iterdir()):
            if is_token_file(entry):
                rel = entry.relative_to(root).as_posix()
                if rel not in found:
                    found.append(rel)
    return found


def load_token_file(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise UnparsableError(f"{path.name} is not valid JSON: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise UnparsableError(f"{path.name} must contain a JSON object at the top level")
    return data


def extract_shadow_tokens(tree: dict[str, Any], path: tuple[str, ...] = ()) -> list[ShadowToken]:
    tokens: list[ShadowToken] = []
    for key, node in tree.items():
        if key.startswith("$") or not isinstance(node, dict):
            continue
        node_path = (*path, key)
        if node.get("$type") == "shadow" and "$value" in node:
            tokens.append(_as_token(key, node, node_path))
        elif node.get("$type") == "shadow":
            for child_key, child in node.items():
                if child_key.startswith("$") or not isinstance(child, dict):
                    continue
                if "$value" in child and "$type" not in child:
                    tokens.append(_as_token(child_key, child, (*node_path, child_key)))
                else:
                    tokens.extend(extract_shadow_tokens({child_key: child}, node_path))
        else:
            tokens.extend(extract_shadow_tokens(node, node_path))
    return tokens


def _as_token(name: str, node: dict[str, Any], path: tuple[str, ...]) -> ShadowToken:
    description = node.get("$description")
    return ShadowToken(
        name=name,
        value=node["$value"],
        token_path=".".join(path),
        description=description if isinstance(description, str) else None,
    )


def build_design_tokens_json(shadows: Iterable[tuple[str, Any, str | None]]) -> dict[str, Any]:
    """Build a ``{"shadow": {...}}`` document from ``(name, $value, description)``."""
    group: dict[str, Any] = {}
    for name, value, description in shadows:
        entry: dict[str, Any] = {"$type": "shadow", "$value": value}
        if description:
            entry["$description"] = description
        group[name] = entry
    return {"shadow": group}


def dump_tokens(tree: dict[str, Any]) -> str:
    return json.dumps(tree, indent=2, ensure_ascii=False) + "\n"


def update_design_token(text: str, token_path: str, value: Any) -> str:
    """Set ``$value`` at a dotted path and return the re-serialized document."""
    try:
        tree = json.loads(text)
    except json.JSONDecodeError as exc:
        raise UnparsableError(f"Token file is not valid JSON: {exc.msg}") from exc

    node: Any = tree
    for segment in token_path.split("."):
        if not isinstance(node, dict) or segment not in node:
            raise NotFoundError(f"Token path {token_path} not found (missing {segment!r})")
        node = node[segment]
    if not isinstance(node, dict):
        raise NotFoundError(f"Token path {token_path} does not point at a token object")

    node["$value"] = value
    return dump_tokens(tree)
