from __future__ import annotations

import os
from pathlib import Path

from designtools.core.errors import InvalidPathError


def safe_path(root: str | Path, rel: str) -> Path:
    """Resolve *rel* against *root*, refusing anything that leaves the root.

    Runs before any file I/O. Raises ``InvalidPathError`` for empty paths,
    absolute paths and ``..`` escapes (including ones through symlinks).
    """
    if not rel or not rel.strip():
        raise InvalidPathError("File path must not be empty")
    if os.path.isabs(rel) or rel.startswith(("/", "\\")):
        raise InvalidPathError(f"Absolute paths are not allowed: {rel}")

    resolved_root = Path(root).resolve()
    resolved = (resolved_root / rel).resolve()
    if resolved != resolved_root and not str(resolved).startswith(str(resolved_root) + os.sep):
        raise InvalidPathError(f"Path {rel} escapes the project root")
    return resolved
