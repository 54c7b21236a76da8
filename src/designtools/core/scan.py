from __future__ import annotations

import logging
import threading
from pathlib import Path

from designtools.core.components import scan_components
from designtools.core.project import ProjectConfig
from designtools.core.shadow_scan import scan_shadows
from designtools.core.tokens import scan_tokens
from designtools.models import ScanResult, TokenMap

logger = logging.getLogger(__name__)


def scan_project_tokens(config: ProjectConfig) -> TokenMap:
    """Scan the first configured stylesheet that exists."""
    rel = config.primary_css
    if rel is None or not (config.root / rel).is_file():
        return TokenMap()
    css = (config.root / rel).read_text(encoding="utf-8")
    return scan_tokens(css, dark_selector=config.dark_selector, css_file_path=rel)


def run_scan(config: ProjectConfig) -> ScanResult:
    return ScanResult(
        tokens=scan_project_tokens(config),
        shadows=scan_shadows(config),
        components=scan_components(config),
    )


class ScanCache:
    """Process-scoped scan results for one project root.

    The cache is never refreshed implicitly; writes made through any path
    are only visible after :meth:`rescan`.
    """

    def __init__(self, config: ProjectConfig) -> None:
        self.config = config
        self._result: ScanResult | None = None
        self._lock = threading.Lock()

    @property
    def root(self) -> Path:
        return self.config.root

    @property
    def is_warm(self) -> bool:
        return self._result is not None

    def get(self) -> ScanResult:
        with self._lock:
            if self._result is None:
                self._result = run_scan(self.config)
            return self._result

    def invalidate(self) -> None:
        with self._lock:
            self._result = None

    def rescan(self) -> ScanResult:
        with self._lock:
            logger.info("Rescanning %s", self.config.root)
            self._result = run_scan(self.config)
            return self._result
