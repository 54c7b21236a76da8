"""Project configuration and candidate-list file discovery."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

STYLING_SYSTEMS = ("tailwind", "bootstrap", "css-variables", "plain-css")

CSS_CANDIDATES = (
    "app/globals.css",
    "src/app/globals.css",
    "app/global.css",
    "src/globals.css",
    "src/index.css",
    "src/app.css",
    "styles/globals.css",
)

SCSS_CANDIDATES = (
    "src/scss/_variables.scss",
    "src/scss/_custom.scss",
    "src/scss/custom.scss",
    "src/styles/_variables.scss",
    "src/styles/variables.scss",
    "assets/scss/_variables.scss",
    "scss/_variables.scss",
    "styles/_variables.scss",
)

TOKEN_DIRS = ("tokens", "design-tokens", "src/tokens", "src/design-tokens", "styles/tokens", ".")

COMPONENT_DIRS = ("components/ui", "src/components/ui")


def _split_env_list(raw: str | None) -> list[str] | None:
    if raw is None:
        return None
    return [item.strip() for item in raw.split(",") if item.strip()]


def find_existing(root: Path, candidates: tuple[str, ...]) -> list[str]:
    """Return the candidates that exist under *root*, as relative paths."""
    return [c for c in candidates if (root / c).is_file()]


@dataclass
class ProjectConfig:
    root: Path
    styling: str = "tailwind"
    css_files: list[str] = field(default_factory=list)
    scss_files: list[str] = field(default_factory=list)
    dark_selector: str = ".dark"
    component_dirs: tuple[str, ...] = COMPONENT_DIRS
    token_dirs: tuple[str, ...] = TOKEN_DIRS

    def __post_init__(self) -> None:
        self.root = Path(self.root).resolve()
        if self.styling not in STYLING_SYSTEMS:
            raise ValueError(f"Unknown styling system {self.styling!r}; expected one of {', '.join(STYLING_SYSTEMS)}")

    @classmethod
    def discover(cls, root: str | Path, styling: str = "tailwind", **overrides: object) -> ProjectConfig:
        base = Path(root).resolve()
        config = cls(
            root=base,
            styling=styling,
            css_files=find_existing(base, CSS_CANDIDATES),
            scss_files=find_existing(base, SCSS_CANDIDATES),
        )
        for key, value in overrides.items():
            if value is not None:
                setattr(config, key, value)
        return config

    @classmethod
    def from_env(cls, root: str | Path | None = None, styling: str | None = None) -> ProjectConfig:
        return cls.discover(
            root or os.getenv("DESIGNTOOLS_ROOT", os.getcwd()),
            styling=styling or os.getenv("DESIGNTOOLS_STYLING", "tailwind"),
            css_files=_split_env_list(os.getenv("DESIGNTOOLS_CSS")),
            scss_files=_split_env_list(os.getenv("DESIGNTOOLS_SCSS")),
            dark_selector=os.getenv("DESIGNTOOLS_DARK_SELECTOR"),
        )

    @property
    def primary_css(self) -> str | None:
        return self.css_files[0] if self.css_files else None
