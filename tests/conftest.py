"""Shared fixtures and helpers for tests."""

import json
from pathlib import Path

import pytest

from designtools.core.project import ProjectConfig

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Sample project trees
# ---------------------------------------------------------------------------

GLOBALS_CSS = """\
@import "tailwindcss";

:root {
  --background: oklch(1 0 0);
  --foreground: oklch(0.145 0 0);
  --primary: oklch(0.205 0 0);
  --radius: 0.625rem;
  --shadow-md: 0 4px 6px -1px rgb(0 0 0 / 0.1);
}

.dark {
  --background: oklch(0.145 0 0);
  --primary: oklch(0.985 0 0);
  --sidebar: oklch(0.2 0 0);
}

@theme inline {
  --shadow-card: 0 1px 3px 0 rgb(0 0 0 / 0.1);
  --color-background: var(--background);
}
"""

BUTTON_TSX = """\
import { cva } from "class-variance-authority"

const buttonVariants = cva(
  "inline-flex items-center rounded-md text-sm",
  {
    variants: {
      variant: {
        default: "bg-primary text-primary-foreground",
        outline: "border border-input bg-background",
      },
      size: {
        default: "h-9 px-4 py-2",
        sm: "h-8 px-3",
      },
    },
    defaultVariants: {
      variant: "default",
      size: "default",
    },
  }
)

function Button({ className, variant, size, ...props }) {
  return <button data-slot="button" className={buttonVariants({ variant, size, className })} {...props} />
}

export { Button, buttonVariants }
"""

SHADOW_TOKENS = {
    "shadow": {
        "$type": "shadow",
        "elevated": {
            "$value": {"offsetX": "0px", "offsetY": "8px", "blur": "16px", "spread": "0px", "color": "#00000033"},
            "$description": "Raised surfaces",
        },
    }
}

BOOTSTRAP_SCSS = """\
$box-shadow: 0 .5rem 1rem rgba($black, .2) !default;
$box-shadow-lg: 0 1rem 3rem rgba(0, 0, 0, .3);
"""


@pytest.fixture
def tailwind_project(tmp_path: Path) -> ProjectConfig:
    """A Tailwind project with a stylesheet, one component and a token file."""
    (tmp_path / "app").mkdir()
    (tmp_path / "app" / "globals.css").write_text(GLOBALS_CSS, encoding="utf-8")
    (tmp_path / "components" / "ui").mkdir(parents=True)
    (tmp_path / "components" / "ui" / "button.tsx").write_text(BUTTON_TSX, encoding="utf-8")
    (tmp_path / "tokens").mkdir()
    (tmp_path / "tokens" / "shadows.tokens.json").write_text(json.dumps(SHADOW_TOKENS, indent=2), encoding="utf-8")
    return ProjectConfig.discover(tmp_path, styling="tailwind")


@pytest.fixture
def bootstrap_project(tmp_path: Path) -> ProjectConfig:
    """A Bootstrap project overriding shadows in Sass and in CSS."""
    (tmp_path / "src" / "scss").mkdir(parents=True)
    (tmp_path / "src" / "scss" / "_variables.scss").write_text(BOOTSTRAP_SCSS, encoding="utf-8")
    (tmp_path / "src" / "index.css").write_text(
        ":root {\n  --bs-box-shadow-sm: 0 1px 2px rgba(0, 0, 0, 0.2);\n}\n", encoding="utf-8"
    )
    return ProjectConfig.discover(tmp_path, styling="bootstrap")


@pytest.fixture
def globals_css() -> str:
    return GLOBALS_CSS


@pytest.fixture
def button_source() -> str:
    return BUTTON_TSX
