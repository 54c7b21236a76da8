"""Tests for project configuration and path validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from designtools.core.errors import InvalidPathError
from designtools.core.paths import safe_path
from designtools.core.project import ProjectConfig


class TestProjectConfig:
    def test_discover_finds_candidates(self, tailwind_project: ProjectConfig) -> None:
        assert tailwind_project.css_files == ["app/globals.css"]
        assert tailwind_project.scss_files == []
        assert tailwind_project.primary_css == "app/globals.css"

    def test_unknown_styling_is_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Unknown styling system"):
            ProjectConfig(root=tmp_path, styling="foundation")

    def test_discover_overrides_skip_none(self, tmp_path: Path) -> None:
        config = ProjectConfig.discover(tmp_path, css_files=["x.css"], dark_selector=None)
        assert config.css_files == ["x.css"]
        assert config.dark_selector == ".dark"

    def test_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DESIGNTOOLS_ROOT", str(tmp_path))
        monkeypatch.setenv("DESIGNTOOLS_STYLING", "bootstrap")
        monkeypatch.setenv("DESIGNTOOLS_CSS", "a.css, b.css")
        monkeypatch.setenv("DESIGNTOOLS_DARK_SELECTOR", "[data-bs-theme=dark]")
        config = ProjectConfig.from_env()
        assert config.root == tmp_path.resolve()
        assert config.styling == "bootstrap"
        assert config.css_files == ["a.css", "b.css"]
        assert config.dark_selector == "[data-bs-theme=dark]"

    def test_from_env_arguments_win(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DESIGNTOOLS_STYLING", "bootstrap")
        config = ProjectConfig.from_env(tmp_path, "plain-css")
        assert config.styling == "plain-css"
        assert config.primary_css is None


class TestSafePath:
    def test_resolves_inside_root(self, tmp_path: Path) -> None:
        assert safe_path(tmp_path, "app/globals.css") == (tmp_path / "app" / "globals.css").resolve()

    @pytest.mark.parametrize("rel", ["", "   ", "/etc/passwd", "../outside.css", "app/../../outside.css"])
    def test_rejects_paths_outside_root(self, tmp_path: Path, rel: str) -> None:
        with pytest.raises(InvalidPathError):
            safe_path(tmp_path, rel)

    def test_rejects_symlink_escape(self, tmp_path: Path) -> None:
        outside = tmp_path / "outside"
        outside.mkdir()
        root = tmp_path / "root"
        root.mkdir()
        (root / "link").symlink_to(outside, target_is_directory=True)
        with pytest.raises(InvalidPathError):
            safe_path(root, "link/file.css")

    def test_sibling_with_common_prefix_is_rejected(self, tmp_path: Path) -> None:
        root = tmp_path / "proj"
        root.mkdir()
        (tmp_path / "proj-evil").mkdir()
        with pytest.raises(InvalidPathError):
            safe_path(root, "../proj-evil/x.css")
