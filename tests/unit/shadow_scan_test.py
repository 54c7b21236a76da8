"""Tests for shadow discovery, precedence and ordering."""

from __future__ import annotations

from pathlib import Path

import pytest

from designtools.core.project import ProjectConfig
from designtools.core.shadow_scan import (
    merge_shadows,
    natural_key,
    scan_custom_shadows,
    scan_design_token_shadows,
    scan_framework_shadows,
    scan_shadows,
    size_rank,
    sort_shadows,
)
from designtools.models import ShadowDefinition


def _shadow(name: str, source: str = "custom", value: str = "0 1px red") -> ShadowDefinition:
    return ShadowDefinition(name=name, value=value, source=source)  # type: ignore[arg-type]


class TestOrdering:
    @pytest.mark.parametrize(
        ("name", "rank"),
        [("shadow-2xs", 0), ("shadow-sm", 2), ("shadow", 3), ("box-shadow", 3), ("shadow-xl", 6), ("shadow-inner", 99)],
    )
    def test_size_rank(self, name: str, rank: int) -> None:
        assert size_rank(name) == rank

    def test_natural_key_compares_numbers(self) -> None:
        assert sorted(["layer-10", "layer-2", "layer-1"], key=natural_key) == ["layer-1", "layer-2", "layer-10"]

    def test_sort_by_source_then_size(self) -> None:
        shadows = [
            _shadow("shadow-lg", "framework-preset"),
            _shadow("elevated", "design-token"),
            _shadow("shadow-lg"),
            _shadow("shadow-sm"),
        ]
        ordered = [(s.source, s.name) for s in sort_shadows(shadows)]
        assert ordered == [
            ("custom", "shadow-sm"),
            ("custom", "shadow-lg"),
            ("design-token", "elevated"),
            ("framework-preset", "shadow-lg"),
        ]

    def test_merge_keeps_highest_precedence(self) -> None:
        merged = merge_shadows([_shadow("shadow-md", value="custom")], [_shadow("shadow-md", "framework-preset")])
        assert len(merged) == 1
        assert merged[0].value == "custom"


class TestCustomShadows:
    def test_root_and_theme_shadows(self, globals_css: str) -> None:
        shadows = {s.name: s for s in scan_custom_shadows(globals_css, "app/globals.css")}
        assert set(shadows) == {"shadow-md", "shadow-card"}
        md = shadows["shadow-md"]
        assert md.css_variable == "--shadow-md"
        assert md.is_overridden is True
        assert md.file_path == "app/globals.css"
        assert md.layers[0].offset_y == "4px"

    def test_shadow_like_values_without_shadow_in_name(self) -> None:
        shadows = scan_custom_shadows(":root {\n  --elevation-1: 0 1px 2px black;\n  --gap: 4px;\n}")
        assert [s.name for s in shadows] == ["elevation-1"]


class TestDesignTokenShadows:
    def test_reads_token_files(self, tailwind_project: ProjectConfig) -> None:
        shadows = scan_design_token_shadows(tailwind_project.root, ["tokens/shadows.tokens.json"])
        assert len(shadows) == 1
        shadow = shadows[0]
        assert shadow.name == "elevated"
        assert shadow.value == "0px 8px 16px 0px #00000033"
        assert shadow.token_path == "shadow.elevated"
        assert shadow.description == "Raised surfaces"

    def test_unparsable_file_is_skipped(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        (tmp_path / "bad.tokens.json").write_text("{")
        assert scan_design_token_shadows(tmp_path, ["bad.tokens.json"]) == []
        assert "Skipping design-token file" in caplog.text

    def test_alias_token_skips_only_itself(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        (tmp_path / "mixed.tokens.json").write_text(
            '{"shadow": {"$type": "shadow",'
            ' "alias": {"$value": "{shadow.base}"},'
            ' "base": {"$value": {"offsetX": "0", "offsetY": "1px", "blur": "2px", "color": "red"}}}}'
        )
        shadows = scan_design_token_shadows(tmp_path, ["mixed.tokens.json"])
        assert [s.name for s in shadows] == ["base"]
        assert "Skipping token shadow.alias" in caplog.text


class TestFrameworkShadows:
    def test_tailwind_presets(self) -> None:
        shadows = scan_framework_shadows("tailwind", {}, {})
        names = [s.name for s in shadows]
        assert "shadow-md" in names
        assert all(s.source == "framework-preset" and not s.is_overridden for s in shadows)

    def test_no_presets_for_plain_css(self) -> None:
        assert scan_framework_shadows("plain-css", {}, {}) == []

    def test_bootstrap_css_override_beats_scss(self) -> None:
        shadows = scan_framework_shadows(
            "bootstrap",
            {"src/index.css": ":root { --bs-box-shadow: 0 1px 1px red; }"},
            {"src/scss/_variables.scss": "$box-shadow: 0 2px 2px blue;\n"},
        )
        shadow = {s.name: s for s in shadows}["box-shadow"]
        assert shadow.value == "0 1px 1px red"
        assert shadow.is_overridden is True
        assert shadow.file_path == "src/index.css"
        assert shadow.css_variable == "--bs-box-shadow"
        assert shadow.sass_variable == "$box-shadow"


class TestScanShadows:
    def test_tailwind_project_precedence(self, tailwind_project: ProjectConfig) -> None:
        shadow_map = scan_shadows(tailwind_project)
        by_name = shadow_map.by_name()
        assert by_name["shadow-md"].source == "custom"
        assert by_name["elevated"].source == "design-token"
        assert by_name["shadow-lg"].source == "framework-preset"
        assert shadow_map.token_files == ["tokens/shadows.tokens.json"]
        assert shadow_map.css_file_path == "app/globals.css"
        assert shadow_map.shadows[0].source == "custom"

    def test_bootstrap_project_overrides(self, bootstrap_project: ProjectConfig) -> None:
        by_name = scan_shadows(bootstrap_project).by_name()
        assert by_name["box-shadow"].value == "0 .5rem 1rem rgba(0, 0, 0, .2)"
        assert by_name["box-shadow"].file_path == "src/scss/_variables.scss"
        assert by_name["box-shadow-sm"].value == "0 1px 2px rgba(0, 0, 0, 0.2)"
        assert by_name["box-shadow-sm"].source == "framework-preset"
        assert by_name["box-shadow-lg"].value == "0 1rem 3rem rgba(0, 0, 0, .3)"
        assert by_name["box-shadow-inset"].is_overridden is False
        assert "bs-box-shadow-sm" not in by_name
