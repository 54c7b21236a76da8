"""Tests for the designtools CLI."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from designtools.cli.app import app
from designtools.core.project import ProjectConfig

runner = CliRunner()


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["scan"],
        ["scan", "tokens"],
        ["classes"],
        ["write"],
        ["write", "component"],
        ["markers"],
        ["serve"],
    ],
    ids=["root", "scan", "scan-tokens", "classes", "write", "write-component", "markers", "serve"],
)
def test_short_help_flag(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "-h"])
    assert result.exit_code == 0
    assert "Usage" in result.output


def _invoke(config: ProjectConfig, *args: str) -> list[str]:
    return ["--root", str(config.root), *args]


class TestScanCommands:
    def test_tokens(self, tailwind_project: ProjectConfig) -> None:
        result = runner.invoke(app, _invoke(tailwind_project, "scan", "tokens"))
        assert result.exit_code == 0, result.output
        assert "--primary" in result.output

    def test_tokens_without_stylesheet(self, tmp_path: object) -> None:
        result = runner.invoke(app, ["--root", str(tmp_path), "scan", "tokens"])
        assert result.exit_code == 0
        assert "No stylesheet found" in result.output
        assert "(0 rows)" in result.output

    def test_shadows(self, tailwind_project: ProjectConfig) -> None:
        result = runner.invoke(app, _invoke(tailwind_project, "scan", "shadows"))
        assert result.exit_code == 0
        assert "shadow-md" in result.output

    def test_components(self, tailwind_project: ProjectConfig) -> None:
        result = runner.invoke(app, _invoke(tailwind_project, "scan", "components"))
        assert result.exit_code == 0
        assert "Button" in result.output
        assert "(1 rows)" in result.output

    def test_unknown_styling(self, tmp_path: object) -> None:
        result = runner.invoke(app, ["--root", str(tmp_path), "--styling", "less", "scan", "tokens"])
        assert result.exit_code != 0


class TestClassCommands:
    def test_build(self) -> None:
        result = runner.invoke(app, ["classes", "build", "backgroundColor", "blue-500", "--prefix", "md"])
        assert result.exit_code == 0
        assert "md:bg-blue-500" in result.output

    def test_from_computed_arbitrary(self) -> None:
        result = runner.invoke(app, ["classes", "from-computed", "padding-top", "13px"])
        assert result.exit_code == 0
        assert "pt-[13px]" in result.output
        assert "arbitrary value" in result.output

    def test_from_computed_unknown_property(self) -> None:
        result = runner.invoke(app, ["classes", "from-computed", "filter", "blur(2px)"])
        assert result.exit_code == 1
        assert "unparsable" in result.output


class TestWriteCommands:
    def test_token(self, tailwind_project: ProjectConfig) -> None:
        result = runner.invoke(
            app, _invoke(tailwind_project, "write", "token", "app/globals.css", "--", "--radius", "1rem")
        )
        assert result.exit_code == 0, result.output
        assert "Wrote" in result.output
        assert "--radius: 1rem;" in (tailwind_project.root / "app" / "globals.css").read_text()

    def test_missing_token_exits_with_error(self, tailwind_project: ProjectConfig) -> None:
        result = runner.invoke(
            app, _invoke(tailwind_project, "write", "token", "app/globals.css", "--", "--nope", "1rem")
        )
        assert result.exit_code == 1
        assert "not_found" in result.output

    def test_component(self, tailwind_project: ProjectConfig) -> None:
        result = runner.invoke(
            app,
            _invoke(
                tailwind_project, "write", "component", "components/ui/button.tsx", "h-8", "h-7",
                "--variant-context", "sm",
            ),
        )
        assert result.exit_code == 0, result.output
        assert 'sm: "h-7 px-3"' in (tailwind_project.root / "components" / "ui" / "button.tsx").read_text()

    def test_sass(self, bootstrap_project: ProjectConfig) -> None:
        result = runner.invoke(
            app, _invoke(bootstrap_project, "write", "sass", "src/scss/_variables.scss", "$box-shadow-lg", "none")
        )
        assert result.exit_code == 0, result.output
        assert "$box-shadow-lg: none;" in (bootstrap_project.root / "src" / "scss" / "_variables.scss").read_text()


def test_markers_clean(tailwind_project: ProjectConfig) -> None:
    page = tailwind_project.root / "app" / "page.tsx"
    page.write_text('<main data-studio-eid="s1234abcd" className="p-4"></main>\n')
    result = runner.invoke(app, _invoke(tailwind_project, "markers", "clean"))
    assert result.exit_code == 0
    assert "(1 files)" in result.output
    assert page.read_text() == '<main className="p-4"></main>\n'
