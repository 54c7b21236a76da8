from __future__ import annotations

from typing import Annotated

import typer

from designtools.cli.output import console, project_from, render_table, reported_errors
from designtools.core.components import scan_components
from designtools.core.scan import scan_project_tokens
from designtools.core.shadow_scan import scan_shadows

scan_app = typer.Typer(help="Scan the project's tokens, shadows and components.")


@scan_app.command("tokens")
def tokens(
    ctx: typer.Context,
    category: Annotated[str | None, typer.Option(help="Only show tokens in this category.")] = None,
) -> None:
    """List custom-property tokens from the primary stylesheet."""
    config = project_from(ctx)
    with reported_errors():
        token_map = scan_project_tokens(config)
    if token_map.css_file_path is None:
        console.print("[yellow]No stylesheet found.[/yellow]")
    rows = [
        (t.name, t.category, t.group, t.light_value, t.dark_value)
        for t in token_map.tokens
        if category is None or t.category == category
    ]
    render_table(["name", "category", "group", "light", "dark"], rows)


@scan_app.command("shadows")
def shadows(ctx: typer.Context) -> None:
    """List shadows from custom properties, token files and framework presets."""
    config = project_from(ctx)
    with reported_errors():
        shadow_map = scan_shadows(config)
    rows = [
        (s.name, s.source, "yes" if s.is_overridden else "", s.value, s.file_path or s.token_file_path or "")
        for s in shadow_map.shadows
    ]
    render_table(["name", "source", "overridden", "value", "file"], rows)


@scan_app.command("components")
def components(ctx: typer.Context) -> None:
    """List components with variant definitions."""
    config = project_from(ctx)
    with reported_errors():
        entries = scan_components(config)
    rows = [
        (c.name, c.file_path, ", ".join(f"{v.name}({len(v.options)})" for v in c.variants), len(c.token_references))
        for c in entries
    ]
    render_table(["name", "file", "variants", "token refs"], rows)
