from __future__ import annotations

import typer

from designtools.cli.output import console, project_from
from designtools.core.writes import cleanup_stale_markers

markers_app = typer.Typer(help="Manage element markers left in source files.")


@markers_app.command("clean")
def clean(ctx: typer.Context) -> None:
    """Strip every element marker from the project's source files."""
    config = project_from(ctx)
    cleaned = cleanup_stale_markers(config.root)
    for path in cleaned:
        console.print(f"[green]Cleaned[/green] {path}")
    console.print(f"({len(cleaned)} files)")
