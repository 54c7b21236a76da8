"""Console helpers shared by the CLI sub-apps."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from designtools.core.errors import DesignToolsError
from designtools.core.project import ProjectConfig

console = Console()


def render_table(headers: Sequence[str], rows: Sequence[tuple[Any, ...]]) -> None:
    table = Table(show_lines=False)
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*(escape(str(v)) for v in row))
    console.print(table)
    console.print(f"({len(rows)} rows)")


@contextmanager
def reported_errors() -> Iterator[None]:
    """Print a core error in red and exit with status 1."""
    try:
        yield
    except DesignToolsError as exc:
        console.print(f"[red]{exc.kind}: {escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc


def project_from(ctx: typer.Context) -> ProjectConfig:
    config = ctx.find_object(ProjectConfig)
    if config is None:
        config = ProjectConfig.from_env()
    return config
