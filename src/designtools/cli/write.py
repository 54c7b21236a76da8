"""Commands that write design values back into source files."""

from __future__ import annotations

from typing import Annotated

import typer

from designtools.cli.output import console, project_from, reported_errors
from designtools.core import writes
from designtools.core.writes import WriteResult

write_app = typer.Typer(help="Write design values back into source files.")

FileArg = Annotated[str, typer.Argument(help="File path relative to the project root.")]


def _report(result: WriteResult) -> None:
    if not result.changed:
        console.print(f"[yellow]No change[/yellow] to {result.file_path}")
        return
    console.print(f"[green]Wrote[/green] {result.identifier} in {result.file_path}")
    if result.inset_dropped:
        console.print("[yellow]Inset layers cannot be represented in a token file; the flag was dropped.[/yellow]")


@write_app.command("token")
def token(
    ctx: typer.Context,
    file: FileArg,
    name: Annotated[str, typer.Argument(help="Custom property, e.g. --primary.")],
    value: Annotated[str, typer.Argument(help="New value.")],
    selector: Annotated[str, typer.Option(help="Selector block holding the property.")] = ":root",
) -> None:
    """Replace a custom property's value inside a selector block."""
    config = project_from(ctx)
    with reported_errors():
        _report(writes.write_token(config.root, file, selector, name, value))


@write_app.command("shadow")
def shadow(
    ctx: typer.Context,
    file: FileArg,
    variable: Annotated[str, typer.Argument(help="Custom property, e.g. --shadow-md.")],
    value: Annotated[str, typer.Argument(help="Shadow value.")],
    selector: Annotated[str, typer.Option(help="Selector block, or @theme.")] = ":root",
    create: Annotated[bool, typer.Option(help="Add the property if it is missing.")] = False,
) -> None:
    """Write a shadow custom property."""
    config = project_from(ctx)
    with reported_errors():
        _report(writes.write_shadow(config.root, file, variable, value, selector, create=create))


@write_app.command("sass")
def sass(
    ctx: typer.Context,
    file: FileArg,
    variable: Annotated[str, typer.Argument(help="Sass variable, e.g. $box-shadow.")],
    value: Annotated[str, typer.Argument(help="New value.")],
    create: Annotated[bool, typer.Option(help="Append the variable if it is missing.")] = False,
) -> None:
    """Write a Sass variable declaration."""
    config = project_from(ctx)
    with reported_errors():
        _report(writes.write_shadow(config.root, file, variable, value, writes.SCSS_SELECTOR, create=create))


@write_app.command("design-token")
def design_token(
    ctx: typer.Context,
    file: FileArg,
    token_path: Annotated[str, typer.Argument(help="Dotted token path, e.g. shadow.md.")],
    value: Annotated[str, typer.Argument(help="Shadow value in CSS form.")],
) -> None:
    """Update a shadow token's value in a design-token file."""
    config = project_from(ctx)
    with reported_errors():
        _report(writes.write_design_token(config.root, file, token_path, value))


@write_app.command("component")
def component(
    ctx: typer.Context,
    file: FileArg,
    old_class: Annotated[str, typer.Argument(help="Class to replace.")],
    new_class: Annotated[str, typer.Argument(help="Replacement class.")],
    variant_context: Annotated[
        str | None, typer.Option(help="Variant option whose class string holds the class.")
    ] = None,
) -> None:
    """Swap a class in a component's source."""
    config = project_from(ctx)
    with reported_errors():
        _report(writes.write_component_class(config.root, file, old_class, new_class, variant_context))
