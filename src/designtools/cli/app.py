import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from designtools.cli.classes import classes_app
from designtools.cli.markers import markers_app
from designtools.cli.scan import scan_app
from designtools.cli.serve import serve_app
from designtools.cli.write import write_app
from designtools.core.project import STYLING_SYSTEMS, ProjectConfig

app = typer.Typer(
    name="designtools",
    help="designtools CLI: scan and edit design values in source files.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    ctx: typer.Context,
    root: Annotated[Path | None, typer.Option(help="Project root (defaults to DESIGNTOOLS_ROOT or the cwd).")] = None,
    styling: Annotated[str | None, typer.Option(help=f"Styling system: {', '.join(STYLING_SYSTEMS)}.")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log scan and write details.")] = False,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=[RichHandler(show_path=False)])
    try:
        ctx.obj = ProjectConfig.from_env(root, styling)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--styling") from exc


app.add_typer(scan_app, name="scan")
app.add_typer(classes_app, name="classes")
app.add_typer(write_app, name="write")
app.add_typer(markers_app, name="markers")
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
