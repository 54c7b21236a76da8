from __future__ import annotations

from typing import Annotated

import typer
from rich.markup import escape

from designtools.cli.output import console, render_table, reported_errors
from designtools.core.computed_classes import computed_to_class
from designtools.core.utility_classes import build_class, parse_classes

classes_app = typer.Typer(help="Map between utility classes and CSS values.")


@classes_app.command("parse")
def parse(
    classes: Annotated[str, typer.Argument(help="Space-separated class string.")],
) -> None:
    """Group a class string into structured properties."""
    parsed = parse_classes(classes)
    rows = [(p.category, p.property, p.value, p.variant_prefix or "", p.full_class_text) for p in parsed.all()]
    render_table(["category", "property", "value", "prefix", "class"], rows)


@classes_app.command("build")
def build(
    property: Annotated[str, typer.Argument(help="Utility property, e.g. backgroundColor.")],
    value: Annotated[str, typer.Argument(help="Scale value or token name.")],
    prefix: Annotated[str | None, typer.Option(help="Variant prefix such as hover or md.")] = None,
) -> None:
    """Build a utility class from a property and value."""
    console.print(escape(build_class(property, value, prefix)))


@classes_app.command("from-computed")
def from_computed(
    css_property: Annotated[str, typer.Argument(help="CSS property name, e.g. padding-top.")],
    value: Annotated[str, typer.Argument(help="Rendered CSS value, e.g. 16px.")],
    prefix: Annotated[str | None, typer.Option(help="Variant prefix such as hover or md.")] = None,
) -> None:
    """Suggest a utility class for a rendered CSS value."""
    with reported_errors():
        suggestion = computed_to_class(css_property, value, prefix)
    note = "" if suggestion.exact else " [dim](arbitrary value)[/dim]"
    console.print(f"{escape(suggestion.class_name)}{note}")
