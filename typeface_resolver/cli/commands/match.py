"""Match command - pick the best face of a family for a requested style."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from typeface_resolver.characteristics import TypeSlope, TypeWeight, TypeWidth
from typeface_resolver.cli.commands.loading import load_typeface
from typeface_resolver.config import Config
from typeface_resolver.family import TypeFamily, select_best_match
from typeface_resolver.typeface import Typeface

console = Console()


def expand_named_styles(typeface: Typeface) -> list[Typeface]:
    """Return one variation instance per named style, or the face itself."""
    named_styles = typeface.named_styles
    if not named_styles:
        return [typeface]
    return [typeface.variation_instance(style.coordinates) for style in named_styles]


def _parse_option(parser, value: str | None, param: str):
    if value is None:
        return None
    try:
        return parser(value)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint=param) from e


@click.command()
@click.argument(
    "font_files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--width", help="Desired width (e.g. condensed, normal, expanded)")
@click.option("--weight", help="Desired weight (e.g. 300, bold, semi-bold)")
@click.option("--slope", help="Desired slope (plain, italic, oblique)")
@click.option(
    "--instances/--no-instances",
    default=None,
    help="Expand variable fonts into their named styles",
)
@click.pass_context
def match(
    ctx: click.Context,
    font_files: tuple[Path, ...],
    width: str | None,
    weight: str | None,
    slope: str | None,
    instances: bool | None,
) -> None:
    """Select the face of FONT_FILES that best matches a style.

    FONT_FILES: Font files forming one family, in priority order.
    """
    config: Config = (ctx.obj or {}).get("config") or Config.load()
    default_width, default_weight, default_slope = config.style_request()

    desired_width = _parse_option(TypeWidth.parse, width, "--width") or default_width
    desired_weight = _parse_option(TypeWeight.parse, weight, "--weight") or default_weight
    desired_slope = _parse_option(TypeSlope.parse, slope, "--slope") or default_slope
    expand = config.expand_named_instances if instances is None else instances

    typefaces: list[Typeface] = []
    for font_file in font_files:
        typeface = load_typeface(font_file)
        typefaces.extend(expand_named_styles(typeface) if expand else [typeface])

    family = TypeFamily(typefaces[0].family_name, tuple(typefaces))
    best = select_best_match(family, desired_width, desired_weight, desired_slope)

    table = Table(title=f"Family: {family.family_name}")
    table.add_column("", width=1)
    table.add_column("Full name", style="cyan")
    table.add_column("Width", style="green")
    table.add_column("Weight", style="yellow")
    table.add_column("Slope", style="magenta")
    for typeface in family:
        table.add_row(
            "*" if typeface is best else "",
            typeface.full_name,
            typeface.width.name,
            f"{typeface.weight.name} ({typeface.weight.css_value})",
            typeface.slope.name,
        )
    console.print(table)
    console.print(
        f"\n[bold]Requested:[/bold] {desired_width.name} / {desired_weight.name} / "
        f"{desired_slope.name}"
    )
    console.print(f"[bold green]Best match:[/bold green] {best.full_name}")
