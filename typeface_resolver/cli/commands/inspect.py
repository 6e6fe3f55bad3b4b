"""Inspect command - show the resolved descriptor of a font file."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from typeface_resolver.cli.commands.loading import load_typeface

console = Console()


def format_color(argb: int) -> str:
    """Format an ARGB color as ``#RRGGBBAA``."""
    return f"#{(argb >> 16) & 0xFF:02X}{(argb >> 8) & 0xFF:02X}{argb & 0xFF:02X}{(argb >> 24) & 0xFF:02X}"


@click.command()
@click.argument("font_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--face", "font_number", type=int, default=0, help="Face index in a collection")
def inspect(font_file: Path, font_number: int) -> None:
    """Show names, characteristics, axes, named styles and palettes of a font."""
    typeface = load_typeface(font_file, font_number)

    summary = Table(title=f"{font_file.name}", show_header=False)
    summary.add_column("Property", style="cyan")
    summary.add_column("Value")
    summary.add_row("Family", typeface.family_name)
    summary.add_row("Style", typeface.style_name)
    summary.add_row("Full name", typeface.full_name)
    summary.add_row("Weight", f"{typeface.weight.name} ({typeface.weight.css_value})")
    summary.add_row("Width", typeface.width.name)
    summary.add_row("Slope", typeface.slope.name)
    summary.add_row("Variable", "yes" if typeface.is_variable else "no")
    console.print(summary)

    axes = typeface.variation_axes
    if axes:
        table = Table(title="Variation Axes")
        table.add_column("Tag", style="cyan")
        table.add_column("Name", style="green")
        table.add_column("Min", justify="right")
        table.add_column("Default", justify="right", style="yellow")
        table.add_column("Max", justify="right")
        table.add_column("Flags", justify="right", style="dim")
        for axis in axes:
            table.add_row(
                axis.tag,
                axis.name,
                f"{axis.min_value:g}",
                f"{axis.default_value:g}",
                f"{axis.max_value:g}",
                str(axis.flags),
            )
        console.print(table)

    named_styles = typeface.named_styles
    if named_styles and axes:
        table = Table(title="Named Styles")
        table.add_column("Style", style="green")
        for axis in axes:
            table.add_column(axis.tag.strip(), justify="right")
        table.add_column("PostScript name", style="dim")
        for named_style in named_styles:
            table.add_row(
                named_style.style_name or "[dim](unnamed)[/dim]",
                *(f"{value:g}" for value in named_style.coordinates),
                named_style.postscript_name or "",
            )
        console.print(table)

    palettes = typeface.predefined_palettes
    if palettes:
        entry_names = typeface.palette_entry_names or ()
        table = Table(title="Color Palettes")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Name", style="green")
        table.add_column("Flags", justify="right")
        table.add_column("Colors")
        for index, palette in enumerate(palettes):
            table.add_row(
                str(index),
                palette.name,
                str(palette.flags),
                " ".join(format_color(color) for color in palette.colors),
            )
        console.print(table)
        if any(entry_names):
            console.print(f"[bold]Palette entries:[/bold] {', '.join(entry_names)}")
