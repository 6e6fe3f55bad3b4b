"""Command line entry point for typeface-resolver."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from typeface_resolver import __version__
from typeface_resolver.cli.commands import inspect, match
from typeface_resolver.config import LOG_LEVELS, Config
from typeface_resolver.exceptions import ConfigError

console = Console(stderr=True)


def setup_logging(level: str) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(__version__, prog_name="typeface-resolver")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML configuration file",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (overrides config)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """Resolve variable font design spaces, palettes and family style matches."""
    try:
        config = Config.load(config_path)
    except ConfigError as e:
        raise click.UsageError(str(e)) from e

    level = (log_level or config.log_level).upper()
    setup_logging(level)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


cli.add_command(inspect)
cli.add_command(match)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
