"""CLI commands for typeface-resolver."""

from typeface_resolver.cli.commands.inspect import inspect
from typeface_resolver.cli.commands.match import match

__all__ = ["inspect", "match"]
