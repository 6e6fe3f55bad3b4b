"""Font loading shared by the CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path

from fontTools.ttLib import TTLibError
from rich.console import Console

from typeface_resolver.exceptions import TypefaceError
from typeface_resolver.tables.fonttools import FontToolsTableProvider
from typeface_resolver.typeface import Typeface

logger = logging.getLogger(__name__)
console = Console(stderr=True)


def load_typeface(path: Path, font_number: int = 0) -> Typeface:
    """Load and resolve a typeface, exiting with status 1 on failure."""
    try:
        typeface = Typeface(FontToolsTableProvider.from_path(path, font_number))
        # Force resolution so table errors surface here.
        typeface.full_name
    except (OSError, TTLibError, TypefaceError) as e:
        console.print(f"[red]Error:[/red] Could not load {path}: {e}")
        raise SystemExit(1) from e
    logger.info("Loaded %s as %r", path.name, typeface.full_name)
    return typeface
