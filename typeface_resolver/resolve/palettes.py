"""Color palette resolution."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from typeface_resolver.exceptions import TableDataError
from typeface_resolver.tables.records import NO_NAME_ID, PaletteTable

logger = logging.getLogger(__name__)

NameLookup = Callable[[int], "str | None"]

# CPAL palette type bits
USABLE_WITH_LIGHT_BACKGROUND = 0x0001
USABLE_WITH_DARK_BACKGROUND = 0x0002


@dataclass(frozen=True)
class ColorPalette:
    """A predefined palette; ``colors`` are 32-bit ARGB values."""

    name: str
    flags: int
    colors: tuple[int, ...]

    @property
    def is_usable_with_light_background(self) -> bool:
        return bool(self.flags & USABLE_WITH_LIGHT_BACKGROUND)

    @property
    def is_usable_with_dark_background(self) -> bool:
        return bool(self.flags & USABLE_WITH_DARK_BACKGROUND)


def _label(name_lookup: NameLookup, name_id: int) -> str:
    if name_id == NO_NAME_ID:
        return ""
    return name_lookup(name_id) or ""


def resolve_palette_defaults(
    palette_table: PaletteTable | None,
    name_lookup: NameLookup,
) -> tuple[tuple[str, ...], tuple[ColorPalette, ...]]:
    """Resolve palette entry names and predefined palettes.

    Returns:
        Tuple of (entry names, palettes). Both are empty when the table is
        absent or declares no palette.

    Raises:
        TableDataError: If a palette's colors run past the color array.
    """
    if palette_table is None or palette_table.palette_count == 0:
        return (), ()

    entry_count = palette_table.entry_count
    colors = palette_table.colors
    palettes: list[ColorPalette] = []

    for index in range(palette_table.palette_count):
        name = ""
        if palette_table.palette_name_ids is not None:
            name = _label(name_lookup, palette_table.palette_name_ids[index])

        flags = 0
        if palette_table.types is not None:
            flags = palette_table.types[index]

        first = palette_table.first_color_index(index)
        if first < 0 or first + entry_count > len(colors):
            raise TableDataError(
                f"Palette {index} needs colors {first}..{first + entry_count - 1} "
                f"but the table has {len(colors)} color records"
            )

        palettes.append(ColorPalette(name, flags, tuple(colors[first : first + entry_count])))

    if palette_table.entry_name_ids is None:
        entry_names = ("",) * entry_count
    else:
        entry_names = tuple(
            _label(name_lookup, palette_table.entry_name_ids[index])
            for index in range(entry_count)
        )

    logger.debug("Resolved %d palettes of %d entries", len(palettes), entry_count)
    return entry_names, tuple(palettes)


def default_palette(palettes: Sequence[ColorPalette]) -> ColorPalette | None:
    """Return the palette active by default: the first one, if any."""
    return palettes[0] if palettes else None
