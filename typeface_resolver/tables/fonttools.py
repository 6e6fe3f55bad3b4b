"""Table provider backed by a fontTools ``TTFont``.

fontTools does the binary parsing; this module only reshapes its table
objects into the records the resolvers consume.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from typeface_resolver.characteristics import TypeSlope, TypeWeight, TypeWidth
from typeface_resolver.exceptions import TableDataError
from typeface_resolver.tables.records import (
    NO_NAME_ID,
    AxisRecord,
    DesignCharacteristics,
    InstanceRecord,
    PaletteTable,
)

if TYPE_CHECKING:
    from fontTools.ttLib import TTFont

logger = logging.getLogger(__name__)

# OS/2 fsSelection bits
FS_SELECTION_ITALIC = 1 << 0
FS_SELECTION_OBLIQUE = 1 << 9

# name table ids
NAME_ID_FAMILY = 1
NAME_ID_SUBFAMILY = 2
NAME_ID_FULL_NAME = 4
NAME_ID_TYPOGRAPHIC_FAMILY = 16
NAME_ID_TYPOGRAPHIC_SUBFAMILY = 17


def _color_to_argb(color) -> int:
    """Pack a fontTools CPAL ``Color`` into a 32-bit ARGB integer."""
    return (color.alpha << 24) | (color.red << 16) | (color.green << 8) | color.blue


class FontToolsTableProvider:
    """Expose the fvar, CPAL, name and OS/2 tables of a ``TTFont``."""

    def __init__(self, font: TTFont) -> None:
        self.font = font

    @classmethod
    def from_path(cls, path: str | Path, font_number: int = 0) -> FontToolsTableProvider:
        """Open a font file (or one face of a collection) lazily."""
        from fontTools.ttLib import TTFont

        path = Path(path)
        logger.debug("Opening %s (face %d)", path, font_number)
        if path.suffix.lower() in (".ttc", ".otc"):
            font = TTFont(str(path), lazy=True, fontNumber=font_number)
        else:
            font = TTFont(str(path), lazy=True)
        return cls(font)

    def _table(self, tag: str):
        if tag not in self.font:
            return None
        try:
            return self.font[tag]
        except Exception as e:
            raise TableDataError(f"Failed to read '{tag}' table: {e}") from e

    def axis_records(self) -> list[AxisRecord] | None:
        fvar = self._table("fvar")
        if fvar is None:
            return None
        return [
            AxisRecord(
                tag=axis.axisTag,
                min_value=float(axis.minValue),
                default_value=float(axis.defaultValue),
                max_value=float(axis.maxValue),
                flags=int(axis.flags),
                name_id=int(axis.axisNameID),
            )
            for axis in fvar.axes
        ]

    def instance_records(self) -> list[InstanceRecord] | None:
        fvar = self._table("fvar")
        if fvar is None:
            return None
        tags = [axis.axisTag for axis in fvar.axes]
        records = []
        for instance in fvar.instances:
            try:
                coordinates = tuple(float(instance.coordinates[tag]) for tag in tags)
            except KeyError as e:
                raise TableDataError(f"Named instance lacks a coordinate for axis {e}") from e
            ps_name_id = getattr(instance, "postscriptNameID", NO_NAME_ID)
            records.append(
                InstanceRecord(
                    name_id=int(instance.subfamilyNameID),
                    coordinates=coordinates,
                    postscript_name_id=None if ps_name_id == NO_NAME_ID else int(ps_name_id),
                )
            )
        return records

    def palette_table(self) -> PaletteTable | None:
        cpal = self._table("CPAL")
        if cpal is None:
            return None
        colors: list[int] = []
        indices: list[int] = []
        for palette in cpal.palettes:
            indices.append(len(colors))
            colors.extend(_color_to_argb(color) for color in palette)
        # Optional version 1 arrays are empty lists on a freshly built version 0 table.
        return PaletteTable(
            entry_count=int(cpal.numPaletteEntries),
            palette_count=len(cpal.palettes),
            colors=colors,
            types=list(getattr(cpal, "paletteTypes", ())) or None,
            palette_name_ids=list(getattr(cpal, "paletteLabels", ())) or None,
            entry_name_ids=list(getattr(cpal, "paletteEntryLabels", ())) or None,
            color_record_indices=indices,
        )

    def search_name(self, name_id: int) -> str | None:
        name = self._table("name")
        if name is None:
            return None
        return name.getDebugName(name_id)

    def default_family_name(self) -> str | None:
        return self.search_name(NAME_ID_TYPOGRAPHIC_FAMILY) or self.search_name(NAME_ID_FAMILY)

    def default_style_name(self) -> str | None:
        return self.search_name(NAME_ID_TYPOGRAPHIC_SUBFAMILY) or self.search_name(
            NAME_ID_SUBFAMILY
        )

    def default_full_name(self) -> str | None:
        return self.search_name(NAME_ID_FULL_NAME)

    def intrinsic_characteristics(self) -> DesignCharacteristics | None:
        os2 = self._table("OS/2")
        if os2 is None:
            return None
        fs_selection = int(os2.fsSelection)
        return DesignCharacteristics(
            weight=TypeWeight.from_weight_class(os2.usWeightClass),
            width=TypeWidth.from_width_class(os2.usWidthClass),
            slope=TypeSlope.from_style_flags(
                italic=bool(fs_selection & FS_SELECTION_ITALIC),
                oblique=bool(fs_selection & FS_SELECTION_OBLIQUE),
            ),
        )
