"""Raw table records handed over by a table provider.

These mirror the shape of the ``fvar`` and ``CPAL`` tables closely enough for
resolution, without any byte-level layout.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from typeface_resolver.characteristics import TypeSlope, TypeWeight, TypeWidth

# Name id used by CPAL to mark a missing label.
NO_NAME_ID = 0xFFFF


def tag_to_str(tag: str | int) -> str:
    """Return a four-character tag string for a string or u32 tag."""
    if isinstance(tag, int):
        return bytes(
            ((tag >> 24) & 0xFF, (tag >> 16) & 0xFF, (tag >> 8) & 0xFF, tag & 0xFF)
        ).decode("latin-1")
    if len(tag) > 4:
        raise ValueError(f"Tag must have at most 4 characters: {tag!r}")
    return tag.ljust(4)


def tag_to_int(tag: str | int) -> int:
    """Return the u32 value of a tag."""
    if isinstance(tag, int):
        return tag
    return int.from_bytes(tag_to_str(tag).encode("latin-1"), "big")


@dataclass(frozen=True)
class AxisRecord:
    """One axis of a font variations table."""

    tag: str
    min_value: float
    default_value: float
    max_value: float
    flags: int = 0
    name_id: int = -1

    def __post_init__(self) -> None:
        object.__setattr__(self, "tag", tag_to_str(self.tag))


@dataclass(frozen=True)
class InstanceRecord:
    """One named instance of a font variations table.

    ``coordinates`` are positional against the axis records.
    """

    name_id: int
    coordinates: tuple[float, ...]
    postscript_name_id: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "coordinates", tuple(float(c) for c in self.coordinates))


@dataclass(frozen=True)
class PaletteTable:
    """Contents of a color palette table.

    ``colors`` is the flat color record array (32-bit ARGB). When
    ``color_record_indices`` is absent, palette ``i`` starts at
    ``i * entry_count``.
    """

    entry_count: int
    palette_count: int
    colors: Sequence[int]
    types: Sequence[int] | None = None
    palette_name_ids: Sequence[int] | None = None
    entry_name_ids: Sequence[int] | None = None
    color_record_indices: Sequence[int] | None = None

    def first_color_index(self, palette_index: int) -> int:
        if self.color_record_indices is None:
            return palette_index * self.entry_count
        return self.color_record_indices[palette_index]


@dataclass(frozen=True)
class DesignCharacteristics:
    """Width, weight and slope of a face."""

    weight: TypeWeight = TypeWeight.REGULAR
    width: TypeWidth = TypeWidth.NORMAL
    slope: TypeSlope = TypeSlope.PLAIN


@dataclass(frozen=True)
class StandardNames:
    family_name: str = ""
    style_name: str = ""
    full_name: str = ""

    @classmethod
    def generate(cls, family_name: str, style_name: str) -> StandardNames:
        """Build names with a full name derived from family and style."""
        family = family_name.strip()
        if family and style_name:
            full_name = f"{family} {style_name}"
        else:
            full_name = family or style_name
        return cls(family_name, style_name, full_name)
