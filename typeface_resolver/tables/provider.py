"""Table provider contract and an in-memory implementation."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from typeface_resolver.tables.records import (
    AxisRecord,
    DesignCharacteristics,
    InstanceRecord,
    PaletteTable,
)


@runtime_checkable
class TableProvider(Protocol):
    """Source of the raw records a typeface is resolved from.

    Every table accessor may return ``None`` when the font lacks the table.
    """

    def axis_records(self) -> Sequence[AxisRecord] | None: ...

    def instance_records(self) -> Sequence[InstanceRecord] | None: ...

    def palette_table(self) -> PaletteTable | None: ...

    def search_name(self, name_id: int) -> str | None: ...

    def default_family_name(self) -> str | None: ...

    def default_style_name(self) -> str | None: ...

    def default_full_name(self) -> str | None: ...

    def intrinsic_characteristics(self) -> DesignCharacteristics | None: ...


@dataclass
class StaticTableProvider:
    """Table provider over already materialized records.

    Example:
        >>> provider = StaticTableProvider(
        ...     axes=[AxisRecord("wght", 100, 400, 900, name_id=256)],
        ...     names={256: "Weight"},
        ...     family_name="Example Sans",
        ... )
    """

    axes: Sequence[AxisRecord] | None = None
    instances: Sequence[InstanceRecord] | None = None
    palettes: PaletteTable | None = None
    names: Mapping[int, str] = field(default_factory=dict)
    family_name: str | None = None
    style_name: str | None = None
    full_name: str | None = None
    characteristics: DesignCharacteristics | None = None

    def axis_records(self) -> Sequence[AxisRecord] | None:
        return self.axes

    def instance_records(self) -> Sequence[InstanceRecord] | None:
        return self.instances

    def palette_table(self) -> PaletteTable | None:
        return self.palettes

    def search_name(self, name_id: int) -> str | None:
        return self.names.get(name_id)

    def default_family_name(self) -> str | None:
        return self.family_name

    def default_style_name(self) -> str | None:
        return self.style_name

    def default_full_name(self) -> str | None:
        return self.full_name

    def intrinsic_characteristics(self) -> DesignCharacteristics | None:
        return self.characteristics
