"""Raw table records and the providers that supply them.

This subpackage provides:
- Record types for variation axes, named instances and color palettes
- The TableProvider protocol and an in-memory implementation
- A fontTools-backed provider
"""

from typeface_resolver.tables.fonttools import FontToolsTableProvider
from typeface_resolver.tables.provider import StaticTableProvider, TableProvider
from typeface_resolver.tables.records import (
    NO_NAME_ID,
    AxisRecord,
    DesignCharacteristics,
    InstanceRecord,
    PaletteTable,
    StandardNames,
    tag_to_int,
    tag_to_str,
)

__all__ = [
    "NO_NAME_ID",
    "AxisRecord",
    "InstanceRecord",
    "PaletteTable",
    "DesignCharacteristics",
    "StandardNames",
    "tag_to_int",
    "tag_to_str",
    "TableProvider",
    "StaticTableProvider",
    "FontToolsTableProvider",
]
