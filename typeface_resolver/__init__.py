"""typeface-resolver: resolve font descriptors from raw font tables.

This library provides:
- Variable font design-space resolution (axes, named styles, default instance)
- Mapping of design coordinates to width, weight and slope
- Color palette resolution
- CSS-style best-match selection within a type family

Example:
    >>> from fontTools.ttLib import TTFont
    >>> from typeface_resolver import Typeface, TypeFamily, TypeWeight
    >>> regular = Typeface.from_ttfont(TTFont("Inter.ttf"))
    >>> family = TypeFamily(regular.family_name, (regular,))
"""

from typeface_resolver.characteristics import TypeSlope, TypeWeight, TypeWidth
from typeface_resolver.config import Config
from typeface_resolver.exceptions import (
    ColorCountError,
    ConfigError,
    CoordinateCountError,
    EmptyFamilyError,
    PaletteNotSupportedError,
    TableDataError,
    TypefaceError,
    VariationNotSupportedError,
)
from typeface_resolver.family import TypeFamily, select_best_match
from typeface_resolver.resolve import (
    ColorPalette,
    NamedStyle,
    VariationAxis,
    resolve_design_characteristics,
    resolve_palette_defaults,
    resolve_style_names,
    resolve_variation_defaults,
)
from typeface_resolver.tables import (
    AxisRecord,
    DesignCharacteristics,
    FontToolsTableProvider,
    InstanceRecord,
    PaletteTable,
    StandardNames,
    StaticTableProvider,
    TableProvider,
)
from typeface_resolver.typeface import SharedDefaults, Typeface

__version__ = "0.1.0"

__all__ = [
    # Descriptors
    "Typeface",
    "TypeFamily",
    "SharedDefaults",
    "select_best_match",
    # Characteristics
    "TypeWidth",
    "TypeWeight",
    "TypeSlope",
    "DesignCharacteristics",
    "StandardNames",
    # Resolution
    "VariationAxis",
    "NamedStyle",
    "ColorPalette",
    "resolve_variation_defaults",
    "resolve_design_characteristics",
    "resolve_style_names",
    "resolve_palette_defaults",
    # Tables
    "AxisRecord",
    "InstanceRecord",
    "PaletteTable",
    "TableProvider",
    "StaticTableProvider",
    "FontToolsTableProvider",
    # Config
    "Config",
    # Exceptions
    "TypefaceError",
    "VariationNotSupportedError",
    "PaletteNotSupportedError",
    "CoordinateCountError",
    "ColorCountError",
    "EmptyFamilyError",
    "TableDataError",
    "ConfigError",
    # Metadata
    "__version__",
]
