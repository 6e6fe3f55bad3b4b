"""Resolution of variation and palette tables."""

from typeface_resolver.resolve.palettes import (
    ColorPalette,
    default_palette,
    resolve_palette_defaults,
)
from typeface_resolver.resolve.variations import (
    COORDINATE_EPSILON,
    NamedStyle,
    VariationAxis,
    coordinates_match,
    default_coordinates,
    resolve_design_characteristics,
    resolve_style_names,
    resolve_variation_defaults,
)

__all__ = [
    "COORDINATE_EPSILON",
    "VariationAxis",
    "NamedStyle",
    "coordinates_match",
    "default_coordinates",
    "resolve_variation_defaults",
    "resolve_style_names",
    "resolve_design_characteristics",
    "ColorPalette",
    "default_palette",
    "resolve_palette_defaults",
]
