"""Resolved font descriptors.

A :class:`Typeface` wraps a table provider. Properties shared by every
variation and color derivative of the same root font (axes, named styles,
palette entry names, predefined palettes) are resolved once and referenced by
all derivatives. Each instance owns only its design characteristics, names,
coordinates and colors.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from typeface_resolver.characteristics import TypeSlope, TypeWeight, TypeWidth
from typeface_resolver.exceptions import (
    ColorCountError,
    CoordinateCountError,
    PaletteNotSupportedError,
    VariationNotSupportedError,
)
from typeface_resolver.resolve.palettes import (
    ColorPalette,
    default_palette,
    resolve_palette_defaults,
)
from typeface_resolver.resolve.variations import (
    NamedStyle,
    VariationAxis,
    default_coordinates,
    resolve_design_characteristics,
    resolve_style_names,
    resolve_variation_defaults,
)
from typeface_resolver.tables.provider import TableProvider
from typeface_resolver.tables.records import DesignCharacteristics, StandardNames

if TYPE_CHECKING:
    from fontTools.ttLib import TTFont

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OnceCell(Generic[T]):
    """A value computed by ``factory`` on first access, at most once.

    Concurrent readers block on the lock until the value is published, so
    none of them can observe a partially built result. If the factory raises,
    the cell stays empty and the next reader retries.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._value: T | None = None
        self._ready = False

    @property
    def is_ready(self) -> bool:
        return self._ready

    def get(self) -> T:
        if self._ready:
            return self._value  # type: ignore[return-value]
        with self._lock:
            if not self._ready:
                self._value = self._factory()
                self._ready = True
        return self._value  # type: ignore[return-value]


@dataclass(frozen=True)
class SharedDefaults:
    """Properties shared by a root typeface and all of its derivatives."""

    variation_axes: tuple[VariationAxis, ...] = ()
    named_styles: tuple[NamedStyle, ...] = ()
    palette_entry_names: tuple[str, ...] = ()
    predefined_palettes: tuple[ColorPalette, ...] = ()


@dataclass(frozen=True)
class _InstanceState:
    design: DesignCharacteristics
    names: StandardNames
    coordinates: tuple[float, ...] | None
    colors: tuple[int, ...] | None


def _resolve_defaults(provider: TableProvider) -> SharedDefaults:
    axes, named_styles = resolve_variation_defaults(
        provider.axis_records(),
        provider.instance_records(),
        provider.search_name,
        provider.default_style_name(),
    )
    entry_names, palettes = resolve_palette_defaults(
        provider.palette_table(),
        provider.search_name,
    )
    return SharedDefaults(axes, named_styles, entry_names, palettes)


def _intrinsic_names(provider: TableProvider) -> StandardNames:
    family_name = provider.default_family_name() or ""
    style_name = provider.default_style_name() or ""
    full_name = provider.default_full_name()
    if full_name is None:
        return StandardNames.generate(family_name, style_name)
    return StandardNames(family_name, style_name, full_name)


class Typeface:
    """A font face with resolved design characteristics and names.

    Create a root typeface from a table provider; create derivatives with
    :meth:`variation_instance` and :meth:`color_instance`. Instances are never
    mutated after creation.

    Example:
        >>> typeface = Typeface.from_ttfont(TTFont("Inter.ttf"))
        >>> bold = typeface.variation_instance([700.0])
        >>> bold.weight
        <TypeWeight.BOLD: 6>
    """

    def __init__(self, provider: TableProvider) -> None:
        self._provider = provider
        self._defaults: OnceCell[SharedDefaults] = OnceCell(
            lambda: _resolve_defaults(provider)
        )
        self._state: OnceCell[_InstanceState] = OnceCell(self._resolve_root_state)

    @classmethod
    def from_ttfont(cls, font: TTFont) -> Typeface:
        from typeface_resolver.tables.fonttools import FontToolsTableProvider

        return cls(FontToolsTableProvider(font))

    @classmethod
    def _derive(
        cls, source: Typeface, state_factory: Callable[[], _InstanceState]
    ) -> Typeface:
        typeface = cls.__new__(cls)
        typeface._provider = source._provider
        typeface._defaults = source._defaults
        typeface._state = OnceCell(state_factory)
        return typeface

    # -- resolution -------------------------------------------------------

    def _intrinsic_design(self) -> DesignCharacteristics:
        return self._provider.intrinsic_characteristics() or DesignCharacteristics()

    def _describe(
        self,
        coordinates: tuple[float, ...],
        family_name: str,
    ) -> tuple[DesignCharacteristics, StandardNames]:
        defaults = self._defaults.get()
        design = resolve_design_characteristics(
            coordinates, defaults.variation_axes, self._intrinsic_design()
        )
        names = resolve_style_names(coordinates, defaults.named_styles, family_name)
        return design, names

    def _resolve_root_state(self) -> _InstanceState:
        defaults = self._defaults.get()
        design = self._intrinsic_design()
        names = _intrinsic_names(self._provider)

        coordinates = None
        if defaults.variation_axes:
            coordinates = default_coordinates(defaults.variation_axes)
            design, names = self._describe(coordinates, names.family_name)

        colors = None
        palette = default_palette(defaults.predefined_palettes)
        if palette is not None:
            colors = palette.colors

        logger.debug("Resolved typeface %r (%s)", names.full_name, design)
        return _InstanceState(design, names, coordinates, colors)

    # -- derivatives ------------------------------------------------------

    def variation_instance(self, coordinates: Sequence[float]) -> Typeface:
        """Return a typeface at the given design coordinates.

        Raises:
            VariationNotSupportedError: If this typeface is not variable.
            CoordinateCountError: If the coordinate count differs from the
                number of variation axes.
        """
        axes = self.variation_axes
        if axes is None:
            raise VariationNotSupportedError()
        coordinates = tuple(float(value) for value in coordinates)
        if len(coordinates) != len(axes):
            raise CoordinateCountError(len(axes), len(coordinates))

        source = self._state.get()

        def resolve() -> _InstanceState:
            design, names = derivative._describe(coordinates, source.names.family_name)
            return _InstanceState(design, names, coordinates, source.colors)

        derivative = Typeface._derive(self, resolve)
        return derivative

    def color_instance(self, colors: Sequence[int]) -> Typeface:
        """Return a typeface drawing color glyphs with ``colors``.

        Raises:
            PaletteNotSupportedError: If this typeface has no color palettes.
            ColorCountError: If the color count differs from the number of
                palette entries.
        """
        entry_names = self.palette_entry_names
        if entry_names is None:
            raise PaletteNotSupportedError()
        colors = tuple(int(color) & 0xFFFFFFFF for color in colors)
        if len(colors) != len(entry_names):
            raise ColorCountError(len(entry_names), len(colors))

        source = self._state.get()
        return Typeface._derive(
            self,
            lambda: _InstanceState(source.design, source.names, source.coordinates, colors),
        )

    # -- shared defaults --------------------------------------------------

    def shares_defaults(self, other: Typeface) -> bool:
        """Whether both typefaces derive from the same root font."""
        return self._defaults is other._defaults

    @property
    def is_variable(self) -> bool:
        return self.variation_axes is not None

    @property
    def variation_axes(self) -> tuple[VariationAxis, ...] | None:
        return self._defaults.get().variation_axes or None

    @property
    def named_styles(self) -> tuple[NamedStyle, ...] | None:
        return self._defaults.get().named_styles or None

    @property
    def palette_entry_names(self) -> tuple[str, ...] | None:
        return self._defaults.get().palette_entry_names or None

    @property
    def predefined_palettes(self) -> tuple[ColorPalette, ...] | None:
        return self._defaults.get().predefined_palettes or None

    # -- per instance -----------------------------------------------------

    @property
    def variation_coordinates(self) -> tuple[float, ...] | None:
        return self._state.get().coordinates

    @property
    def associated_colors(self) -> tuple[int, ...] | None:
        return self._state.get().colors

    @property
    def family_name(self) -> str:
        return self._state.get().names.family_name

    @property
    def style_name(self) -> str:
        return self._state.get().names.style_name

    @property
    def full_name(self) -> str:
        return self._state.get().names.full_name

    @property
    def weight(self) -> TypeWeight:
        return self._state.get().design.weight

    @property
    def width(self) -> TypeWidth:
        return self._state.get().design.width

    @property
    def slope(self) -> TypeSlope:
        return self._state.get().design.slope

    def __repr__(self) -> str:
        return (
            f"Typeface(family_name={self.family_name!r}, style_name={self.style_name!r}, "
            f"full_name={self.full_name!r}, weight={self.weight.name}, "
            f"width={self.width.name}, slope={self.slope.name})"
        )
