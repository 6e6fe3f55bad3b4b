"""Variable font design-space resolution.

Turns the axis and instance records of a variations table into
:class:`VariationAxis` and :class:`NamedStyle` values, and maps a design
coordinate vector back to a style name and to width/weight/slope.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from typeface_resolver.characteristics import TypeSlope, TypeWeight, TypeWidth
from typeface_resolver.exceptions import CoordinateCountError, TableDataError
from typeface_resolver.tables.records import (
    AxisRecord,
    DesignCharacteristics,
    InstanceRecord,
    StandardNames,
)

logger = logging.getLogger(__name__)

NameLookup = Callable[[int], "str | None"]

# Smallest step of a 16.16 fixed-point value.
COORDINATE_EPSILON = 1.0 / 0x10000


@dataclass(frozen=True)
class VariationAxis:
    """A design axis of a variable font."""

    tag: str
    name: str
    flags: int
    default_value: float
    min_value: float
    max_value: float


@dataclass(frozen=True)
class NamedStyle:
    """A named point in the design space of a variable font.

    ``coordinates`` holds one value per axis, in axis order.
    """

    style_name: str
    coordinates: tuple[float, ...]
    postscript_name: str | None = None

    def __post_init__(self) -> None:
        coordinates = tuple(float(c) for c in self.coordinates)
        if not coordinates:
            raise ValueError("The coordinates array is empty")
        object.__setattr__(self, "coordinates", coordinates)


def coordinates_match(first: Sequence[float], second: Sequence[float]) -> bool:
    """Compare two coordinate vectors within one 16.16 fixed-point step."""
    return all(abs(a - b) < COORDINATE_EPSILON for a, b in zip(first, second))


def default_coordinates(axes: Iterable[VariationAxis]) -> tuple[float, ...]:
    return tuple(axis.default_value for axis in axes)


def _lookup(name_lookup: NameLookup, name_id: int) -> str:
    return name_lookup(name_id) or ""


def resolve_variation_defaults(
    axis_records: Sequence[AxisRecord] | None,
    instance_records: Sequence[InstanceRecord] | None,
    name_lookup: NameLookup,
    default_style_name: str | None = None,
) -> tuple[tuple[VariationAxis, ...], tuple[NamedStyle, ...]]:
    """Resolve axes and named styles of a variations table.

    Args:
        axis_records: Axis records in declaration order.
        instance_records: Instance records; coordinates follow axis order.
        name_lookup: Resolves a name id to a string, or ``None``.
        default_style_name: Style name given to a synthesized default instance.

    Returns:
        Tuple of (axes, named styles). Both are empty for a font without axes.
        When no instance sits on the default coordinates, one is synthesized
        and placed first.

    Raises:
        TableDataError: If an instance has a different coordinate count than
            the number of axes.
    """
    if not axis_records:
        return (), ()

    axes = tuple(
        VariationAxis(
            tag=record.tag,
            name=_lookup(name_lookup, record.name_id),
            flags=record.flags,
            default_value=record.default_value,
            min_value=record.min_value,
            max_value=record.max_value,
        )
        for record in axis_records
    )
    defaults = default_coordinates(axes)

    named_styles: list[NamedStyle] = []
    has_default_instance = False

    for record in instance_records or ():
        if len(record.coordinates) != len(axes):
            raise TableDataError(
                f"Named instance has {len(record.coordinates)} coordinates "
                f"but the font declares {len(axes)} axes"
            )

        postscript_name = None
        if record.postscript_name_id is not None and record.postscript_name_id >= 0:
            postscript_name = name_lookup(record.postscript_name_id)

        if not has_default_instance and coordinates_match(record.coordinates, defaults):
            has_default_instance = True

        named_styles.append(
            NamedStyle(
                style_name=_lookup(name_lookup, record.name_id),
                coordinates=record.coordinates,
                postscript_name=postscript_name,
            )
        )

    if not has_default_instance:
        logger.debug("No named instance at default coordinates, synthesizing one")
        named_styles.insert(0, NamedStyle(default_style_name or "", defaults, None))

    logger.debug("Resolved %d axes and %d named styles", len(axes), len(named_styles))
    return axes, tuple(named_styles)


def resolve_style_names(
    coordinates: Sequence[float],
    named_styles: Sequence[NamedStyle],
    family_name: str,
) -> StandardNames:
    """Name the instance at ``coordinates`` after the first matching named style.

    Styles with an empty name never match. Without a match the style name is
    empty and the full name is the family name alone.
    """
    for named_style in named_styles:
        if not named_style.style_name:
            continue
        if coordinates_match(coordinates, named_style.coordinates):
            return StandardNames.generate(family_name, named_style.style_name)

    return StandardNames.generate(family_name, "")


def resolve_design_characteristics(
    coordinates: Sequence[float],
    axes: Sequence[VariationAxis],
    base: DesignCharacteristics | None = None,
) -> DesignCharacteristics:
    """Derive weight, width and slope from a design coordinate vector.

    Only the ``ital``, ``slnt``, ``wdth`` and ``wght`` axes contribute; values
    not driven by an axis come from ``base``. When a tag appears twice the
    later axis wins.

    Raises:
        CoordinateCountError: If the vector length differs from the axis count.
    """
    if len(coordinates) != len(axes):
        raise CoordinateCountError(len(axes), len(coordinates))

    base = base or DesignCharacteristics()
    values = {"weight": base.weight, "width": base.width, "slope": base.slope}

    for axis, value in zip(axes, coordinates):
        update = _AXIS_UPDATES.get(axis.tag)
        if update is not None:
            field_name, convert = update
            values[field_name] = convert(value)

    return DesignCharacteristics(**values)


_AXIS_UPDATES: dict[str, tuple[str, Callable[[float], object]]] = {
    "ital": ("slope", TypeSlope.from_ital),
    "slnt": ("slope", TypeSlope.from_slnt),
    "wdth": ("width", TypeWidth.from_wdth),
    "wght": ("weight", TypeWeight.from_wght),
}
