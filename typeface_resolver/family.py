"""Type families and CSS-style face matching.

Matching follows the font style matching rules of CSS Fonts Level 3: width is
compared first, then slope, then weight. Each comparison uses a fixed gap
table instead of a numeric distance because the preference orders are not
linear.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from typeface_resolver.characteristics import TypeSlope, TypeWeight, TypeWidth
from typeface_resolver.exceptions import EmptyFamilyError
from typeface_resolver.typeface import Typeface

logger = logging.getLogger(__name__)

# Rows are the desired slope, columns the candidate slope.
SLOPE_GAPS: tuple[tuple[int, ...], ...] = (
    # "If the value is normal, normal faces are checked first, then oblique
    # faces, then italic faces."
    (0, 2, 1),  # PLAIN
    # "If the value is italic, italic faces are checked first, then oblique,
    # then normal faces."
    (2, 0, 1),  # ITALIC
    # "If the value is oblique, oblique faces are checked first, then italic
    # faces and then normal faces."
    (2, 1, 0),  # OBLIQUE
)

# Rows are the desired weight, columns the candidate weight (100..900).
WEIGHT_GAPS: tuple[tuple[int, ...], ...] = (
    # "If the desired weight is less than 400, weights below the desired weight
    # are checked in descending order followed by weights above the desired
    # weight in ascending order until a match is found."
    (0, 1, 2, 3, 4, 5, 6, 7, 8),  # 100
    (1, 0, 2, 3, 4, 5, 6, 7, 8),  # 200
    (2, 1, 0, 3, 4, 5, 6, 7, 8),  # 300
    # "If the desired weight is 400, 500 is checked first and then the rule for
    # desired weights less than 400 is used."
    (4, 3, 2, 0, 1, 5, 6, 7, 8),  # 400
    # "If the desired weight is 500, 400 is checked first and then the rule for
    # desired weights less than 400 is used."
    (4, 3, 2, 1, 0, 5, 6, 7, 8),  # 500
    # "If the desired weight is greater than 500, weights above the desired
    # weight are checked in ascending order followed by weights below the
    # desired weight in descending order until a match is found."
    (8, 7, 6, 5, 4, 0, 1, 2, 3),  # 600
    (8, 7, 6, 5, 4, 3, 0, 1, 2),  # 700
    (8, 7, 6, 5, 4, 3, 2, 0, 1),  # 800
    (8, 7, 6, 5, 4, 3, 2, 1, 0),  # 900
)


def width_gap(desired: TypeWidth, candidate: TypeWidth) -> int:
    return abs(desired.rank - candidate.rank)


def slope_gap(desired: TypeSlope, candidate: TypeSlope) -> int:
    return SLOPE_GAPS[desired.rank][candidate.rank]


def weight_gap(desired: TypeWeight, candidate: TypeWeight) -> int:
    return WEIGHT_GAPS[desired.rank][candidate.rank]


@dataclass(frozen=True)
class TypeFamily:
    """A named, non-empty collection of related typefaces."""

    family_name: str
    typefaces: tuple[Typeface, ...]

    def __post_init__(self) -> None:
        typefaces = tuple(self.typefaces)
        if not typefaces:
            raise EmptyFamilyError()
        object.__setattr__(self, "typefaces", typefaces)

    def __len__(self) -> int:
        return len(self.typefaces)

    def __iter__(self) -> Iterator[Typeface]:
        return iter(self.typefaces)

    def typeface_by_style(
        self, width: TypeWidth, weight: TypeWeight, slope: TypeSlope
    ) -> Typeface:
        """Return the typeface best matching the given style."""
        return select_best_match(self, width, weight, slope)


def select_best_match(
    family: TypeFamily | Sequence[Typeface],
    width: TypeWidth,
    weight: TypeWeight,
    slope: TypeSlope,
) -> Typeface:
    """Select the member of ``family`` that best matches a style.

    Members are scanned left to right and compared with the best so far on
    width, then slope, then weight. A candidate with a worse gap on any of
    the three is rejected, even after a better gap on an earlier one. It
    replaces the best only when at least one gap is better, so equal
    candidates keep the earliest member.

    Raises:
        EmptyFamilyError: If ``family`` has no member.
    """
    typefaces = family.typefaces if isinstance(family, TypeFamily) else tuple(family)
    if not typefaces:
        raise EmptyFamilyError()

    best = typefaces[0]
    for current in typefaces[1:]:
        width_delta = width_gap(width, current.width) - width_gap(width, best.width)
        if width_delta > 0:
            continue

        slope_delta = slope_gap(slope, current.slope) - slope_gap(slope, best.slope)
        if slope_delta > 0:
            continue

        weight_delta = weight_gap(weight, current.weight) - weight_gap(weight, best.weight)
        if weight_delta > 0:
            continue

        if width_delta < 0 or slope_delta < 0 or weight_delta < 0:
            best = current

    logger.debug(
        "Matched %s/%s/%s to %r", width.name, weight.name, slope.name, best.full_name
    )
    return best
