"""Typographic design characteristics: width, weight and slope.

Each enum is totally ordered by ``rank`` (its declaration index), which the
style matcher uses for gap computation. The ``from_*`` constructors map
continuous design-space values onto the discrete buckets.
"""

from __future__ import annotations

from enum import Enum


def _normalize_name(text: str) -> str:
    return text.strip().upper().replace("-", "_").replace(" ", "_")


class TypeWidth(Enum):
    """Typographic width, ordered from narrowest to widest."""

    ULTRA_CONDENSED = 0
    EXTRA_CONDENSED = 1
    CONDENSED = 2
    SEMI_CONDENSED = 3
    NORMAL = 4
    SEMI_EXPANDED = 5
    EXPANDED = 6
    EXTRA_EXPANDED = 7
    ULTRA_EXPANDED = 8

    @property
    def rank(self) -> int:
        return self.value

    @classmethod
    def from_wdth(cls, value: float) -> TypeWidth:
        """Map a ``wdth`` axis value (percent of normal width) to a width class."""
        # Midpoints between the OS/2 width class percentages.
        if value < 56.25:
            return cls.ULTRA_CONDENSED
        if value < 68.75:
            return cls.EXTRA_CONDENSED
        if value < 81.25:
            return cls.CONDENSED
        if value < 93.75:
            return cls.SEMI_CONDENSED
        if value < 106.25:
            return cls.NORMAL
        if value < 118.75:
            return cls.SEMI_EXPANDED
        if value < 137.5:
            return cls.EXPANDED
        if value < 175.0:
            return cls.EXTRA_EXPANDED
        return cls.ULTRA_EXPANDED

    @classmethod
    def from_width_class(cls, width_class: int) -> TypeWidth:
        """Map an OS/2 ``usWidthClass`` (1..9) to a width, clamping out-of-range values."""
        rank = min(max(int(width_class) - 1, 0), len(cls) - 1)
        return cls(rank)

    @classmethod
    def parse(cls, text: str) -> TypeWidth:
        """Parse a member name such as ``"semi-condensed"``."""
        try:
            return cls[_normalize_name(text)]
        except KeyError:
            raise ValueError(f"Unknown type width: {text!r}") from None


class TypeWeight(Enum):
    """Typographic weight, one member per CSS weight bucket 100..900."""

    THIN = 0
    EXTRA_LIGHT = 1
    LIGHT = 2
    REGULAR = 3
    MEDIUM = 4
    SEMI_BOLD = 5
    BOLD = 6
    EXTRA_BOLD = 7
    HEAVY = 8

    @property
    def rank(self) -> int:
        return self.value

    @property
    def css_value(self) -> int:
        return (self.value + 1) * 100

    @classmethod
    def from_wght(cls, value: float) -> TypeWeight:
        """Map a ``wght`` axis value to the nearest weight bucket."""
        if value < 150:
            return cls.THIN
        if value < 250:
            return cls.EXTRA_LIGHT
        if value < 350:
            return cls.LIGHT
        if value < 450:
            return cls.REGULAR
        if value < 550:
            return cls.MEDIUM
        if value < 650:
            return cls.SEMI_BOLD
        if value < 750:
            return cls.BOLD
        if value < 850:
            return cls.EXTRA_BOLD
        return cls.HEAVY

    @classmethod
    def from_weight_class(cls, weight_class: int) -> TypeWeight:
        """Map an OS/2 ``usWeightClass`` to a weight bucket."""
        return cls.from_wght(float(weight_class))

    @classmethod
    def parse(cls, text: str | int) -> TypeWeight:
        """Parse a member name, a CSS keyword or a CSS numeric weight."""
        if isinstance(text, int):
            return cls.from_wght(text)
        key = text.strip().lower()
        if key == "normal":
            return cls.REGULAR
        if key == "bold":
            return cls.BOLD
        if key.isdigit():
            return cls.from_wght(int(key))
        try:
            return cls[_normalize_name(key)]
        except KeyError:
            raise ValueError(f"Unknown type weight: {text!r}") from None


class TypeSlope(Enum):
    """Typographic slope."""

    PLAIN = 0
    ITALIC = 1
    OBLIQUE = 2

    @property
    def rank(self) -> int:
        return self.value

    @classmethod
    def from_ital(cls, value: float) -> TypeSlope:
        """Map an ``ital`` axis value; 1 and above is italic."""
        return cls.ITALIC if value >= 1.0 else cls.PLAIN

    @classmethod
    def from_slnt(cls, value: float) -> TypeSlope:
        """Map a ``slnt`` axis angle; any non-zero angle is oblique."""
        return cls.OBLIQUE if value != 0.0 else cls.PLAIN

    @classmethod
    def from_style_flags(cls, italic: bool, oblique: bool) -> TypeSlope:
        """Map OS/2 ``fsSelection`` italic/oblique bits."""
        if oblique:
            return cls.OBLIQUE
        if italic:
            return cls.ITALIC
        return cls.PLAIN

    @classmethod
    def parse(cls, text: str) -> TypeSlope:
        key = _normalize_name(text)
        if key == "NORMAL":
            return cls.PLAIN
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown type slope: {text!r}") from None
