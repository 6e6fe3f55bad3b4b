"""Exception hierarchy for typeface-resolver.

All errors raised by the library derive from :class:`TypefaceError`.
Contract violations additionally derive from :class:`ValueError` so callers
that only care about bad arguments can catch them generically.
"""

from __future__ import annotations


class TypefaceError(Exception):
    """Base exception for typeface-resolver errors."""


class VariationNotSupportedError(TypefaceError):
    """Raised when a variation instance is requested from a non-variable face."""

    def __init__(self, message: str = "This typeface does not support variations") -> None:
        super().__init__(message)


class PaletteNotSupportedError(TypefaceError):
    """Raised when a color instance is requested from a face without palettes."""

    def __init__(self, message: str = "This typeface does not support color palettes") -> None:
        super().__init__(message)


class CoordinateCountError(TypefaceError, ValueError):
    """Raised when a coordinate vector does not match the axis count."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"The number of coordinates ({actual}) does not match "
            f"the number of variation axes ({expected})"
        )


class ColorCountError(TypefaceError, ValueError):
    """Raised when a color list does not match the palette entry count."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Palette should have exactly {expected} colors, got {actual}")


class EmptyFamilyError(TypefaceError, ValueError):
    """Raised when a type family is built or matched without any typeface."""

    def __init__(self, message: str = "Typefaces list cannot be empty") -> None:
        super().__init__(message)


class TableDataError(TypefaceError):
    """Raised when a table provider returns inconsistent records."""


class ConfigError(TypefaceError):
    """Raised when the configuration file is missing or invalid."""
