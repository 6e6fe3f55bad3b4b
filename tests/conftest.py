"""Pytest configuration and shared fixtures for typeface-resolver tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from typeface_resolver.characteristics import TypeSlope, TypeWeight, TypeWidth
from typeface_resolver.tables import (
    AxisRecord,
    DesignCharacteristics,
    InstanceRecord,
    PaletteTable,
    StaticTableProvider,
)
from typeface_resolver.typeface import Typeface

# Name ids used by the in-memory fixtures
WEIGHT_AXIS_NAME_ID = 256
WIDTH_AXIS_NAME_ID = 257
REGULAR_NAME_ID = 258
BOLD_NAME_ID = 259
CONDENSED_BOLD_NAME_ID = 260
BOLD_PS_NAME_ID = 261
PALETTE_LIGHT_NAME_ID = 300
PALETTE_DARK_NAME_ID = 301
ENTRY_BASE_NAME_ID = 302

NAMES = {
    WEIGHT_AXIS_NAME_ID: "Weight",
    WIDTH_AXIS_NAME_ID: "Width",
    REGULAR_NAME_ID: "Regular",
    BOLD_NAME_ID: "Bold",
    CONDENSED_BOLD_NAME_ID: "Condensed Bold",
    BOLD_PS_NAME_ID: "TestSans-Bold",
    PALETTE_LIGHT_NAME_ID: "Light",
    PALETTE_DARK_NAME_ID: "Dark",
    ENTRY_BASE_NAME_ID: "Base",
}

WEIGHT_AXIS = AxisRecord("wght", 100.0, 400.0, 900.0, name_id=WEIGHT_AXIS_NAME_ID)
WIDTH_AXIS = AxisRecord("wdth", 75.0, 100.0, 125.0, name_id=WIDTH_AXIS_NAME_ID)

RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF
WHITE = 0xFFFFFFFF


@pytest.fixture
def variable_provider() -> StaticTableProvider:
    """Provider for a two-axis variable font with three named instances."""
    return StaticTableProvider(
        axes=[WEIGHT_AXIS, WIDTH_AXIS],
        instances=[
            InstanceRecord(REGULAR_NAME_ID, (400.0, 100.0)),
            InstanceRecord(BOLD_NAME_ID, (700.0, 100.0), postscript_name_id=BOLD_PS_NAME_ID),
            InstanceRecord(CONDENSED_BOLD_NAME_ID, (700.0, 75.0)),
        ],
        names=NAMES,
        family_name="Test Sans",
        style_name="Regular",
    )


@pytest.fixture
def color_provider() -> StaticTableProvider:
    """Provider for a static color font with two palettes of two entries."""
    return StaticTableProvider(
        palettes=PaletteTable(
            entry_count=2,
            palette_count=2,
            colors=[RED, GREEN, BLUE, WHITE],
            types=[1, 2],
            palette_name_ids=[PALETTE_LIGHT_NAME_ID, PALETTE_DARK_NAME_ID],
            entry_name_ids=[ENTRY_BASE_NAME_ID, 0xFFFF],
        ),
        names=NAMES,
        family_name="Test Emoji",
        style_name="Regular",
        full_name="Test Emoji Regular",
    )


@pytest.fixture
def static_provider() -> StaticTableProvider:
    """Provider for a plain bold italic font without variation or palettes."""
    return StaticTableProvider(
        family_name="Test Serif",
        style_name="Bold Italic",
        characteristics=DesignCharacteristics(
            weight=TypeWeight.BOLD, width=TypeWidth.NORMAL, slope=TypeSlope.ITALIC
        ),
    )


@pytest.fixture
def make_typeface() -> Callable[..., Typeface]:
    """Build a static typeface with the given characteristics and name."""

    def factory(
        name: str,
        width: TypeWidth = TypeWidth.NORMAL,
        weight: TypeWeight = TypeWeight.REGULAR,
        slope: TypeSlope = TypeSlope.PLAIN,
    ) -> Typeface:
        return Typeface(
            StaticTableProvider(
                family_name="Family",
                style_name=name,
                characteristics=DesignCharacteristics(weight=weight, width=width, slope=slope),
            )
        )

    return factory


def build_test_font(
    family: str = "Test Sans",
    style: str = "Regular",
    axes: Sequence[tuple] | None = None,
    instances: Sequence[dict] | None = None,
    palettes: Sequence[Sequence[tuple[float, float, float, float]]] | None = None,
    weight_class: int = 400,
    width_class: int = 5,
    fs_selection: int = 0x40,
):
    """Build a minimal in-memory TrueType font with fontTools' FontBuilder."""
    from fontTools.fontBuilder import FontBuilder
    from fontTools.pens.ttGlyphPen import TTGlyphPen

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "A"])
    fb.setupCharacterMap({0x41: "A"})
    empty = TTGlyphPen(None).glyph()
    fb.setupGlyf({".notdef": empty, "A": empty})
    fb.setupHorizontalMetrics({".notdef": (500, 0), "A": (600, 0)})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable(
        {
            "familyName": family,
            "styleName": style,
            "fullName": f"{family} {style}",
            "psName": f"{family}-{style}".replace(" ", ""),
        }
    )
    fb.setupOS2(usWeightClass=weight_class, usWidthClass=width_class, fsSelection=fs_selection)
    fb.setupPost()
    if axes:
        fb.setupFvar(list(axes), list(instances or []))
    if palettes:
        fb.setupCPAL([list(palette) for palette in palettes])
    return fb.font


@pytest.fixture
def variable_ttfont():
    """In-memory variable font with wght/wdth axes and a two-entry color palette."""
    return build_test_font(
        axes=[
            ("wght", 100, 400, 900, "Weight"),
            ("wdth", 75, 100, 125, "Width"),
        ],
        instances=[
            {"location": {"wght": 400, "wdth": 100}, "stylename": "Regular"},
            {
                "location": {"wght": 700, "wdth": 100},
                "stylename": "Bold",
                "postscriptfontname": "TestSans-Bold",
            },
            {"location": {"wght": 700, "wdth": 75}, "stylename": "Condensed Bold"},
        ],
        palettes=[
            [(1.0, 0.0, 0.0, 1.0), (0.0, 0.0, 1.0, 1.0)],
            [(0.0, 1.0, 0.0, 1.0), (1.0, 1.0, 1.0, 1.0)],
        ],
    )


@pytest.fixture
def font_files(tmp_path: Path) -> dict[str, Path]:
    """Write a small static family plus a variable font to disk."""
    fonts = {
        "regular": build_test_font(style="Regular", weight_class=400, fs_selection=0x40),
        "bold": build_test_font(style="Bold", weight_class=700, fs_selection=0x20),
        "italic": build_test_font(style="Italic", weight_class=400, fs_selection=0x01),
        "variable": build_test_font(
            family="Test Flex",
            axes=[("wght", 100, 400, 900, "Weight")],
            instances=[
                {"location": {"wght": 300}, "stylename": "Light"},
                {"location": {"wght": 400}, "stylename": "Regular"},
                {"location": {"wght": 800}, "stylename": "ExtraBold"},
            ],
        ),
    }
    paths = {}
    for key, font in fonts.items():
        path = tmp_path / f"{key}.ttf"
        font.save(str(path))
        paths[key] = path
    return paths


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests that build and save font binaries"
    )
