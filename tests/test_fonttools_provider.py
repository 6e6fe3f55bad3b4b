"""Tests for the fontTools-backed table provider.

Fonts are built in memory with fontTools' FontBuilder so the tests do not
depend on any system font.
"""

import pytest

from conftest import BLUE, GREEN, RED, WHITE, build_test_font
from typeface_resolver.characteristics import TypeSlope, TypeWeight, TypeWidth
from typeface_resolver.tables import FontToolsTableProvider, TableProvider
from typeface_resolver.typeface import Typeface


class TestVariableFontTables:
    """fvar, CPAL and name tables of a variable color font."""

    def test_satisfies_protocol(self, variable_ttfont) -> None:
        assert isinstance(FontToolsTableProvider(variable_ttfont), TableProvider)

    def test_axis_records(self, variable_ttfont) -> None:
        provider = FontToolsTableProvider(variable_ttfont)
        axes = provider.axis_records()
        assert [axis.tag for axis in axes] == ["wght", "wdth"]
        assert (axes[0].min_value, axes[0].default_value, axes[0].max_value) == (100, 400, 900)
        assert provider.search_name(axes[0].name_id) == "Weight"
        assert provider.search_name(axes[1].name_id) == "Width"

    def test_instance_records_follow_axis_order(self, variable_ttfont) -> None:
        provider = FontToolsTableProvider(variable_ttfont)
        instances = provider.instance_records()
        assert [instance.coordinates for instance in instances] == [
            (400.0, 100.0),
            (700.0, 100.0),
            (700.0, 75.0),
        ]
        assert provider.search_name(instances[1].name_id) == "Bold"

    def test_postscript_name_ids(self, variable_ttfont) -> None:
        """Only instances that declare a PostScript name carry its id."""
        provider = FontToolsTableProvider(variable_ttfont)
        instances = provider.instance_records()
        assert instances[0].postscript_name_id is None
        assert provider.search_name(instances[1].postscript_name_id) == "TestSans-Bold"

    def test_palette_table_is_flattened_to_argb(self, variable_ttfont) -> None:
        table = FontToolsTableProvider(variable_ttfont).palette_table()
        assert table.entry_count == 2
        assert table.palette_count == 2
        assert list(table.colors) == [RED, BLUE, GREEN, WHITE]
        assert table.first_color_index(1) == 2

    def test_version_zero_palette_has_no_labels(self, variable_ttfont) -> None:
        table = FontToolsTableProvider(variable_ttfont).palette_table()
        assert table.types is None
        assert table.palette_name_ids is None
        assert table.entry_name_ids is None

    def test_default_names(self, variable_ttfont) -> None:
        provider = FontToolsTableProvider(variable_ttfont)
        assert provider.default_family_name() == "Test Sans"
        assert provider.default_style_name() == "Regular"
        assert provider.default_full_name() == "Test Sans Regular"

    def test_missing_name_id(self, variable_ttfont) -> None:
        assert FontToolsTableProvider(variable_ttfont).search_name(9999) is None


class TestStaticFontTables:
    """Fonts without fvar or CPAL."""

    def test_absent_tables_are_none(self) -> None:
        provider = FontToolsTableProvider(build_test_font())
        assert provider.axis_records() is None
        assert provider.instance_records() is None
        assert provider.palette_table() is None

    @pytest.mark.parametrize(
        ("weight_class", "width_class", "fs_selection", "expected"),
        [
            (400, 5, 0x40, (TypeWeight.REGULAR, TypeWidth.NORMAL, TypeSlope.PLAIN)),
            (700, 3, 0x20, (TypeWeight.BOLD, TypeWidth.CONDENSED, TypeSlope.PLAIN)),
            (300, 7, 0x01, (TypeWeight.LIGHT, TypeWidth.EXPANDED, TypeSlope.ITALIC)),
            (900, 5, 0x201, (TypeWeight.HEAVY, TypeWidth.NORMAL, TypeSlope.OBLIQUE)),
        ],
    )
    def test_intrinsic_characteristics_from_os2(
        self, weight_class, width_class, fs_selection, expected
    ) -> None:
        """usWeightClass, usWidthClass and fsSelection drive the defaults."""
        font = build_test_font(
            weight_class=weight_class, width_class=width_class, fs_selection=fs_selection
        )
        design = FontToolsTableProvider(font).intrinsic_characteristics()
        assert (design.weight, design.width, design.slope) == expected


class TestTypefaceFromFont:
    """End to end resolution through fontTools."""

    def test_variable_color_font(self, variable_ttfont) -> None:
        typeface = Typeface.from_ttfont(variable_ttfont)
        assert typeface.is_variable
        assert [axis.name for axis in typeface.variation_axes] == ["Weight", "Width"]
        assert typeface.named_styles[1].postscript_name == "TestSans-Bold"
        assert typeface.associated_colors == (RED, BLUE)
        assert typeface.full_name == "Test Sans Regular"

        condensed = typeface.variation_instance([700, 75])
        assert condensed.style_name == "Condensed Bold"
        assert condensed.width is TypeWidth.CONDENSED
        assert condensed.associated_colors == (RED, BLUE)

    @pytest.mark.slow
    def test_from_path(self, font_files) -> None:
        """Fonts saved to disk are opened lazily by path."""
        provider = FontToolsTableProvider.from_path(font_files["variable"])
        typeface = Typeface(provider)
        assert typeface.family_name == "Test Flex"
        assert [style.style_name for style in typeface.named_styles] == [
            "Light",
            "Regular",
            "ExtraBold",
        ]
        assert typeface.style_name == "Regular"

    @pytest.mark.slow
    def test_static_file_characteristics(self, font_files) -> None:
        typeface = Typeface(FontToolsTableProvider.from_path(font_files["italic"]))
        assert typeface.slope is TypeSlope.ITALIC
        assert typeface.weight is TypeWeight.REGULAR
        assert typeface.full_name == "Test Sans Italic"
