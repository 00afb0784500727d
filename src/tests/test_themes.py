"""Tests for light/dark theme grouping."""

import pytest

from xcode_color_sets.core.themes import (
    ThemeVariant,
    derive_base_theme_name,
    get_theme_variant,
    group_themes,
)
from xcode_color_sets.export_log import ExportLog

from conftest import make_theme


class TestGetThemeVariant:
    """Test cases for theme name classification."""

    @pytest.mark.parametrize(
        "name",
        ["Brand Light", "brand light", "  Brand LIGHT  ", "light", "Brand-Light"],
    )
    def test_light_names(self, name: str) -> None:
        assert get_theme_variant(name) == ThemeVariant.LIGHT

    @pytest.mark.parametrize("name", ["Brand Dark", "BRAND DARK ", "Ocean dark"])
    def test_dark_names(self, name: str) -> None:
        assert get_theme_variant(name) == ThemeVariant.DARK

    @pytest.mark.parametrize(
        "name", ["Brand", "Brand Lightness", "Darkroom", "Light Brand", ""]
    )
    def test_names_without_suffix(self, name: str) -> None:
        assert get_theme_variant(name) is None


class TestDeriveBaseThemeName:
    def test_first_word(self) -> None:
        assert derive_base_theme_name("Brand Light") == "Brand"
        assert derive_base_theme_name("  Ocean   Blue Dark ") == "Ocean"

    def test_empty(self) -> None:
        assert derive_base_theme_name("   ") == ""


class TestGroupThemes:
    """Test cases for group_themes."""

    def test_empty_input(self) -> None:
        assert group_themes([]) == []

    def test_light_and_dark_pair(self) -> None:
        light = make_theme("Brand Light")
        dark = make_theme("Brand Dark")

        groups = group_themes([light, dark])

        assert len(groups) == 1
        assert groups[0].name == "Brand"
        assert groups[0].light_theme is light
        assert groups[0].dark_theme is dark

    def test_theme_without_suffix_is_skipped(self) -> None:
        log = ExportLog()

        assert group_themes([make_theme("Brand")], log) == []
        assert log.lines == [
            "Skipping theme 'Brand' because no light/dark suffix was detected."
        ]

    def test_duplicate_variant_last_wins(self) -> None:
        first = make_theme("A Light", "first")
        second = make_theme("A Light", "second")
        log = ExportLog()

        groups = group_themes([first, second], log)

        assert len(groups) == 1
        assert groups[0].light_theme is second
        assert groups[0].dark_theme is None
        assert "Duplicate light theme found for base 'A'" in log.content

    def test_dark_only_group_is_kept(self) -> None:
        dark = make_theme("Night Dark")

        groups = group_themes([dark])

        assert len(groups) == 1
        assert groups[0].light_theme is None
        assert groups[0].dark_theme is dark

    def test_order_follows_first_seen_base(self) -> None:
        themes = [
            make_theme("Ocean Dark"),
            make_theme("Brand Light"),
            make_theme("Ocean Light"),
            make_theme("Brand Dark"),
        ]

        groups = group_themes(themes)

        assert [g.name for g in groups] == ["Ocean", "Brand"]
        assert groups[0].light_theme is themes[2]
        assert groups[0].dark_theme is themes[0]

    def test_multi_word_base_uses_first_word(self) -> None:
        groups = group_themes([make_theme("Brand Blue Light"), make_theme("Brand Red Dark")])

        assert [g.name for g in groups] == ["Brand"]

    def test_without_log_does_not_fail(self) -> None:
        groups = group_themes([make_theme("Plain"), make_theme("X Dark")])

        assert [g.name for g in groups] == ["X"]
