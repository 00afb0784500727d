"""Tests for asset catalog Contents.json builders."""

import json

from xcode_color_sets.core.color_sets import (
    color_components,
    create_catalog_root_file,
    create_namespace_folder,
    create_per_token_file,
    join_path,
)
from xcode_color_sets.core.models import ColorValue, Token, TokenType
from xcode_color_sets.core.naming import StringCase, TokenNameTracker

from conftest import BLUE, RED


def _color_token(token_id: str = "t1", value=RED) -> Token:
    return Token(
        id=token_id,
        name="Primary",
        token_type=TokenType.COLOR,
        value=value,
        parent_group_id="g-brand",
    )


class TestJoinPath:
    def test_skips_empty_segments(self) -> None:
        assert join_path("", "Brand", None) == "Brand"

    def test_normalises_slashes(self) -> None:
        assert join_path("./Assets/Colors.xcassets/", "/Brand") == "Assets/Colors.xcassets/Brand"

    def test_all_empty(self) -> None:
        assert join_path("", None) == ""


class TestMarkerFiles:
    def test_namespace_folder(self) -> None:
        file = create_namespace_folder("Brand", "Colors.xcassets")

        assert file.relative_path == "Colors.xcassets/Brand"
        assert file.file_name == "Contents.json"
        assert json.loads(file.content) == {
            "info": {"version": 1, "author": "xcode"},
            "properties": {"provides-namespace": True},
        }

    def test_namespace_folder_without_root(self) -> None:
        assert create_namespace_folder("Brand", "").path == "Brand/Contents.json"

    def test_catalog_root(self) -> None:
        file = create_catalog_root_file("Colors.xcassets")

        assert file.path == "Colors.xcassets/Contents.json"
        assert json.loads(file.content) == {"info": {"version": 1, "author": "xcode"}}

    def test_content_is_stable(self) -> None:
        first = create_namespace_folder("Brand", "Colors.xcassets").content
        second = create_namespace_folder("Brand", "Colors.xcassets").content

        assert first == second
        assert first.endswith("}\n")


class TestColorComponents:
    def test_hex_components_and_alpha(self) -> None:
        assert color_components(ColorValue(255, 16, 0, 0.5)) == {
            "red": "0xFF",
            "green": "0x10",
            "blue": "0x00",
            "alpha": "0.500",
        }


class TestCreatePerTokenFile:
    """Test cases for create_per_token_file."""

    def test_base_only(self, token_groups) -> None:
        file = create_per_token_file(
            _color_token(), token_groups, "Colors.xcassets/Brand", [], TokenNameTracker()
        )

        assert file.path == "Colors.xcassets/Brand/brand-primary.colorset/Contents.json"
        document = json.loads(file.content)
        assert document["info"] == {"version": 1, "author": "xcode"}
        assert document["colors"] == [
            {
                "idiom": "universal",
                "color": {
                    "color-space": "srgb",
                    "components": {
                        "red": "0xFF",
                        "green": "0x00",
                        "blue": "0x00",
                        "alpha": "1.000",
                    },
                },
            }
        ]

    def test_dark_variant_entry(self, token_groups) -> None:
        dark = _color_token(value=BLUE)

        file = create_per_token_file(
            _color_token(), token_groups, "Brand", [dark], TokenNameTracker()
        )

        colors = json.loads(file.content)["colors"]
        assert len(colors) == 2
        assert "appearances" not in colors[0]
        assert colors[1]["appearances"] == [{"appearance": "luminosity", "value": "dark"}]
        assert colors[1]["color"]["components"]["blue"] == "0xFF"

    def test_name_style(self, token_groups) -> None:
        file = create_per_token_file(
            _color_token(), token_groups, "", [], TokenNameTracker(), StringCase.CAMEL
        )

        assert file.relative_path == "brandPrimary.colorset"

    def test_token_without_value(self, token_groups) -> None:
        token = _color_token(value=None)

        assert create_per_token_file(token, token_groups, "", [], TokenNameTracker()) is None
