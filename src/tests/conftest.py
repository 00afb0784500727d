"""Shared pytest fixtures for Xcode Color Sets tests."""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from xcode_color_sets.core.models import (
    ColorValue,
    ExportContext,
    Token,
    TokenCollection,
    TokenGroup,
    TokenTheme,
    TokenType,
)
from xcode_color_sets.data.snapshot import DesignSystemSnapshot, JsonSnapshotSource

RED = ColorValue(255, 0, 0)
GREEN = ColorValue(0, 255, 0)
BLUE = ColorValue(0, 0, 255)
WHITE = ColorValue(255, 255, 255)
BLACK = ColorValue(0, 0, 0)


def make_theme(name: str, theme_id: str = "", **overrides: ColorValue) -> TokenTheme:
    """Build a theme whose id defaults to its lower-cased, hyphenated name."""
    return TokenTheme(
        id=theme_id or name.lower().replace(" ", "-"),
        name=name,
        overrides=dict(overrides),
    )


@pytest.fixture
def token_groups():
    """
    Return a root group containing a "Brand" group and a "Text" group.
    """
    return [
        TokenGroup(id="root", name="Colors", is_root=True),
        TokenGroup(id="g-brand", name="Brand", parent_group_id="root"),
        TokenGroup(id="g-text", name="Text", parent_group_id="root"),
    ]


@pytest.fixture
def token_collections():
    """
    Return two collections: "Core" and "Legacy Palette".
    """
    return [
        TokenCollection(persistent_id="c-core", name="Core"),
        TokenCollection(persistent_id="c-legacy", name="Legacy Palette"),
    ]


@pytest.fixture
def tokens():
    """
    Return three color tokens and one dimension token.

    ``t-legacy`` belongs to the "Legacy Palette" collection; ``t-orphan`` has
    no collection at all.
    """
    return [
        Token(
            id="t-primary",
            name="Primary",
            token_type=TokenType.COLOR,
            value=RED,
            parent_group_id="g-brand",
            collection_id="c-core",
        ),
        Token(
            id="t-legacy",
            name="Old Accent",
            token_type=TokenType.COLOR,
            value=BLUE,
            parent_group_id="g-brand",
            collection_id="c-legacy",
        ),
        Token(
            id="t-orphan",
            name="Body",
            token_type=TokenType.COLOR,
            value=BLACK,
            parent_group_id="g-text",
        ),
        Token(
            id="t-spacing",
            name="Spacing",
            token_type=TokenType.DIMENSION,
            collection_id="c-core",
        ),
    ]


@pytest.fixture
def themes():
    """
    Return a "Brand Light"/"Brand Dark" pair plus a theme without a variant suffix.
    """
    return [
        make_theme("Brand Light", "th-light", **{"t-primary": GREEN}),
        make_theme("Brand Dark", "th-dark", **{"t-primary": WHITE, "t-orphan": WHITE}),
        make_theme("High Contrast", "th-contrast"),
    ]


@pytest.fixture
def snapshot(tokens, token_groups, token_collections, themes):
    return DesignSystemSnapshot(
        design_system_id="ds-1",
        version_id="v-1",
        tokens=tokens,
        token_groups=token_groups,
        token_collections=token_collections,
        themes=themes,
    )


@pytest.fixture
def source(snapshot):
    return JsonSnapshotSource(snapshot)


@pytest.fixture
def context():
    return ExportContext(design_system_id="ds-1", version_id="v-1")


@pytest.fixture
def sample_snapshot_data() -> Dict[str, Any]:
    """
    Return a snapshot document as stored on disk, with one malformed token.
    """
    return {
        "designSystemId": "ds-1",
        "versionId": "v-1",
        "tokens": [
            {
                "id": "t-primary",
                "name": "Primary",
                "tokenType": "Color",
                "value": "#FF0000",
                "parentGroupId": "g-brand",
                "collectionId": "c-core",
                "brandId": "b-1",
            },
            {
                "id": "t-muted",
                "name": "Muted",
                "tokenType": "color",
                "value": {"r": 10, "g": 20, "b": 30, "a": 0.5},
                "parentGroupId": "g-brand",
                "brandId": "b-2",
            },
            {"id": "t-broken", "name": "Broken", "tokenType": "Color", "value": "#XYZ"},
            {"id": "t-radius", "name": "Radius", "tokenType": "Dimension", "value": 4},
        ],
        "tokenGroups": [
            {"id": "root", "name": "Colors", "isRoot": True},
            {"id": "g-brand", "name": "Brand", "parentGroupId": "root"},
        ],
        "tokenCollections": [{"persistentId": "c-core", "name": "Core"}],
        "themes": [
            {
                "id": "th-light",
                "idInVersion": "th-light-v",
                "name": "Brand Light",
                "overrides": {"t-primary": "#00FF00"},
            },
            {
                "id": "th-dark",
                "idInVersion": "th-dark-v",
                "name": "Brand Dark",
                "overrides": {"t-primary": "#FFFFFF"},
            },
        ],
    }


@pytest.fixture
def snapshot_file(tmp_path: Path, sample_snapshot_data) -> Path:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(sample_snapshot_data), encoding="utf-8")
    return path
