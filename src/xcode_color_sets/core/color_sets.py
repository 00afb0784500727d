"""Builders for asset catalog ``Contents.json`` files."""

import json
from typing import Any, Dict, Iterable, List, Optional, Sequence

from xcode_color_sets.core.models import ColorValue, OutputTextFile, Token, TokenGroup
from xcode_color_sets.core.naming import StringCase, TokenNameTracker

CONTENTS_FILE_NAME = "Contents.json"
COLOR_SET_EXTENSION = ".colorset"

CATALOG_INFO: Dict[str, Any] = {"version": 1, "author": "xcode"}
DARK_APPEARANCE: List[Dict[str, str]] = [
    {"appearance": "luminosity", "value": "dark"}
]


def join_path(*segments: Optional[str]) -> str:
    """Join relative path segments with ``/``, ignoring empty ones."""
    parts = []
    for segment in segments:
        if segment:
            parts.extend(p for p in segment.strip("/").split("/") if p and p != ".")
    return "/".join(parts)


def render_json(document: Dict[str, Any]) -> str:
    """Serialise a catalog document the same way on every run."""
    return json.dumps(document, indent=2) + "\n"


def color_components(color: ColorValue) -> Dict[str, str]:
    return {
        "red": f"0x{color.red:02X}",
        "green": f"0x{color.green:02X}",
        "blue": f"0x{color.blue:02X}",
        "alpha": f"{color.alpha:.3f}",
    }


def color_entry(color: ColorValue, dark: bool = False) -> Dict[str, Any]:
    """One element of a color set's ``colors`` array."""
    entry: Dict[str, Any] = {"idiom": "universal"}
    if dark:
        entry["appearances"] = [dict(a) for a in DARK_APPEARANCE]
    entry["color"] = {
        "color-space": "srgb",
        "components": color_components(color),
    }
    return entry


def create_catalog_root_file(root_path: str) -> OutputTextFile:
    """``Contents.json`` marking the root of an asset catalog."""
    return OutputTextFile(
        relative_path=join_path(root_path),
        file_name=CONTENTS_FILE_NAME,
        content=render_json({"info": dict(CATALOG_INFO)}),
    )


def create_namespace_folder(name: str, root_path: str) -> OutputTextFile:
    """``Contents.json`` for a folder that scopes the asset names inside it."""
    return OutputTextFile(
        relative_path=join_path(root_path, name),
        file_name=CONTENTS_FILE_NAME,
        content=render_json(
            {
                "info": dict(CATALOG_INFO),
                "properties": {"provides-namespace": True},
            }
        ),
    )


def create_per_token_file(
    token: Token,
    token_groups: Iterable[TokenGroup],
    root_path: str,
    variants: Sequence[Token],
    tracker: TokenNameTracker,
    name_style: StringCase = StringCase.KEBAB,
) -> Optional[OutputTextFile]:
    """
    Build the color set for one token.

    The first ``colors`` entry carries the token's own value; each variant adds
    an entry tagged with the dark luminosity appearance. Variants without a
    value are dropped.

    Returns:
        OutputTextFile or None: ``None`` when the token itself has no value.
    """
    if token.value is None:
        return None

    colors = [color_entry(token.value)]
    for variant in variants:
        if variant.value is not None:
            colors.append(color_entry(variant.value, dark=True))

    name = tracker.token_name(token, token_groups, name_style)
    return OutputTextFile(
        relative_path=join_path(root_path, f"{name}{COLOR_SET_EXTENSION}"),
        file_name=CONTENTS_FILE_NAME,
        content=render_json({"colors": colors, "info": dict(CATALOG_INFO)}),
    )
