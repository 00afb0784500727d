"""Design system snapshot reader.

Loads a JSON export of one design system version and maps it to the
exporter's models. Entries that cannot be mapped are skipped.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from xcode_color_sets.core.models import (
    ColorValue,
    Token,
    TokenCollection,
    TokenGroup,
    TokenTheme,
    TokenType,
)
from xcode_color_sets.error_handling import report_file_error

FIELD_ID = "id"
FIELD_NAME = "name"

logger = logging.getLogger(__name__)


@dataclass
class DesignSystemSnapshot:
    """Everything the exporter reads from one design system version."""

    design_system_id: str = ""
    version_id: str = ""
    tokens: List[Token] = field(default_factory=list)
    token_groups: List[TokenGroup] = field(default_factory=list)
    token_collections: List[TokenCollection] = field(default_factory=list)
    themes: List[TokenTheme] = field(default_factory=list)


def load_snapshot(path: Union[str, Path]) -> DesignSystemSnapshot:
    """
    Read a snapshot JSON file.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the document is not a JSON object.
    """
    path = Path(path).expanduser()
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        report_file_error(exception=e, file_path=str(path), operation="read")
        raise

    if not isinstance(data, dict):
        raise ValueError(f"Snapshot {path} must contain a JSON object")

    snapshot = parse_snapshot(data)
    logger.info(
        f"Loaded snapshot {path.name}: {len(snapshot.tokens)} tokens, "
        f"{len(snapshot.themes)} themes"
    )
    return snapshot


def parse_snapshot(data: Dict[str, Any]) -> DesignSystemSnapshot:
    """Map a decoded snapshot document to models."""
    return DesignSystemSnapshot(
        design_system_id=str(data.get("designSystemId", "")),
        version_id=str(data.get("versionId", "")),
        tokens=_map_all(data.get("tokens"), _map_to_token),
        token_groups=_map_all(data.get("tokenGroups"), _map_to_token_group),
        token_collections=_map_all(
            data.get("tokenCollections"), _map_to_token_collection
        ),
        themes=_map_all(data.get("themes"), _map_to_token_theme),
    )


def _map_all(raw_items: Any, mapper) -> List[Any]:
    if not isinstance(raw_items, list):
        return []

    mapped = []
    for raw in raw_items:
        if not isinstance(raw, dict):
            logger.debug(f"Skipping non-object entry: {raw!r}")
            continue
        try:
            item = mapper(raw)
        except (KeyError, TypeError, ValueError) as e:
            logger.debug(f"Skipping malformed entry {raw.get(FIELD_ID)!r}: {e}")
            continue
        mapped.append(item)
    return mapped


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _map_to_token(data: Dict[str, Any]) -> Token:
    token_type = TokenType.parse(data.get("tokenType"))
    raw_value = data.get("value")
    value = None
    if token_type == TokenType.COLOR and raw_value is not None:
        value = ColorValue.parse(raw_value)

    return Token(
        id=str(data[FIELD_ID]),
        name=str(data.get(FIELD_NAME, "")),
        token_type=token_type,
        value=value,
        parent_group_id=_optional_str(data.get("parentGroupId")),
        collection_id=_optional_str(data.get("collectionId")),
        brand_id=_optional_str(data.get("brandId")),
        properties=dict(data.get("properties") or {}),
    )


def _map_to_token_group(data: Dict[str, Any]) -> TokenGroup:
    return TokenGroup(
        id=str(data[FIELD_ID]),
        name=str(data.get(FIELD_NAME, "")),
        parent_group_id=_optional_str(data.get("parentGroupId")),
        is_root=bool(data.get("isRoot", False)),
        brand_id=_optional_str(data.get("brandId")),
    )


def _map_to_token_collection(data: Dict[str, Any]) -> TokenCollection:
    return TokenCollection(
        persistent_id=str(data["persistentId"]),
        name=str(data.get(FIELD_NAME, "")),
    )


def _map_overrides(raw_overrides: Any) -> Dict[str, ColorValue]:
    """Color overrides of a theme; values that are not colors are skipped."""
    if not isinstance(raw_overrides, dict):
        return {}

    overrides = {}
    for token_id, raw in raw_overrides.items():
        try:
            overrides[str(token_id)] = ColorValue.parse(raw)
        except (TypeError, ValueError) as e:
            logger.debug(f"Skipping non-color override for token {token_id!r}: {e}")
    return overrides


def _map_to_token_theme(data: Dict[str, Any]) -> TokenTheme:
    overrides = _map_overrides(data.get("overrides"))
    return TokenTheme(
        id=str(data[FIELD_ID]),
        name=str(data.get(FIELD_NAME, "")),
        id_in_version=_optional_str(data.get("idInVersion")),
        brand_id=_optional_str(data.get("brandId")),
        overrides=overrides,
    )


class JsonSnapshotSource:
    """TokenDataSource serving a snapshot already held in memory."""

    def __init__(self, snapshot: DesignSystemSnapshot):
        self.snapshot = snapshot

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "JsonSnapshotSource":
        return cls(load_snapshot(path))

    async def get_tokens(self, brand_id: Optional[str] = None) -> List[Token]:
        return [
            t for t in self.snapshot.tokens if _in_brand(t.brand_id, brand_id)
        ]

    async def get_token_groups(
        self, brand_id: Optional[str] = None
    ) -> List[TokenGroup]:
        return [
            g for g in self.snapshot.token_groups if _in_brand(g.brand_id, brand_id)
        ]

    async def get_token_collections(self) -> List[TokenCollection]:
        return list(self.snapshot.token_collections)

    async def get_token_themes(self) -> List[TokenTheme]:
        return list(self.snapshot.themes)


def _in_brand(item_brand: Optional[str], requested: Optional[str]) -> bool:
    """Items without a brand belong to every brand."""
    return requested is None or item_brand is None or item_brand == requested
