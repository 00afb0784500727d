"""Grouping of selected themes into light/dark pairs.

Themes are paired by naming convention: ``"<Base> Light"`` and
``"<Base> Dark"`` end up in the same :class:`ThemeGroup` keyed by the first
word of the name.
"""

import logging
import re
from enum import Enum
from typing import Dict, List, Optional, Sequence

from xcode_color_sets.core.models import ThemeGroup, TokenTheme
from xcode_color_sets.export_log import ExportLog

logger = logging.getLogger(__name__)

_LIGHT_SUFFIX = re.compile(r"\blight\b$")
_DARK_SUFFIX = re.compile(r"\bdark\b$")


class ThemeVariant(Enum):
    """Appearance a theme provides."""

    LIGHT = "light"
    DARK = "dark"


def get_theme_variant(name: str) -> Optional[ThemeVariant]:
    """Classify a theme name by its trailing word, ``None`` if neither light nor dark."""
    normalized = name.strip().lower()
    if _LIGHT_SUFFIX.search(normalized):
        return ThemeVariant.LIGHT
    if _DARK_SUFFIX.search(normalized):
        return ThemeVariant.DARK
    return None


def derive_base_theme_name(name: str) -> str:
    """First whitespace-delimited word of the trimmed name."""
    words = name.split()
    return words[0] if words else ""


def group_themes(
    themes: Sequence[TokenTheme], log: Optional[ExportLog] = None
) -> List[ThemeGroup]:
    """
    Pair themes into light/dark groups by base name.

    Themes without a light/dark suffix are skipped. When two themes share a
    base name and variant, the later one wins. Groups keep the order in which
    their base name was first seen.

    Parameters:
        themes: Resolved themes in selection order.
        log: Export log receiving the skip and duplicate notices.

    Returns:
        List[ThemeGroup]: One group per base name with at least one variant.
    """
    if not themes:
        return []

    report = log.log if log is not None else logger.info
    variants_by_base: Dict[str, Dict[ThemeVariant, TokenTheme]] = {}

    for theme in themes:
        variant = get_theme_variant(theme.name)
        if variant is None:
            report(
                f"Skipping theme '{theme.name}' because no light/dark suffix was detected."
            )
            continue

        base = derive_base_theme_name(theme.name)
        entry = variants_by_base.setdefault(base, {})

        if variant in entry:
            report(
                f"Duplicate {variant.value} theme found for base '{base}'. "
                "Replacing existing theme."
            )

        entry[variant] = theme

    groups = []
    for base, pair in variants_by_base.items():
        if pair.get(ThemeVariant.LIGHT) or pair.get(ThemeVariant.DARK):
            groups.append(
                ThemeGroup(
                    name=base,
                    light_theme=pair.get(ThemeVariant.LIGHT),
                    dark_theme=pair.get(ThemeVariant.DARK),
                )
            )
    return groups
