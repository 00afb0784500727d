"""Data models for Xcode Color Sets.
Snapshot entities read from a design system version and the derived
structures the exporter produces.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


class TokenType(Enum):
    """Design token types known to the exporter."""

    COLOR = "color"
    DIMENSION = "dimension"
    TYPOGRAPHY = "typography"
    SHADOW = "shadow"
    BORDER = "border"
    GRADIENT = "gradient"
    STRING = "string"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: Any) -> "TokenType":
        """Map a raw token type name (any case) to a TokenType, OTHER if unknown."""
        if isinstance(raw, TokenType):
            return raw
        normalized = str(raw or "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return cls.OTHER


@dataclass(frozen=True)
class ColorValue:
    """sRGB color with 8-bit channels and a fractional alpha."""

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"Alpha out of range: {self.alpha}")

    @classmethod
    def from_hex(cls, value: str) -> "ColorValue":
        """
        Parse ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA`` (leading ``#`` optional).

        Raises:
            ValueError: If the string is not a supported hex color.
        """
        match = _HEX_COLOR.match(value.strip())
        if not match:
            raise ValueError(f"Invalid hex color: {value!r}")

        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)

        red = int(digits[0:2], 16)
        green = int(digits[2:4], 16)
        blue = int(digits[4:6], 16)
        alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
        return cls(red, green, blue, round(alpha, 3))

    @classmethod
    def parse(cls, raw: Any) -> "ColorValue":
        """
        Build a ColorValue from a hex string or an ``{"r", "g", "b", "a"}`` mapping.

        Mapping channels are 0-255 integers; ``a`` is a 0-1 float defaulting to 1.
        """
        if isinstance(raw, ColorValue):
            return raw
        if isinstance(raw, str):
            return cls.from_hex(raw)
        if isinstance(raw, Mapping):
            try:
                return cls(
                    int(raw["r"]),
                    int(raw["g"]),
                    int(raw["b"]),
                    float(raw.get("a", 1.0)),
                )
            except KeyError as e:
                raise ValueError(f"Color mapping missing channel {e}") from e
        raise ValueError(f"Unsupported color value: {raw!r}")

    def to_hex(self) -> str:
        """Return ``#RRGGBB``, or ``#RRGGBBAA`` when the color is translucent."""
        base = f"#{self.red:02X}{self.green:02X}{self.blue:02X}"
        if self.alpha >= 1.0:
            return base
        return f"{base}{round(self.alpha * 255):02X}"


@dataclass(frozen=True)
class Token:
    """Individual design token from a design system version."""

    id: str
    name: str
    token_type: TokenType
    value: Optional[ColorValue] = None
    parent_group_id: Optional[str] = None
    collection_id: Optional[str] = None
    brand_id: Optional[str] = None
    properties: Dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class TokenGroup:
    """Folder-like grouping of tokens; root groups do not contribute to names."""

    id: str
    name: str
    parent_group_id: Optional[str] = None
    is_root: bool = False
    brand_id: Optional[str] = None


@dataclass(frozen=True)
class TokenCollection:
    """Named token collection, referenced from tokens by persistent id."""

    persistent_id: str
    name: str


@dataclass(frozen=True)
class TokenTheme:
    """Named override set applied to tokens to produce themed values."""

    id: str
    name: str
    id_in_version: Optional[str] = None
    brand_id: Optional[str] = None
    overrides: Dict[str, ColorValue] = field(default_factory=dict, compare=False)

    def matches(self, theme_id: str) -> bool:
        return self.id == theme_id or self.id_in_version == theme_id


@dataclass(frozen=True)
class ThemeGroup:
    """Light/dark pair of themes sharing a base name."""

    name: str
    light_theme: Optional[TokenTheme] = None
    dark_theme: Optional[TokenTheme] = None

    def __str__(self) -> str:
        return self.name


@dataclass
class OutputTextFile:
    """Text file produced by the exporter, relative to the destination root."""

    relative_path: str
    file_name: str
    content: str = ""

    @property
    def path(self) -> str:
        """Full relative path including the file name."""
        if not self.relative_path:
            return self.file_name
        return f"{self.relative_path}/{self.file_name}"


@dataclass(frozen=True)
class ExportContext:
    """Identifies the design system version and selections for one run."""

    design_system_id: str
    version_id: str
    brand_id: Optional[str] = None
    theme_ids: Tuple[str, ...] = ()
    is_preview: bool = False


@dataclass
class ExportSummary:
    """Counts collected during a run, used for the CLI report."""

    tokens_fetched: int = 0
    color_tokens: int = 0
    theme_groups: List[str] = field(default_factory=list)
    color_sets: int = 0
    dark_variants: int = 0
