"""Capability interfaces the exporter depends on.

The exporter only orchestrates; fetching, theme valuation, naming, file
output and property write-back are provided by implementations of these
protocols. Local implementations live in :mod:`xcode_color_sets.data`.
"""

from typing import Callable, List, Optional, Protocol, Sequence, runtime_checkable

from xcode_color_sets.core.models import (
    Token,
    TokenCollection,
    TokenGroup,
    TokenTheme,
)
from xcode_color_sets.core.naming import StringCase


@runtime_checkable
class TokenDataSource(Protocol):
    """Read access to one design system version."""

    async def get_tokens(self, brand_id: Optional[str] = None) -> List[Token]: ...

    async def get_token_groups(
        self, brand_id: Optional[str] = None
    ) -> List[TokenGroup]: ...

    async def get_token_collections(self) -> List[TokenCollection]: ...

    async def get_token_themes(self) -> List[TokenTheme]: ...


@runtime_checkable
class TokenValuator(Protocol):
    """Computes token values with themes applied."""

    def apply_themes(
        self, tokens: Sequence[Token], themes: Sequence[TokenTheme]
    ) -> List[Token]: ...


@runtime_checkable
class NameCoder(Protocol):
    """Converts display names to code-safe identifiers."""

    def to_safe_name(self, raw: str, case: StringCase) -> str: ...


@runtime_checkable
class FileSink(Protocol):
    """Destination for generated files."""

    def write(self, path: str, name: str, content: str) -> None: ...


@runtime_checkable
class PropertyWriter(Protocol):
    """Stores a computed value into a custom property of each token."""

    async def write_token_properties(
        self,
        property_name: str,
        tokens: Sequence[Token],
        value_for: Callable[[Token], str],
    ) -> None: ...
