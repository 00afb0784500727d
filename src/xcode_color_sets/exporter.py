"""Orchestrator turning color tokens and theme selections into an asset catalog."""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from xcode_color_sets.core.color_sets import (
    create_catalog_root_file,
    create_namespace_folder,
    create_per_token_file,
    join_path,
)
from xcode_color_sets.core.models import (
    ExportContext,
    ExportSummary,
    OutputTextFile,
    ThemeGroup,
    Token,
    TokenCollection,
    TokenGroup,
    TokenTheme,
    TokenType,
)
from xcode_color_sets.core.naming import DefaultNameCoder, TokenNameTracker
from xcode_color_sets.core.ports import (
    NameCoder,
    PropertyWriter,
    TokenDataSource,
    TokenValuator,
)
from xcode_color_sets.core.settings import ExporterConfiguration
from xcode_color_sets.core.themes import group_themes
from xcode_color_sets.error_handling import ThemeNotFoundError
from xcode_color_sets.export_log import ExportLog

EXPORTER_NAME = "Xcode Color Set"

logger = logging.getLogger(__name__)


def filter_color_tokens(tokens: Sequence[Token]) -> List[Token]:
    return [t for t in tokens if t.token_type == TokenType.COLOR]


def resolve_themes(
    theme_ids: Sequence[str], themes: Sequence[TokenTheme]
) -> List[TokenTheme]:
    """
    Look up each requested id by ``id`` or ``id_in_version``, keeping request order.

    Raises:
        ThemeNotFoundError: If any requested id matches no theme.
    """
    resolved = []
    for theme_id in theme_ids:
        theme = next((t for t in themes if t.matches(theme_id)), None)
        if theme is None:
            raise ThemeNotFoundError(theme_id)
        resolved.append(theme)
    return resolved


def exclude_collections(
    tokens: Sequence[Token],
    collections: Sequence[TokenCollection],
    excluded_names: Sequence[str],
) -> List[Token]:
    """
    Drop tokens whose collection name is excluded (trimmed, case-insensitive).

    Tokens without a resolvable collection are kept.
    """
    excluded = {name.strip().lower() for name in excluded_names}
    names_by_id: Dict[str, str] = {
        c.persistent_id: c.name.strip().lower() for c in collections
    }

    kept = []
    for token in tokens:
        collection_name = names_by_id.get(token.collection_id or "")
        if collection_name is not None and collection_name in excluded:
            continue
        kept.append(token)
    return kept


def _preview(names: Sequence[str], limit: int = 5) -> str:
    shown = ", ".join(names[:limit])
    return f"{shown}, ..." if len(names) > limit else shown


class XcodeColorSetExporter:
    """Generates an Xcode asset catalog of color sets for one design system version.

    Theme handling: selected themes are grouped into light/dark pairs. Each
    pair gets its own namespace folder; the light theme provides the base
    value of every color set and the dark theme, when present, the dark
    appearance.
    """

    def __init__(
        self,
        source: TokenDataSource,
        valuator: TokenValuator,
        configuration: Optional[ExporterConfiguration] = None,
        name_coder: Optional[NameCoder] = None,
        property_writer: Optional[PropertyWriter] = None,
    ):
        self.source = source
        self.valuator = valuator
        self.configuration = configuration or ExporterConfiguration()
        self.name_coder = name_coder or DefaultNameCoder()
        self.property_writer = property_writer
        self.summary = ExportSummary()

    async def export(
        self, context: ExportContext, log: Optional[ExportLog] = None
    ) -> List[OutputTextFile]:
        """
        Run the export and return every generated file, the log file first.

        Raises:
            ThemeNotFoundError: If a selected theme id does not exist.
        """
        config = self.configuration
        root_path = config.root_path
        log = log or ExportLog(root_path)
        self.summary = ExportSummary()
        files: List[OutputTextFile] = []

        log.log(f"Exporter: {EXPORTER_NAME}")
        log.log(f"Started: {datetime.now(timezone.utc).isoformat()}")
        log.log(f"Design System ID: {context.design_system_id}")
        log.log(f"Version ID: {context.version_id}")
        log.log(f"Brand ID: {context.brand_id or '-'}")

        tokens, token_groups, token_collections = await asyncio.gather(
            self.source.get_tokens(context.brand_id),
            self.source.get_token_groups(context.brand_id),
            self.source.get_token_collections(),
        )
        self.summary.tokens_fetched = len(tokens)
        log.log(f"Fetched tokens: {len(tokens)}")
        log.log(f"Fetched token groups: {len(token_groups)}")
        log.log(f"Token groups: {_preview([g.name for g in token_groups])}")
        log.log(f"Fetched collections: {len(token_collections)}")
        log.log(f"Token collections: {', '.join(c.name for c in token_collections)}")

        color_tokens = filter_color_tokens(tokens)
        log.log(f"Filtered color tokens: {len(color_tokens)}")

        themes_to_apply: List[TokenTheme] = []
        if context.theme_ids:
            themes = await self.source.get_token_themes()
            themes_to_apply = resolve_themes(context.theme_ids, themes)
            log.log(
                f"Resolved themes: {', '.join(t.name for t in themes_to_apply) or '-'}"
            )
        else:
            log.log("Resolved themes: none")

        if config.excludes_collections:
            original_count = len(color_tokens)
            color_tokens = exclude_collections(
                color_tokens, token_collections, config.excluded_collections
            )
            log.log("Excluded collections enabled: yes")
            log.log(f"Excluded collections: {', '.join(config.excluded_collections)}")
            log.log(
                f"Color tokens after exclusions: {len(color_tokens)} (was {original_count})"
            )
        else:
            log.log("Excluded collections enabled: no")
        self.summary.color_tokens = len(color_tokens)

        if config.generate_root_catalog:
            files.append(create_catalog_root_file(root_path))
            log.log(f"Created root catalog: {root_path}")
        else:
            log.log("Root catalog generation disabled")

        theme_groups = group_themes(themes_to_apply, log)
        log.log(
            f"Grouped themes: ({len(theme_groups)}) "
            f"{', '.join(g.name for g in theme_groups)}"
        )

        for group in theme_groups:
            files.extend(
                await self._export_theme_group(
                    context, group, root_path, tokens, token_groups, color_tokens, log
                )
            )

        log.log(f"Generated files: {len(files) + 1}")
        return [log.file] + files

    async def _export_theme_group(
        self,
        context: ExportContext,
        group: ThemeGroup,
        root_path: str,
        tokens: Sequence[Token],
        token_groups: Sequence[TokenGroup],
        color_tokens: Sequence[Token],
        log: ExportLog,
    ) -> List[OutputTextFile]:
        log.log(
            f"Grouped theme: {group.name}, light: {'yes' if group.light_theme else 'no'}, "
            f"dark: {'yes' if group.dark_theme else 'no'}"
        )
        theme_folder = self.name_coder.to_safe_name(
            group.name, self.configuration.theme_folder_style
        )
        namespace = create_namespace_folder(theme_folder, root_path)
        log.log(f"Created namespace folder for theme: {namespace.path}")
        self.summary.theme_groups.append(theme_folder)

        if group.light_theme is None:
            log.log(f"Skipping colors for theme '{group.name}': no light theme")
            return [namespace]

        colors_path = join_path(root_path, theme_folder)
        log.log(f"Colors path: {colors_path}")
        return [namespace] + await self.create_theme_colors(
            context,
            colors_path,
            tokens,
            token_groups,
            color_tokens,
            group.light_theme,
            group.dark_theme,
            log,
        )

    async def create_theme_colors(
        self,
        context: ExportContext,
        colors_path: str,
        tokens: Sequence[Token],
        token_groups: Sequence[TokenGroup],
        color_tokens: Sequence[Token],
        light_theme: TokenTheme,
        dark_theme: Optional[TokenTheme],
        log: ExportLog,
    ) -> List[OutputTextFile]:
        """
        Emit one color set per color token with the light theme as base and the
        dark theme as dark appearance.

        Themes are applied to all tokens so references between tokens resolve
        against the full set. A token missing from the light valuation keeps its
        own value; one missing from the dark valuation gets no dark entry.
        """
        config = self.configuration
        base_tokens = self.valuator.apply_themes(tokens, [light_theme])
        dark_tokens = (
            self.valuator.apply_themes(tokens, [dark_theme]) if dark_theme else []
        )
        log.log(f"Applied base theme: {light_theme.name}")
        log.log(f"Applied dark theme: {dark_theme.name if dark_theme else 'none'}")

        base_by_id = {t.id: t for t in base_tokens}
        dark_by_id = {t.id: t for t in dark_tokens}

        tracker = TokenNameTracker(self.name_coder)
        name_style = config.folder_name_style

        created = []
        exported = []
        for token in color_tokens:
            base_token = base_by_id.get(token.id, token)
            dark_variant = dark_by_id.get(token.id)
            variants = [dark_variant] if dark_variant else []
            file = create_per_token_file(
                base_token, token_groups, colors_path, variants, tracker, name_style
            )
            if file:
                created.append(file)
                exported.append(token)
            else:
                log.log(f"Skipping token '{token.name}': no color value")
        log.log(f"Emitted color set files: {len(created)}")
        self.summary.color_sets += len(created)

        if (
            config.write_name_to_property
            and not context.is_preview
            and self.property_writer is not None
        ):
            await self.property_writer.write_token_properties(
                config.property_to_write_name_to,
                exported,
                lambda t: tracker.token_name(t, token_groups, name_style),
            )
            log.log(f"Wrote exported names to property: {config.property_to_write_name_to}")
        else:
            log.log("Write-back disabled or preview mode")

        dark_count = sum(1 for t in color_tokens if t.id in dark_by_id)
        self.summary.dark_variants += dark_count
        log.log(f"Dark variants generated: {dark_count}")

        return created
