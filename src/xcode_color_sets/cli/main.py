"""Command line entry point for Xcode Color Sets."""

import asyncio
import logging
import sys
import traceback
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from xcode_color_sets._version import __version__
from xcode_color_sets.cli.bootstrap import setup_environment, setup_logging
from xcode_color_sets.core.models import ExportContext, ExportSummary
from xcode_color_sets.core.settings import Settings, load_exporter_configuration
from xcode_color_sets.data.output import DirectoryFileSink, JsonPropertyStore
from xcode_color_sets.data.snapshot import JsonSnapshotSource
from xcode_color_sets.data.valuation import OverrideThemeValuator
from xcode_color_sets.error_handling import report_error
from xcode_color_sets.exporter import XcodeColorSetExporter

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one export from the command line.

    Returns:
        int: 0 on success or user interrupt, 1 on failure.
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        settings = Settings.load(argv)

        if settings.version:
            print(f"xcode-color-sets {__version__}")
            return 0

        setup_environment()
        setup_logging(settings.log_level, settings.log_file, disable_console=False)

        if settings.snapshot is None:
            print("error: --snapshot is required", file=sys.stderr)
            return 1

        return _run_export(settings)

    except KeyboardInterrupt:
        print("\n\nExport cancelled by user.")
        return 0
    except Exception as e:
        report_error(
            exception=e,
            component="cli_main",
            context_name="export",
            context_data={"argv": list(argv)},
        )
        print(f"\n\nError: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1


def _run_export(settings: Settings) -> int:
    configuration = load_exporter_configuration(settings.config)
    source = JsonSnapshotSource.from_file(settings.snapshot)

    exporter = XcodeColorSetExporter(
        source=source,
        valuator=OverrideThemeValuator(),
        configuration=configuration,
        property_writer=JsonPropertyStore(settings.resolved_properties_file),
    )
    context = ExportContext(
        design_system_id=source.snapshot.design_system_id,
        version_id=source.snapshot.version_id,
        brand_id=settings.brand_id,
        theme_ids=tuple(settings.theme_ids),
        is_preview=settings.preview,
    )

    files = asyncio.run(exporter.export(context))
    written = DirectoryFileSink(settings.output).write_all(files)
    logger.info(f"Wrote {written} files to {settings.output}")

    Console().print(_summary_table(exporter.summary, written))
    return 0


def _summary_table(summary: ExportSummary, written: int) -> Table:
    table = Table(title="Xcode Color Sets")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Tokens fetched", str(summary.tokens_fetched))
    table.add_row("Color tokens", str(summary.color_tokens))
    table.add_row("Theme folders", ", ".join(summary.theme_groups) or "-")
    table.add_row("Color sets", str(summary.color_sets))
    table.add_row("Dark variants", str(summary.dark_variants))
    table.add_row("Files written", str(written))
    return table


if __name__ == "__main__":
    sys.exit(main())
