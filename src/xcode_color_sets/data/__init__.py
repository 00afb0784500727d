"""Local adapters for snapshot loading, theme valuation and file output."""

from typing import List

# Import adapters explicitly, e.g.
#   from xcode_color_sets.data.snapshot import JsonSnapshotSource
#   from xcode_color_sets.data.output import DirectoryFileSink

__all__: List[str] = []
