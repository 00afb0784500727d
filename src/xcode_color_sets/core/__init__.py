"""Core package for Xcode Color Sets.

This module provides the core functionality of the exporter, including
models, theme grouping, naming, catalog file builders and settings.
"""

from typing import List

__all__: List[str] = []
