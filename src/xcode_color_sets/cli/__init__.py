"""Command line interface for Xcode Color Sets."""

from typing import List

__all__: List[str] = []
