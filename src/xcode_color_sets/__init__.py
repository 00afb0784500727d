"""Xcode Color Sets - export design-system color tokens as an Xcode asset catalog"""

from xcode_color_sets._version import __version__

__all__ = ["__version__"]
