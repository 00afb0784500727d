"""Version management utilities.

The installed distribution metadata is the source of truth; ``setup.py`` is
consulted only for source checkouts that were never installed.
"""

import importlib.metadata
import re
from pathlib import Path

DISTRIBUTION_NAME = "xcode-color-sets"

_VERSION_PATTERN = re.compile(r'^__version__\s*=\s*["\']([^"\']+)["\']', re.MULTILINE)


def get_version() -> str:
    """
    Retrieve the current package version as a string.

    Reads the installed package metadata first. If the package is not installed,
    falls back to the ``__version__`` assignment in ``setup.py``. Returns
    "unknown" if the version cannot be determined.
    """
    try:
        return importlib.metadata.version(DISTRIBUTION_NAME)
    except importlib.metadata.PackageNotFoundError:
        # Fallback for development environments where package isn't installed
        return _get_version_from_setup()


def _get_version_from_setup() -> str:
    """
    Look for ``setup.py`` up to five directory levels above this file and
    return the version it declares, or "unknown".
    """
    current_dir = Path(__file__).parent
    for _ in range(5):  # Max 5 levels up
        setup_path = current_dir / "setup.py"
        if setup_path.exists():
            try:
                match = _VERSION_PATTERN.search(setup_path.read_text(encoding="utf-8"))
            except OSError:
                return "unknown"
            return match.group(1) if match else "unknown"
        current_dir = current_dir.parent

    return "unknown"


# Module-level version constant
__version__: str = get_version()
