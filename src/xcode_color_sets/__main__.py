"""Allow running the exporter with ``python -m xcode_color_sets``."""

import sys

from xcode_color_sets.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
