"""Bootstrap utilities for CLI initialization."""

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    level: str = "INFO", log_file: Optional[Path] = None, disable_console: bool = False
) -> None:
    """
    Configures the application's logging system with the specified log level, optional file output, and optional console output.

    Parameters:
    	level (str): Logging level as a string (e.g., "DEBUG", "INFO").
    	log_file (Optional[Path]): Path to a file for logging output, if provided.
    	disable_console (bool): If True, disables logging to the console.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers = []
    if not disable_console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def setup_environment() -> None:
    """
    Ensure standard output uses UTF-8 so catalog and token names print intact.
    """
    if sys.stdout.encoding and sys.stdout.encoding.lower() != "utf-8":
        reconfigure = getattr(sys.stdout, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(encoding="utf-8")
