"""Per-run export log materialised as ``log.txt`` next to the catalog."""

import logging
from typing import List

from xcode_color_sets.core.models import OutputTextFile

LOG_FILE_NAME = "log.txt"

logger = logging.getLogger(__name__)


class ExportLog:
    """Append-only buffer of progress lines for one export run.

    One instance is created per run and passed to every operation that reports
    progress. Lines are mirrored to the standard logging module.
    """

    def __init__(self, root_path: str = ""):
        self.root_path = root_path
        self._lines: List[str] = []

    def log(self, message: object) -> None:
        line = str(message)
        self._lines.append(line)
        logger.info(line)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    @property
    def content(self) -> str:
        return "\n".join(self._lines)

    @property
    def file(self) -> OutputTextFile:
        """The log as an output file at the catalog root."""
        return OutputTextFile(
            relative_path=self.root_path,
            file_name=LOG_FILE_NAME,
            content=self.content,
        )
