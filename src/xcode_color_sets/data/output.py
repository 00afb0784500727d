"""Writers for generated files and token property write-back."""

import json
import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, Sequence, Union

from xcode_color_sets.core.models import OutputTextFile, Token
from xcode_color_sets.error_handling import report_file_error

logger = logging.getLogger(__name__)


class DirectoryFileSink:
    """FileSink writing UTF-8 files below an output directory."""

    def __init__(self, output_dir: Union[str, Path]):
        self.output_dir = Path(output_dir).expanduser().resolve()

    def write(self, path: str, name: str, content: str) -> None:
        """
        Write ``content`` to ``<output_dir>/<path>/<name>``.

        Raises:
            ValueError: If the target would land outside the output directory.
            OSError: If the file cannot be written.
        """
        target = (self.output_dir / path / name).resolve()
        if self.output_dir != target and self.output_dir not in target.parents:
            raise ValueError(f"Refusing to write outside {self.output_dir}: {target}")

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        except OSError as e:
            report_file_error(exception=e, file_path=str(target), operation="write")
            raise

        logger.debug(f"Wrote {target}")

    def write_all(self, files: Iterable[OutputTextFile]) -> int:
        """Write every file; returns how many were written."""
        count = 0
        for file in files:
            self.write(file.relative_path, file.file_name, file.content)
            count += 1
        return count


class JsonPropertyStore:
    """PropertyWriter persisting ``{property: {token_id: value}}`` to a JSON file.

    Existing content is merged: values for other properties and other tokens
    are kept.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def load(self) -> Dict[str, Dict[str, str]]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            report_file_error(exception=e, file_path=str(self.path), operation="read")
            raise
        return data if isinstance(data, dict) else {}

    async def write_token_properties(
        self,
        property_name: str,
        tokens: Sequence[Token],
        value_for: Callable[[Token], str],
    ) -> None:
        data = self.load()
        values = data.setdefault(property_name, {})
        for token in tokens:
            values[token.id] = value_for(token)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
                f.write("\n")
        except OSError as e:
            report_file_error(exception=e, file_path=str(self.path), operation="write")
            raise

        logger.info(
            f"Wrote {len(tokens)} values of property '{property_name}' to {self.path}"
        )
