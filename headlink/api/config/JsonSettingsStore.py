"""JSON file settings store."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from ..host._AbstractSettingsStore import _AbstractSettingsStore
from .get_settings_path import get_settings_path


class JsonSettingsStore(_AbstractSettingsStore):
    """Settings blob kept in a JSON file (``$HEADLINK_HOME/settings.json`` by default)."""

    def __init__(self, path: Path | None = None):
        self.path = path if path is not None else get_settings_path()

    def load(self) -> dict[str, Any]:
        """Load the stored blob.

        A missing file is an empty blob.

        Raises:
            ValueError: If the file holds invalid JSON
        """
        if not self.path.exists():
            return {}
        try:
            with self.path.open(encoding="utf-8") as fh:
                return json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in settings file {self.path}: {e}") from e

    def save(self, data: dict[str, Any]) -> None:
        """Write the blob atomically (temp file, then rename).

        Raises:
            RuntimeError: If the file cannot be written
        """
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=4)
            temp_path.replace(self.path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save settings: {e}") from e
