"""In-process settings store."""

import copy
from typing import Any

from ._AbstractSettingsStore import _AbstractSettingsStore


class MemorySettingsStore(_AbstractSettingsStore):
    def __init__(self, data: dict[str, Any] | None = None):
        self.data: dict[str, Any] = dict(data or {})
        self.save_calls = 0

    def load(self) -> dict[str, Any]:
        return copy.deepcopy(self.data)

    def save(self, data: dict[str, Any]) -> None:
        self.data = copy.deepcopy(data)
        self.save_calls += 1
