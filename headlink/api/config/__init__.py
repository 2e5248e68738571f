"""Settings model and persistence."""

from .JsonSettingsStore import JsonSettingsStore
from .Settings import Settings

__all__ = ["JsonSettingsStore", "Settings"]
