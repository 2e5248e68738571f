"""Abstract base class for settings persistence."""

from abc import ABC, abstractmethod
from typing import Any


class _AbstractSettingsStore(ABC):
    """Key/value blob store holding the persisted settings."""

    @abstractmethod
    def load(self) -> dict[str, Any]:
        """Return the stored blob, or an empty dict when nothing is stored."""
        pass

    @abstractmethod
    def save(self, data: dict[str, Any]) -> None:
        """Replace the stored blob with ``data``."""
        pass
