"""Abstract base class for user-facing notices."""

from abc import ABC, abstractmethod


class _AbstractNotificationSink(ABC):
    @abstractmethod
    def notify(self, message: str) -> None:
        pass
