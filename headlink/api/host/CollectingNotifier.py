"""Notification sink that records messages."""

from typing import Any

from ._AbstractNotificationSink import _AbstractNotificationSink


class CollectingNotifier(_AbstractNotificationSink):
    """Collects notices in ``messages`` and optionally echoes them to a display."""

    def __init__(self, display: Any | None = None):
        self.messages: list[str] = []
        self.display = display

    def notify(self, message: str) -> None:
        self.messages.append(message)
        if self.display is not None:
            self.display.info(message)
