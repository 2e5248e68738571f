"""Abstract base class for clipboard output."""

from abc import ABC, abstractmethod


class _AbstractClipboardSink(ABC):
    @abstractmethod
    def write(self, text: str) -> None:
        """Put ``text`` on the clipboard.

        Raises:
            ClipboardWriteFailed: The clipboard could not be written
        """
        pass
