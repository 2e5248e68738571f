"""Abstract base class for editor selection access."""

from abc import ABC, abstractmethod


class _AbstractEditorSink(ABC):
    """The editor holding the text selection a link is inserted at."""

    @abstractmethod
    def get_selection_text(self) -> str:
        """Return the selected text, or an empty string when nothing is selected."""
        pass

    @abstractmethod
    def replace_selection(self, text: str) -> None:
        """Replace the current selection with ``text``."""
        pass
