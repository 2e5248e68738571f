"""Abstract base class for the document the user is working in."""

from abc import ABC, abstractmethod


class _AbstractActiveDocument(ABC):
    """The document under the cursor."""

    @property
    @abstractmethod
    def path(self) -> str | None:
        """Vault-relative path with ``/`` separators, or None if the view has no file."""
        pass

    @property
    @abstractmethod
    def basename(self) -> str:
        """File name without directory or extension."""
        pass

    @abstractmethod
    def get_text(self) -> str:
        pass

    @abstractmethod
    def get_cursor_line(self) -> int:
        """0-based line of the cursor."""
        pass
