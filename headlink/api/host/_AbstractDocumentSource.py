"""Abstract base class for document access."""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from ._AbstractActiveDocument import _AbstractActiveDocument
from .VaultDocument import VaultDocument


class _AbstractDocumentSource(ABC):
    """Access to the active document and the whole document collection."""

    @abstractmethod
    def get_active_document(self) -> _AbstractActiveDocument | None:
        """Return the active document, or None when no markdown view is open."""
        pass

    @abstractmethod
    def list_documents(self) -> Iterator[VaultDocument]:
        """Iterate over every markdown document in enumeration order."""
        pass
