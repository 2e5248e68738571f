"""Host collaborator interfaces and their filesystem/terminal implementations."""

from ._AbstractActiveDocument import _AbstractActiveDocument
from ._AbstractCandidatePresenter import _AbstractCandidatePresenter
from ._AbstractClipboardSink import _AbstractClipboardSink
from ._AbstractDocumentSource import _AbstractDocumentSource
from ._AbstractEditorSink import _AbstractEditorSink
from ._AbstractNotificationSink import _AbstractNotificationSink
from ._AbstractSettingsStore import _AbstractSettingsStore
from .CollectingNotifier import CollectingNotifier
from .FileActiveDocument import FileActiveDocument
from .FileSelectionEditor import FileSelectionEditor
from .MemoryClipboard import MemoryClipboard
from .MemorySettingsStore import MemorySettingsStore
from .SystemClipboard import SystemClipboard
from .VaultDocument import VaultDocument
from .resolve_vault_path import resolve_vault_path
from .VaultDocumentSource import VaultDocumentSource

__all__ = [
    "CollectingNotifier",
    "FileActiveDocument",
    "FileSelectionEditor",
    "MemoryClipboard",
    "MemorySettingsStore",
    "SystemClipboard",
    "VaultDocument",
    "VaultDocumentSource",
    "_AbstractActiveDocument",
    "_AbstractCandidatePresenter",
    "_AbstractClipboardSink",
    "_AbstractDocumentSource",
    "_AbstractEditorSink",
    "_AbstractNotificationSink",
    "_AbstractSettingsStore",
    "resolve_vault_path",
]
