"""Controller owning the live settings and driving both link flows."""

from __future__ import annotations

from headlink.utils.logger import get_logger

from ..config.Settings import Settings
from ..host._AbstractCandidatePresenter import _AbstractCandidatePresenter
from ..host._AbstractClipboardSink import _AbstractClipboardSink
from ..host._AbstractDocumentSource import _AbstractDocumentSource
from ..host._AbstractEditorSink import _AbstractEditorSink
from ..host._AbstractNotificationSink import _AbstractNotificationSink
from ..host._AbstractSettingsStore import _AbstractSettingsStore
from ..link.compose_from_cursor import compose_from_cursor
from ..link.LinkError import ClipboardWriteFailed, EmptySelection, LinkError, NoAssociatedFile
from .SearchSession import SearchSession

logger = get_logger("controller")

COPY_SUCCESS_MESSAGE = "Wiki link copied to clipboard!"


class LinkController:
    """Entry point for the copy and search-select flows.

    Settings are loaded once, when the controller is created, and every edit
    is persisted immediately. Failures are reported through the notifier and
    never raised to the caller.
    """

    def __init__(
        self,
        store: _AbstractSettingsStore,
        documents: _AbstractDocumentSource,
        notifier: _AbstractNotificationSink,
        clipboard: _AbstractClipboardSink | None = None,
    ):
        self.store = store
        self.documents = documents
        self.notifier = notifier
        self.clipboard = clipboard
        self.settings = Settings.from_stored(store.load())

    @property
    def link_format(self) -> str:
        return self.settings.link_format

    def set_link_format(self, value: str) -> bool:
        """Change the link format and persist it.

        The live settings only change once the store accepted the new value.

        Returns:
            True if the format was saved
        """
        try:
            updated = self.settings.model_copy(deep=True)
            updated.link_format = value
            self.store.save(updated.to_stored())
        except (ValueError, RuntimeError) as e:
            logger.error("Failed to save link format: %s", e)
            self.notifier.notify(f"Failed to save settings: {e}")
            return False
        self.settings = updated
        logger.info("Link format set to %r", self.settings.link_format)
        return True

    def compose_link(self) -> str | None:
        """Build the link for the heading above the cursor of the active document."""
        document = self.documents.get_active_document()
        try:
            if document is None:
                raise NoAssociatedFile()
            return compose_from_cursor(
                document.get_text(),
                document.get_cursor_line(),
                document.path,
                document.basename,
                self.link_format,
            )
        except LinkError as e:
            logger.info("Copy link aborted: %s", e)
            self.notifier.notify(e.user_message)
            return None

    def copy_link(self) -> str | None:
        """Copy the link for the heading above the cursor to the clipboard.

        Returns:
            The copied link, or None when nothing was copied
        """
        link = self.compose_link()
        if link is None:
            return None
        if self.clipboard is None:
            raise RuntimeError("LinkController has no clipboard sink")
        try:
            self.clipboard.write(link)
        except ClipboardWriteFailed as e:
            logger.error("Failed to copy text: %s", e)
            self.notifier.notify(e.user_message)
            return None
        logger.info("Copied link %s", link)
        self.notifier.notify(COPY_SUCCESS_MESSAGE)
        return link

    def start_search(
        self,
        editor: _AbstractEditorSink,
        presenter: _AbstractCandidatePresenter | None = None,
    ) -> SearchSession | None:
        """Open a heading search seeded with the editor selection.

        Returns:
            The open session, or None when nothing is selected
        """
        selection = editor.get_selection_text()
        if not selection:
            error = EmptySelection()
            logger.info("Search not started: %s", error)
            self.notifier.notify(error.user_message)
            return None
        return SearchSession(
            documents=self.documents,
            editor=editor,
            notifier=self.notifier,
            link_format=lambda: self.link_format,
            presenter=presenter,
            initial_query=selection,
        )
