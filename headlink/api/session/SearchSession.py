"""Live heading search session."""

from __future__ import annotations

from collections.abc import Callable

from headlink.utils.logger import get_logger

from ..heading.MatchResult import MatchResult
from ..heading.search_headings import search_headings
from ..host._AbstractCandidatePresenter import _AbstractCandidatePresenter
from ..host._AbstractDocumentSource import _AbstractDocumentSource
from ..host._AbstractEditorSink import _AbstractEditorSink
from ..host._AbstractNotificationSink import _AbstractNotificationSink
from ..link.compose_from_match import compose_from_match
from ..link.LinkError import IncompleteMatchResult

logger = get_logger("session")


class SearchSession:
    """One open heading search.

    The query is re-run against the whole collection on every change and the
    result list is replaced wholesale. Selecting a match splices its link into
    the editor and closes the session.
    """

    def __init__(
        self,
        documents: _AbstractDocumentSource,
        editor: _AbstractEditorSink,
        notifier: _AbstractNotificationSink,
        link_format: Callable[[], str],
        presenter: _AbstractCandidatePresenter | None = None,
        initial_query: str = "",
    ):
        self.documents = documents
        self.editor = editor
        self.notifier = notifier
        self.presenter = presenter
        self._link_format = link_format
        self.query = ""
        self.results: list[MatchResult] = []
        self.closed = False
        self.set_query(initial_query)

    def set_query(self, query: str) -> list[MatchResult]:
        """Replace the query and recompute the matches."""
        self.query = query.lower()
        self.results = search_headings(self.documents.list_documents(), self.query)
        logger.debug("Query %r matched %d heading(s)", self.query, len(self.results))
        if self.presenter is not None:
            self.presenter.present(self.query, self.results)
        return self.results

    def select(self, match: MatchResult) -> str | None:
        """Insert the link for ``match`` at the editor selection.

        Returns:
            The inserted link, or None if the match was incomplete or the
            session is already closed. An incomplete match leaves the session open.
        """
        if self.closed:
            logger.warning("Ignoring selection on a closed search session")
            return None
        try:
            link = compose_from_match(match, self._link_format())
        except IncompleteMatchResult as e:
            logger.warning("Incomplete match result: %r", match)
            self.notifier.notify(e.user_message)
            return None

        self.editor.replace_selection(link)
        logger.info("Inserted link %s", link)
        self.close()
        self.notifier.notify(f"Inserted link {link}")
        return link

    def close(self) -> None:
        self.closed = True
