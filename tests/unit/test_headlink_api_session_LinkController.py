"""Unit tests for LinkController and SearchSession."""

from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest

from headlink.api.heading.MatchResult import MatchResult
from headlink.api.host import (
    _AbstractActiveDocument,
    CollectingNotifier,
    MemoryClipboard,
    MemorySettingsStore,
    _AbstractCandidatePresenter,
    _AbstractClipboardSink,
    _AbstractDocumentSource,
    _AbstractEditorSink,
)
from headlink.api.link.LinkError import ClipboardWriteFailed
from headlink.api.session.LinkController import COPY_SUCCESS_MESSAGE, LinkController
from headlink.api.template import DEFAULT_LINK_FORMAT


class FakeActiveDocument(_AbstractActiveDocument):
    def __init__(self, path, basename, text, cursor_line):
        self._path = path
        self._basename = basename
        self.text = text
        self.cursor_line = cursor_line

    @property
    def path(self):
        return self._path

    @property
    def basename(self):
        return self._basename

    def get_text(self):
        return self.text

    def get_cursor_line(self):
        return self.cursor_line


@dataclass
class FakeDocument:
    path: str
    content: str

    def read_text(self) -> str:
        return self.content


@dataclass
class FakeDocumentSource(_AbstractDocumentSource):
    active: _AbstractActiveDocument | None = None
    documents: list[FakeDocument] = field(default_factory=list)
    list_calls: int = 0

    def get_active_document(self):
        return self.active

    def list_documents(self) -> Iterator[FakeDocument]:
        self.list_calls += 1
        return iter(self.documents)


class FakeEditor(_AbstractEditorSink):
    def __init__(self, selection: str):
        self.selection = selection
        self.replacements: list[str] = []

    def get_selection_text(self) -> str:
        return self.selection

    def replace_selection(self, text: str) -> None:
        self.replacements.append(text)


class FailingSettingsStore(MemorySettingsStore):
    def save(self, data):
        raise RuntimeError("Failed to save settings to /ro/settings.json: read-only")


class FailingClipboard(_AbstractClipboardSink):
    def write(self, text: str) -> None:
        raise ClipboardWriteFailed("Failed to copy link to clipboard: denied")


class RecordingPresenter(_AbstractCandidatePresenter):
    def __init__(self):
        self.calls: list[tuple[str, list[MatchResult]]] = []

    def present(self, query, results):
        self.calls.append((query, list(results)))


def make_controller(active=None, documents=None, store=None, clipboard=None):
    notifier = CollectingNotifier()
    controller = LinkController(
        store=store if store is not None else MemorySettingsStore(),
        documents=FakeDocumentSource(active=active, documents=documents or []),
        notifier=notifier,
        clipboard=clipboard if clipboard is not None else MemoryClipboard(),
    )
    return controller, notifier


NOTE = FakeActiveDocument("folder/note.md", "note", "# Intro\ntext\ncursor-here", 2)
VAULT = [
    FakeDocument("x/y.md", "## Setup Steps\nbody"),
    FakeDocument("a.md", "# Alpha\n## Setup again"),
]


# Settings


def test_settings_loaded_and_merged_over_default():
    controller, _ = make_controller(store=MemorySettingsStore({"other": 1}))
    assert controller.link_format == DEFAULT_LINK_FORMAT
    assert controller.settings.to_stored() == {"linkFormat": DEFAULT_LINK_FORMAT, "other": 1}


def test_set_link_format_persists_every_change():
    store = MemorySettingsStore()
    controller, _ = make_controller(store=store)
    controller.set_link_format("${headingText}")
    controller.set_link_format("${fileBasename}")
    assert store.save_calls == 2
    assert store.data == {"linkFormat": "${fileBasename}"}


def test_failed_save_leaves_format_unchanged():
    store = FailingSettingsStore({"linkFormat": "${headingText}", "other": 1})
    controller, notifier = make_controller(active=NOTE, store=store)
    assert controller.set_link_format("${fileBasename}") is False
    assert controller.link_format == "${headingText}"
    assert notifier.messages == ["Failed to save settings: Failed to save settings to /ro/settings.json: read-only"]
    assert controller.copy_link() == "[[Intro]]"


# Copy flow


def test_copy_link_full_scenario():
    clipboard = MemoryClipboard()
    controller, notifier = make_controller(active=NOTE, clipboard=clipboard)
    assert controller.copy_link() == "[[folder/note#Intro|Intro]]"
    assert clipboard.content == "[[folder/note#Intro|Intro]]"
    assert notifier.messages == [COPY_SUCCESS_MESSAGE]


def test_copy_link_uses_current_format():
    clipboard = MemoryClipboard()
    controller, _ = make_controller(active=NOTE, clipboard=clipboard)
    controller.set_link_format("${fileBasename}#${headingText}")
    assert controller.copy_link() == "[[note#Intro]]"


def test_copy_link_no_heading():
    clipboard = MemoryClipboard()
    doc = FakeActiveDocument("a.md", "a", "no headings", 0)
    controller, notifier = make_controller(active=doc, clipboard=clipboard)
    assert controller.copy_link() is None
    assert clipboard.content is None
    assert notifier.messages == ["No heading found above the current cursor position."]


def test_copy_link_no_file():
    clipboard = MemoryClipboard()
    doc = FakeActiveDocument(None, "", "# H", 0)
    controller, notifier = make_controller(active=doc, clipboard=clipboard)
    assert controller.copy_link() is None
    assert clipboard.content is None
    assert notifier.messages == ["No file is associated with the current view."]


def test_copy_link_no_active_document():
    controller, notifier = make_controller(active=None)
    assert controller.copy_link() is None
    assert notifier.messages == ["No file is associated with the current view."]


def test_copy_link_clipboard_failure_is_contained():
    controller, notifier = make_controller(active=NOTE, clipboard=FailingClipboard())
    assert controller.copy_link() is None
    assert notifier.messages == ["Failed to copy link to clipboard: denied"]


def test_compose_link_without_clipboard():
    controller, notifier = make_controller(active=NOTE)
    assert controller.compose_link() == "[[folder/note#Intro|Intro]]"
    assert notifier.messages == []


# Search flow


def test_start_search_empty_selection_does_not_open():
    controller, notifier = make_controller(documents=VAULT)
    presenter = RecordingPresenter()
    assert controller.start_search(FakeEditor(""), presenter) is None
    assert notifier.messages == ["Select some text to search headings."]
    assert presenter.calls == []
    assert controller.documents.list_calls == 0


def test_start_search_shows_initial_results():
    controller, _ = make_controller(documents=VAULT)
    presenter = RecordingPresenter()
    session = controller.start_search(FakeEditor("SETUP"), presenter)
    assert session is not None
    assert session.query == "setup"
    assert session.results == [
        MatchResult(path="x/y.md", heading_text="Setup Steps"),
        MatchResult(path="a.md", heading_text="Setup again"),
    ]
    assert presenter.calls == [("setup", session.results)]


def test_set_query_replaces_results_each_time():
    controller, _ = make_controller(documents=VAULT)
    presenter = RecordingPresenter()
    session = controller.start_search(FakeEditor("setup"), presenter)
    session.set_query("Alpha")
    assert session.results == [MatchResult(path="a.md", heading_text="Alpha")]
    session.set_query("")
    assert len(session.results) == 3
    assert [call[0] for call in presenter.calls] == ["setup", "alpha", ""]


def test_select_inserts_link_and_closes():
    controller, notifier = make_controller(documents=VAULT)
    editor = FakeEditor("setup")
    session = controller.start_search(editor)
    link = session.select(session.results[0])
    assert link == "[[x/y#Setup Steps|Setup Steps]]"
    assert editor.replacements == ["[[x/y#Setup Steps|Setup Steps]]"]
    assert session.closed
    assert notifier.messages == ["Inserted link [[x/y#Setup Steps|Setup Steps]]"]


def test_select_reads_live_link_format():
    controller, _ = make_controller(documents=VAULT)
    editor = FakeEditor("setup")
    session = controller.start_search(editor)
    controller.set_link_format("${fileBasename}")
    assert session.select(session.results[1]) == "[[a]]"


def test_select_incomplete_match_keeps_session_open():
    controller, notifier = make_controller(documents=VAULT)
    editor = FakeEditor("setup")
    session = controller.start_search(editor)
    assert session.select(MatchResult(path=None, heading_text="x")) is None
    assert editor.replacements == []
    assert not session.closed
    assert notifier.messages == ["Selected match is missing a path or heading."]


def test_select_after_close_is_ignored():
    controller, _ = make_controller(documents=VAULT)
    editor = FakeEditor("setup")
    session = controller.start_search(editor)
    session.select(session.results[0])
    assert session.select(session.results[1]) is None
    assert len(editor.replacements) == 1


@pytest.mark.parametrize("query", ["", "zzz"])
def test_presenter_is_optional(query):
    controller, _ = make_controller(documents=VAULT)
    session = controller.start_search(FakeEditor("x"))
    session.set_query(query)
    assert session.query == query
