"""Editor sink that edits a selection inside a file."""

from pathlib import Path

from ._AbstractEditorSink import _AbstractEditorSink


class FileSelectionEditor(_AbstractEditorSink):
    """Treats the first occurrence of ``selection`` in ``file`` as the selection.

    An empty ``selection``, or one that does not occur in the file, means
    nothing is selected.
    """

    def __init__(self, file: Path, selection: str):
        self.file = file
        self.selection = selection

    def get_selection_text(self) -> str:
        if not self.selection:
            return ""
        if self.selection not in self.file.read_text(encoding="utf-8"):
            return ""
        return self.selection

    def replace_selection(self, text: str) -> None:
        content = self.file.read_text(encoding="utf-8")
        if not self.selection or self.selection not in content:
            raise ValueError(f"Selection not found in {self.file}")
        self.file.write_text(content.replace(self.selection, text, 1), encoding="utf-8")
        self.selection = text
