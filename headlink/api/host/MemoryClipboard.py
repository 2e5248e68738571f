"""In-process clipboard."""

from ._AbstractClipboardSink import _AbstractClipboardSink


class MemoryClipboard(_AbstractClipboardSink):
    """Keeps the last written text in ``content``."""

    def __init__(self):
        self.content: str | None = None

    def write(self, text: str) -> None:
        self.content = text
