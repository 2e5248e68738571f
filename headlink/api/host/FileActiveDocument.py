"""Active document backed by a file on disk."""

from pathlib import Path

from ._AbstractActiveDocument import _AbstractActiveDocument


class FileActiveDocument(_AbstractActiveDocument):
    """A markdown file opened at a fixed cursor line."""

    def __init__(self, file: Path, vault_path: Path, cursor_line: int):
        self.file = file
        self.vault_path = vault_path
        self.cursor_line = cursor_line

    @property
    def path(self) -> str | None:
        try:
            return self.file.relative_to(self.vault_path).as_posix()
        except ValueError:
            # Outside the vault there is no linkable path
            return None

    @property
    def basename(self) -> str:
        return self.file.stem

    def get_text(self) -> str:
        return self.file.read_text(encoding="utf-8")

    def get_cursor_line(self) -> int:
        return self.cursor_line
