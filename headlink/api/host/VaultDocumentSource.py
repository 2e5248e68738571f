"""Document source over a vault directory."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ._AbstractDocumentSource import _AbstractDocumentSource
from .FileActiveDocument import FileActiveDocument
from .VaultDocument import VaultDocument


class VaultDocumentSource(_AbstractDocumentSource):
    """Serve the markdown files under ``vault_path``.

    Files are enumerated recursively in sorted path order. Anything inside a
    dot-directory (``.obsidian``, ``.git``, ...) is skipped.
    """

    def __init__(self, vault_path: Path, active_file: Path | None = None, cursor_line: int = 0):
        from headlink.utils.normalize_path import normalize_path

        self._vault_path = normalize_path(vault_path)
        self._active_file = normalize_path(active_file)
        self._cursor_line = cursor_line

    @property
    def vault_path(self) -> Path:
        return self._vault_path

    def get_active_document(self) -> FileActiveDocument | None:
        if self._active_file is None or self._active_file.suffix != ".md":
            return None
        return FileActiveDocument(self._active_file, self._vault_path, self._cursor_line)

    def iter_markdown_files(self) -> Iterator[Path]:
        """Iterate all markdown files in the vault (excludes dot-directories)."""
        for md in sorted(self._vault_path.rglob("*.md")):
            if not md.is_file():
                continue
            rel_parts = md.relative_to(self._vault_path).parts
            if any(part.startswith(".") for part in rel_parts[:-1]):
                continue
            yield md

    def list_documents(self) -> Iterator[VaultDocument]:
        for md in self.iter_markdown_files():
            yield VaultDocument(path=md.relative_to(self._vault_path).as_posix(), file=md)
