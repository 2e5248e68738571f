"""VaultDocument model (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path

from headlink.utils.logger import get_logger

logger = get_logger("host")


@dataclass(frozen=True)
class VaultDocument:
    """A markdown file in the vault.

    ``path`` is vault-relative with ``/`` separators; ``file`` is where the
    content lives on disk.
    """

    path: str
    file: Path

    def read_text(self) -> str:
        """Read the document; unreadable files are logged and read as empty."""
        try:
            return self.file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read %s: %s", self.file, exc)
            return ""
