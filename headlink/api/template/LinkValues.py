"""LinkValues model (UNO: single model)."""

from dataclasses import dataclass

from ._constants import PLACEHOLDER_FILE_BASENAME, PLACEHOLDER_FILE_DIR, PLACEHOLDER_HEADING_TEXT


@dataclass(frozen=True)
class LinkValues:
    """Values substituted into a link template."""

    file_dir: str
    file_basename: str
    heading_text: str

    def by_placeholder(self) -> dict[str, str]:
        return {
            PLACEHOLDER_FILE_DIR: self.file_dir,
            PLACEHOLDER_FILE_BASENAME: self.file_basename,
            PLACEHOLDER_HEADING_TEXT: self.heading_text,
        }
