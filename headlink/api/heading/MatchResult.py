"""MatchResult model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchResult:
    """A heading that matched a search query, paired with its document path.

    Both fields are optional so a result coming back from a UI layer can be
    checked for completeness before a link is composed from it.
    """

    path: str | None
    heading_text: str | None

    @property
    def is_complete(self) -> bool:
        return bool(self.path) and bool(self.heading_text)
