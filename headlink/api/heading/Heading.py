"""Heading model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Heading:
    """A heading line found in a markdown document.

    ``text`` has the leading ``#`` run and surrounding whitespace removed.
    ``line`` is the full stripped heading line, markers included.
    """

    source_path: str
    level: int
    text: str
    line_number: int
    line: str
