"""Heading extractor (UNO: single function)."""

from collections.abc import Iterator

from .Heading import Heading
from .parse_heading_line import parse_heading_line


def extract_headings(text: str, source_path: str = "", up_to_line: int | None = None) -> Iterator[Heading]:
    """Extract heading lines from markdown text.

    Args:
        text: Markdown content
        source_path: Path of the document the text belongs to
        up_to_line: Last 0-based line index to consider (inclusive); None scans every line

    Yields:
        Heading objects in document order
    """
    for line_num, line in enumerate(text.split("\n")):
        if up_to_line is not None and line_num > up_to_line:
            return
        parsed = parse_heading_line(line)
        if parsed is None:
            continue
        level, heading_text = parsed
        yield Heading(
            source_path=source_path,
            level=level,
            text=heading_text,
            line_number=line_num,
            line=line.strip(),
        )
