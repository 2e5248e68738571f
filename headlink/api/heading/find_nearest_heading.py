"""Nearest preceding heading lookup (UNO: single function)."""

from .parse_heading_line import parse_heading_line


def find_nearest_heading(text: str, cursor_line: int) -> str | None:
    """Find the closest heading at or above ``cursor_line``.

    Lines are scanned upward from the cursor to line 0. A cursor sitting on a
    heading line returns that heading. A cursor past the end of the document
    is clamped to the last line.

    Args:
        text: Markdown content
        cursor_line: 0-based line index of the cursor

    Returns:
        Heading text, or None if no heading exists at or above the cursor
    """
    lines = text.split("\n")
    start = min(cursor_line, len(lines) - 1)
    for line_num in range(start, -1, -1):
        parsed = parse_heading_line(lines[line_num])
        if parsed is not None:
            return parsed[1]
    return None
