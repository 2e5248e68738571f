"""Heading line detection (UNO: single function)."""

import re

# Leading '#' run; a following space is not required
HEADING_PATTERN = re.compile(r"^(#+)\s*")


def parse_heading_line(line: str) -> tuple[int, str] | None:
    """Detect a heading in a single line.

    Args:
        line: Raw line of markdown text

    Returns:
        ``(level, text)`` if the stripped line starts with ``#``, otherwise None
    """
    stripped = line.strip()
    match = HEADING_PATTERN.match(stripped)
    if match is None:
        return None
    return len(match.group(1)), stripped[match.end() :].strip()
