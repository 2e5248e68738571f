"""Markdown extension stripping (UNO: single function)."""

MARKDOWN_EXTENSION = ".md"


def strip_markdown_extension(path: str) -> str:
    """Remove one trailing ``.md`` from ``path`` if present."""
    if path.endswith(MARKDOWN_EXTENSION):
        return path[: -len(MARKDOWN_EXTENSION)]
    return path
