"""Link composition: path decomposition, rendering and wrapping."""

from .compose_from_cursor import compose_from_cursor
from .compose_from_match import compose_from_match
from .LinkError import (
    ClipboardWriteFailed,
    EmptySelection,
    IncompleteMatchResult,
    LinkError,
    NoAssociatedFile,
    NoHeadingFound,
)
from .PathParts import PathParts
from .split_path import split_path
from .strip_markdown_extension import strip_markdown_extension
from .wrap_link import wrap_link

__all__ = [
    "ClipboardWriteFailed",
    "EmptySelection",
    "IncompleteMatchResult",
    "LinkError",
    "NoAssociatedFile",
    "NoHeadingFound",
    "PathParts",
    "compose_from_cursor",
    "compose_from_match",
    "split_path",
    "strip_markdown_extension",
    "wrap_link",
]
