"""Link template engine and placeholder vocabulary."""

from ._constants import (
    DEFAULT_LINK_FORMAT,
    LEGACY_FILE_DIR_TOKEN,
    PLACEHOLDER_FILE_BASENAME,
    PLACEHOLDER_FILE_DIR,
    PLACEHOLDER_HEADING_TEXT,
    PLACEHOLDERS,
)
from .find_placeholders import find_placeholders
from .LinkValues import LinkValues
from .migrate_legacy_template import migrate_legacy_template
from .render_link_template import render_link_template

__all__ = [
    "DEFAULT_LINK_FORMAT",
    "LEGACY_FILE_DIR_TOKEN",
    "PLACEHOLDERS",
    "PLACEHOLDER_FILE_BASENAME",
    "PLACEHOLDER_FILE_DIR",
    "PLACEHOLDER_HEADING_TEXT",
    "LinkValues",
    "find_placeholders",
    "migrate_legacy_template",
    "render_link_template",
]
