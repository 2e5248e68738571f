"""Copy-flow link composition (UNO: single function)."""

from ..heading.find_nearest_heading import find_nearest_heading
from ..template.LinkValues import LinkValues
from ..template.render_link_template import render_link_template
from .LinkError import NoAssociatedFile, NoHeadingFound
from .split_path import split_path
from .wrap_link import wrap_link


def compose_from_cursor(text: str, cursor_line: int, path: str | None, basename: str, template: str) -> str:
    """Build a wiki link to the heading governing ``cursor_line``.

    Args:
        text: Full document text
        cursor_line: 0-based cursor line
        path: Vault-relative document path, e.g. ``folder/note.md``
        basename: Document basename without extension, e.g. ``note``
        template: Link format string

    Returns:
        The ``[[...]]`` link

    Raises:
        NoHeadingFound: No non-empty heading at or above the cursor
        NoAssociatedFile: The document has no path
    """
    heading_text = find_nearest_heading(text, cursor_line)
    if not heading_text:
        raise NoHeadingFound()
    if not path:
        raise NoAssociatedFile()

    parts = split_path(path)
    values = LinkValues(file_dir=parts.dir, file_basename=basename, heading_text=heading_text)
    return wrap_link(render_link_template(template, values))
