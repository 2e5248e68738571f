"""Search-flow link composition (UNO: single function)."""

from ..heading.MatchResult import MatchResult
from ..template.LinkValues import LinkValues
from ..template.render_link_template import render_link_template
from .LinkError import IncompleteMatchResult
from .split_path import split_path
from .wrap_link import wrap_link


def compose_from_match(match: MatchResult, template: str) -> str:
    """Build a wiki link to a selected search match.

    The basename is taken from the path without its ``.md`` extension. The
    directory is taken from the path exactly as it appears in the match.

    Raises:
        IncompleteMatchResult: The match lacks a path or heading text
    """
    if not match.is_complete:
        raise IncompleteMatchResult()
    assert match.path is not None and match.heading_text is not None

    parts = split_path(match.path, strip_extension=True)
    values = LinkValues(file_dir=parts.dir, file_basename=parts.basename, heading_text=match.heading_text)
    return wrap_link(render_link_template(template, values))
