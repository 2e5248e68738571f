"""Link template renderer (UNO: single function)."""

from ._constants import PLACEHOLDERS
from .LinkValues import LinkValues


def render_link_template(template: str, values: LinkValues) -> str:
    """Substitute every placeholder token in ``template``.

    Each token is replaced globally and literally, one pass per token. A pass
    only ever splits template text: values are joined in afterwards, so a
    value containing a token-shaped substring is inserted verbatim. Tokens
    the template does not use are ignored.

    Args:
        template: Link format string, e.g. ``${fileDir}/${fileBasename}#${headingText}``
        values: Values for the three placeholders

    Returns:
        Rendered string, without the surrounding ``[[`` ``]]``
    """
    mapping = values.by_placeholder()

    def substitute(segment: str, tokens: tuple[str, ...]) -> str:
        if not tokens:
            return segment
        token, remaining = tokens[0], tokens[1:]
        return mapping[token].join(substitute(part, remaining) for part in segment.split(token))

    return substitute(template, PLACEHOLDERS)
