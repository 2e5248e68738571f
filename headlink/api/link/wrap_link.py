"""Wiki link wrapping (UNO: single function)."""


def wrap_link(rendered: str) -> str:
    """Wrap a rendered link body in ``[[`` ``]]``."""
    return f"[[{rendered}]]"
