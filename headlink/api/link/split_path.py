"""Path decomposition (UNO: single function)."""

from .PathParts import PathParts
from .strip_markdown_extension import strip_markdown_extension


def split_path(path: str, strip_extension: bool = False) -> PathParts:
    """Split a slash-delimited path into directory and basename.

    With ``strip_extension`` the basename comes from the path with its
    trailing ``.md`` removed, while the directory is still taken from the
    path as given.

    Args:
        path: Vault-relative path using ``/`` separators
        strip_extension: Drop a trailing ``.md`` from the basename

    Returns:
        PathParts for the path
    """
    dir_end = path.rfind("/")
    file_dir = path[:dir_end] if dir_end >= 0 else ""

    base_source = strip_markdown_extension(path) if strip_extension else path
    return PathParts(dir=file_dir, basename=base_source[base_source.rfind("/") + 1 :])
