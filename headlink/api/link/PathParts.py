"""PathParts model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PathParts:
    """A slash-delimited path split at its last separator.

    ``dir`` is empty when the path has no separator.
    """

    dir: str
    basename: str
