"""Placeholder discovery (UNO: single function)."""

from ._constants import PLACEHOLDERS


def find_placeholders(template: str) -> list[str]:
    """Return the placeholder tokens ``template`` uses, in vocabulary order."""
    return [token for token in PLACEHOLDERS if token in template]
