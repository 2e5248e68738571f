"""Heading search filter (UNO: single function)."""

from collections.abc import Iterable
from typing import Protocol

from .extract_headings import extract_headings
from .MatchResult import MatchResult


class _Readable(Protocol):
    path: str

    def read_text(self) -> str: ...


def search_headings(documents: Iterable[_Readable], query: str) -> list[MatchResult]:
    """Filter the headings of a document collection by substring.

    Matching is case-insensitive and runs against the full heading line
    (``#`` markers included). An empty query matches every heading. Results
    keep document enumeration order, then in-document order.

    Args:
        documents: Documents exposing ``path`` and ``read_text()``
        query: Free-text query

    Returns:
        One MatchResult per matching heading
    """
    needle = query.lower()
    results: list[MatchResult] = []
    for document in documents:
        for heading in extract_headings(document.read_text(), source_path=document.path):
            if needle in heading.line.lower():
                results.append(MatchResult(path=document.path, heading_text=heading.text))
    return results
