"""Heading extraction, nearest-heading lookup and heading search."""

from .extract_headings import extract_headings
from .find_nearest_heading import find_nearest_heading
from .Heading import Heading
from .MatchResult import MatchResult
from .parse_heading_line import parse_heading_line
from .search_headings import search_headings

__all__ = [
    "Heading",
    "MatchResult",
    "extract_headings",
    "find_nearest_heading",
    "parse_heading_line",
    "search_headings",
]
