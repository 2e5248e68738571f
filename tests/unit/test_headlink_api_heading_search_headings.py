"""Unit tests for heading search."""

from dataclasses import dataclass

from headlink.api.heading.MatchResult import MatchResult
from headlink.api.heading.search_headings import search_headings


@dataclass
class Doc:
    path: str
    content: str

    def read_text(self) -> str:
        return self.content


DOCS = [
    Doc("a.md", "# Introduction\ntext\n## Usage\n"),
    Doc("b/c.md", "no headings here"),
    Doc("x/y.md", "## Setup Steps\n### Intro to setup\n"),
]


def test_empty_query_returns_everything_in_order():
    assert search_headings(DOCS, "") == [
        MatchResult(path="a.md", heading_text="Introduction"),
        MatchResult(path="a.md", heading_text="Usage"),
        MatchResult(path="x/y.md", heading_text="Setup Steps"),
        MatchResult(path="x/y.md", heading_text="Intro to setup"),
    ]


def test_case_insensitive_substring():
    assert search_headings(DOCS, "intro") == [
        MatchResult(path="a.md", heading_text="Introduction"),
        MatchResult(path="x/y.md", heading_text="Intro to setup"),
    ]


def test_upper_case_query_is_lowered():
    assert search_headings(DOCS, "SETUP") == [
        MatchResult(path="x/y.md", heading_text="Setup Steps"),
        MatchResult(path="x/y.md", heading_text="Intro to setup"),
    ]


def test_query_matches_against_full_heading_line():
    results = search_headings(DOCS, "### ")
    assert results == [MatchResult(path="x/y.md", heading_text="Intro to setup")]


def test_no_match():
    assert search_headings(DOCS, "nothing like this") == []


def test_no_documents():
    assert search_headings([], "") == []


def test_accepts_a_generator():
    assert len(search_headings((d for d in DOCS), "")) == 4


def test_match_completeness():
    assert MatchResult(path="a.md", heading_text="A").is_complete
    assert not MatchResult(path=None, heading_text="A").is_complete
    assert not MatchResult(path="a.md", heading_text=None).is_complete
    assert not MatchResult(path="", heading_text="A").is_complete
