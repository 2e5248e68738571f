"""Unit tests for heading extraction."""

from headlink.api.heading.extract_headings import extract_headings
from headlink.api.heading.Heading import Heading
from headlink.api.heading.parse_heading_line import parse_heading_line


def test_indented_heading_with_trailing_space():
    headings = list(extract_headings("   ## Title  "))
    assert len(headings) == 1
    assert headings[0].level == 2
    assert headings[0].text == "Title"
    assert headings[0].line == "## Title"


def test_heading_without_space_after_markers():
    assert parse_heading_line("###NoSpace") == (3, "NoSpace")


def test_non_heading_lines_ignored():
    assert parse_heading_line("plain text") is None
    assert parse_heading_line("") is None
    assert parse_heading_line("text # not a heading") is None


def test_bare_marker_has_empty_text():
    assert parse_heading_line("  ##  ") == (2, "")


def test_text_keeps_inner_hashes():
    assert parse_heading_line("# C# and F#") == (1, "C# and F#")


def test_extract_records_source_and_line_numbers():
    text = "# A\ntext\n## B\nmore"
    headings = list(extract_headings(text, source_path="n.md"))
    assert headings == [
        Heading(source_path="n.md", level=1, text="A", line_number=0, line="# A"),
        Heading(source_path="n.md", level=2, text="B", line_number=2, line="## B"),
    ]


def test_extract_up_to_line_is_inclusive():
    text = "# A\ntext\n## B\nmore\n### C"
    assert [h.text for h in extract_headings(text, up_to_line=2)] == ["A", "B"]
    assert [h.text for h in extract_headings(text, up_to_line=1)] == ["A"]
    assert [h.text for h in extract_headings(text, up_to_line=0)] == ["A"]


def test_extract_is_restartable():
    text = "# A\n## B"
    first = list(extract_headings(text))
    second = list(extract_headings(text))
    assert first == second


def test_extract_handles_crlf():
    assert [h.text for h in extract_headings("# A\r\nbody\r\n## B\r\n")] == ["A", "B"]


def test_form_feed_stays_inside_heading_text():
    assert [h.text for h in extract_headings("# Title\x0cpart\n")] == ["Title\x0cpart"]


def test_line_numbers_count_newlines_only():
    headings = list(extract_headings("intro\u2028still intro\n# A\n"))
    assert [(h.text, h.line_number) for h in headings] == [("A", 1)]
