"""Unit tests for nearest heading lookup."""

import pytest

from headlink.api.heading.find_nearest_heading import find_nearest_heading

DOC = "# A\ntext\n## B\nmore"


def test_cursor_below_heading():
    assert find_nearest_heading(DOC, 3) == "B"


def test_cursor_on_first_line():
    assert find_nearest_heading(DOC, 0) == "A"


def test_cursor_on_heading_line_is_inclusive():
    assert find_nearest_heading(DOC, 2) == "B"


def test_cursor_between_headings():
    assert find_nearest_heading(DOC, 1) == "A"


@pytest.mark.parametrize("cursor", [0, 1, 2, 10])
def test_no_heading_anywhere(cursor):
    assert find_nearest_heading("alpha\nbeta\ngamma", cursor) is None


def test_text_above_first_heading():
    assert find_nearest_heading("intro\n# A\nbody", 0) is None


def test_cursor_past_end_is_clamped():
    assert find_nearest_heading(DOC, 99) == "B"


def test_negative_cursor_finds_nothing():
    assert find_nearest_heading(DOC, -1) is None


def test_empty_document():
    assert find_nearest_heading("", 0) is None


def test_bare_marker_stops_the_scan():
    assert find_nearest_heading("# A\n#\nbody", 2) == ""


@pytest.mark.parametrize("separator", ["\u2028", "\x0c", "\x85", "\x1e"])
def test_only_newline_breaks_lines(separator):
    text = f"# A\nnote{separator}# B\ntext"
    assert find_nearest_heading(text, 2) == "A"


def test_crlf_lines_keep_their_numbering():
    assert find_nearest_heading("# A\r\nbody\r\n## B\r\nmore", 1) == "A"
