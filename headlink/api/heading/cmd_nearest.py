"""Nearest heading command.

CLI: headlink heading nearest <path> --line N
"""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from .find_nearest_heading import find_nearest_heading


def cmd_nearest(path: str, line: int) -> StageResult:
    """Find the heading at or above a line.

    Args:
        path: File to scan
        line: 0-based cursor line
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Reading file...")
        try:
            text = Path(path).expanduser().read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Cannot read {path}: {e}"
            result_obj.output = {"errors": [str(e)], "warnings": [], "path": path, "line": line, "heading_text": None}
            result_obj.success = False
            return

        yield (0.7, "Scanning upward for a heading...")
        heading_text = find_nearest_heading(text, line)

        yield (1.0, "Complete")
        if heading_text is None:
            result_obj.result = f"No heading at or above line {line}"
            result_obj.output = {
                "errors": ["No heading found above the current cursor position."],
                "warnings": [],
                "path": path,
                "line": line,
                "heading_text": None,
            }
            result_obj.success = False
            return
        result_obj.result = f"Nearest heading: {heading_text}"
        result_obj.output = {"errors": [], "warnings": [], "path": path, "line": line, "heading_text": heading_text}
        result_obj.success = True

    return StageResult(announce=f"Finding heading above line {line} of {path}...", progress_callback=do_work)
