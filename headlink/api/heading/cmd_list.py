"""List headings command.

CLI: headlink heading list <path>
"""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from .extract_headings import extract_headings


def cmd_list(path: str) -> StageResult:
    """List every heading of a markdown file.

    Args:
        path: File to scan
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Reading file...")
        try:
            text = Path(path).expanduser().read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Cannot read {path}: {e}"
            result_obj.output = {"errors": [str(e)], "warnings": [], "path": path, "headings": [], "count": 0}
            result_obj.success = False
            return

        yield (0.6, "Extracting headings...")
        headings = [
            {"level": h.level, "text": h.text, "line_number": h.line_number}
            for h in extract_headings(text, source_path=path)
        ]

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(headings)} heading(s) in {path}"
        result_obj.output = {"errors": [], "warnings": [], "path": path, "headings": headings, "count": len(headings)}
        result_obj.success = True

    return StageResult(announce=f"Listing headings in {path}...", progress_callback=do_work)
