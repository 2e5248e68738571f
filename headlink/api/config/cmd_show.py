"""Show settings command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from ..template._constants import PLACEHOLDERS
from .JsonSettingsStore import JsonSettingsStore
from .Settings import Settings


def cmd_show() -> StageResult:
    """Show the effective settings and the placeholder vocabulary."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        store = JsonSettingsStore()
        yield (0.3, "Loading settings...")
        try:
            settings = Settings.from_stored(store.load())
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to load settings: {e}"
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "settings": {},
                "placeholders": list(PLACEHOLDERS),
                "settings_path": str(store.path),
            }
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Link format: {settings.link_format}"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "settings": settings.to_stored(),
            "placeholders": list(PLACEHOLDERS),
            "settings_path": str(store.path),
        }
        result_obj.success = True

    return StageResult(announce="Showing settings...", progress_callback=do_work)
