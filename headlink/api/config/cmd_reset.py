"""Reset the link format command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from ..template._constants import DEFAULT_LINK_FORMAT
from .JsonSettingsStore import JsonSettingsStore
from .Settings import Settings


def cmd_reset() -> StageResult:
    """Restore the default link format."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        store = JsonSettingsStore()
        yield (0.3, "Loading settings...")
        try:
            try:
                settings = Settings.from_stored(store.load())
            except ValueError:
                # Unreadable settings are replaced outright
                settings = Settings()
            settings.link_format = DEFAULT_LINK_FORMAT
            yield (0.7, "Saving settings...")
            store.save(settings.to_stored())
        except RuntimeError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to reset settings: {e}"
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "link_format": DEFAULT_LINK_FORMAT,
                "settings_path": str(store.path),
            }
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = "Link format reset to default"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "link_format": settings.link_format,
            "settings_path": str(store.path),
        }
        result_obj.success = True

    return StageResult(announce="Resetting link format...", progress_callback=do_work)
