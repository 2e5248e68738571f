"""Set the link format command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from ..template.find_placeholders import find_placeholders
from .JsonSettingsStore import JsonSettingsStore
from .Settings import Settings


def cmd_set_format(link_format: str) -> StageResult:
    """Replace the link format and persist it.

    Args:
        link_format: New template, e.g. ``${fileBasename}#${headingText}``
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        store = JsonSettingsStore()
        yield (0.2, "Loading settings...")
        try:
            settings = Settings.from_stored(store.load())
            previous = settings.link_format
            settings.link_format = link_format
            yield (0.6, "Saving settings...")
            store.save(settings.to_stored())
        except (ValueError, RuntimeError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to set link format: {e}"
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "link_format": link_format,
                "previous": "",
                "placeholders": find_placeholders(link_format),
                "settings_path": str(store.path),
            }
            result_obj.success = False
            return

        placeholders = find_placeholders(settings.link_format)
        warnings: list[str] = []
        if not placeholders:
            warnings.append("Link format uses no placeholders; every link will be identical")

        yield (1.0, "Complete")
        result_obj.result = f"Link format set to {settings.link_format}"
        result_obj.output = {
            "errors": [],
            "warnings": warnings,
            "link_format": settings.link_format,
            "previous": previous,
            "placeholders": placeholders,
            "settings_path": str(store.path),
        }
        result_obj.success = True

    return StageResult(announce="Setting link format...", progress_callback=do_work)
