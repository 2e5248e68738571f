"""Heading search command.

CLI: headlink heading search <query> [--vault DIR]
"""

from collections.abc import Iterator

from ..StageResult import StageResult


def cmd_search(query: str, vault: str = "") -> StageResult:
    """Search vault headings and render a link for each match.

    Args:
        query: Substring to look for (case-insensitive); empty matches everything
        vault: Vault directory, working directory if empty
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.JsonSettingsStore import JsonSettingsStore
        from ..config.Settings import Settings
        from ..host.resolve_vault_path import resolve_vault_path
        from ..host.VaultDocumentSource import VaultDocumentSource
        from ..link.compose_from_match import compose_from_match
        from .search_headings import search_headings

        needle = query.lower()
        yield (0.1, "Loading settings...")
        try:
            settings = Settings.from_stored(JsonSettingsStore().load())
            vault_path = resolve_vault_path(vault)
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Heading search failed: {e}"
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "query": needle,
                "vault": vault,
                "matches": [],
                "count": 0,
            }
            result_obj.success = False
            return

        yield (0.4, "Scanning vault headings...")
        matches = search_headings(VaultDocumentSource(vault_path).list_documents(), needle)

        yield (0.8, "Rendering links...")
        entries = [
            {
                "path": match.path,
                "heading_text": match.heading_text,
                "link": compose_from_match(match, settings.link_format) if match.is_complete else "",
            }
            for match in matches
        ]

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(entries)} heading(s) matching '{needle}'"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "query": needle,
            "vault": str(vault_path),
            "matches": entries,
            "count": len(entries),
        }
        result_obj.success = True

    return StageResult(announce=f"Searching headings for '{query}'...", progress_callback=do_work)
