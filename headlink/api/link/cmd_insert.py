"""Insert link command.

CLI: headlink link insert <path> --selection TEXT [--vault DIR] [--pick N]
"""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult


def cmd_insert(path: str, selection: str, vault: str = "", pick: int = 0) -> StageResult:
    """Search headings for the selected text and replace the selection with a link.

    The selection is the first occurrence of ``selection`` in ``path``. Its
    lower-cased text is the search query; match number ``pick`` is inserted.

    Args:
        path: Markdown file holding the selection
        selection: Selected text
        vault: Vault directory, working directory if empty
        pick: 0-based index of the match to insert
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.JsonSettingsStore import JsonSettingsStore
        from ..host.CollectingNotifier import CollectingNotifier
        from ..host.FileSelectionEditor import FileSelectionEditor
        from ..host.resolve_vault_path import resolve_vault_path
        from ..host.VaultDocumentSource import VaultDocumentSource
        from ..session.LinkController import LinkController

        notifier = CollectingNotifier()
        candidates = 0

        def fail(message: str) -> None:
            result_obj.result = f"Insert link failed: {message}"
            result_obj.output = {
                "errors": [message],
                "warnings": [],
                "path": path,
                "selection": selection,
                "candidates": candidates,
                "link": None,
                "notices": notifier.messages,
            }
            result_obj.success = False

        yield (0.1, "Loading settings...")
        try:
            vault_path = resolve_vault_path(vault)
            controller = LinkController(
                store=JsonSettingsStore(),
                documents=VaultDocumentSource(vault_path),
                notifier=notifier,
            )
        except ValueError as e:
            yield (1.0, "Complete")
            fail(str(e))
            return

        yield (0.3, "Searching headings...")
        try:
            session = controller.start_search(FileSelectionEditor(Path(path).expanduser(), selection))
        except (OSError, UnicodeDecodeError) as e:
            yield (1.0, "Complete")
            fail(f"Cannot read {path}: {e}")
            return
        if session is None:
            yield (1.0, "Complete")
            fail(notifier.messages[-1])
            return

        candidates = len(session.results)
        if not 0 <= pick < candidates:
            yield (1.0, "Complete")
            fail(f"No match #{pick} for '{session.query}' ({candidates} candidate(s))")
            return

        yield (0.7, "Inserting link...")
        try:
            link = session.select(session.results[pick])
        except (OSError, ValueError) as e:
            yield (1.0, "Complete")
            fail(str(e))
            return

        yield (1.0, "Complete")
        if link is None:
            fail(notifier.messages[-1] if notifier.messages else "No link inserted")
            return
        result_obj.result = f"Inserted {link} into {path}"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "path": path,
            "selection": selection,
            "candidates": candidates,
            "link": link,
            "notices": notifier.messages,
        }
        result_obj.success = True

    return StageResult(announce=f"Linking '{selection}' in {path}...", progress_callback=do_work)
