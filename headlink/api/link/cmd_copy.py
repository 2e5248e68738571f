"""Copy link command.

CLI: headlink link copy <path> --line N [--vault DIR] [--no-clipboard]
"""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult


def cmd_copy(path: str, line: int, vault: str = "", clipboard: bool = True) -> StageResult:
    """Compose a link to the heading above ``line`` and copy it to the clipboard.

    Args:
        path: Markdown file holding the cursor
        line: 0-based cursor line
        vault: Vault directory, working directory if empty
        clipboard: Write the link to the system clipboard
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.JsonSettingsStore import JsonSettingsStore
        from ..host.CollectingNotifier import CollectingNotifier
        from ..host.resolve_vault_path import resolve_vault_path
        from ..host.SystemClipboard import SystemClipboard
        from ..host.VaultDocumentSource import VaultDocumentSource
        from ..session.LinkController import LinkController

        notifier = CollectingNotifier()

        def fail(message: str) -> None:
            result_obj.result = f"Copy link failed: {message}"
            result_obj.output = {
                "errors": [message],
                "warnings": [],
                "path": path,
                "line": line,
                "link": None,
                "copied": False,
                "notices": notifier.messages,
            }
            result_obj.success = False

        yield (0.1, "Loading settings...")
        try:
            vault_path = resolve_vault_path(vault)
            documents = VaultDocumentSource(vault_path, active_file=Path(path), cursor_line=line)
            controller = LinkController(
                store=JsonSettingsStore(),
                documents=documents,
                notifier=notifier,
                clipboard=SystemClipboard() if clipboard else None,
            )
        except ValueError as e:
            yield (1.0, "Complete")
            fail(str(e))
            return

        yield (0.4, "Resolving nearest heading...")
        try:
            link = controller.copy_link() if clipboard else controller.compose_link()
        except (OSError, UnicodeDecodeError) as e:
            yield (1.0, "Complete")
            fail(f"Cannot read {path}: {e}")
            return

        yield (1.0, "Complete")
        if link is None:
            fail(notifier.messages[-1] if notifier.messages else "No link composed")
            return

        result_obj.result = f"Copied {link}" if clipboard else f"Composed {link}"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "path": path,
            "line": line,
            "link": link,
            "copied": clipboard,
            "notices": notifier.messages,
        }
        result_obj.success = True

    return StageResult(announce=f"Copying link for line {line} of {path}...", progress_callback=do_work)
