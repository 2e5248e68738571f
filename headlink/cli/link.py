"""Link Typer app factory."""

from pathlib import Path

import typer

from headlink.api.link.cmd_copy import cmd_copy
from headlink.api.link.cmd_insert import cmd_insert
from headlink.cli._handle_stage_result import handle_stage_result

PICK_PROMPT = "Query, match number, or empty to cancel"


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Wiki link creation",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="copy")
    def copy_cmd(
        path: str = typer.Argument(..., help="Markdown file holding the cursor"),
        line: int = typer.Option(..., "--line", "-l", help="0-based cursor line"),
        vault: str = typer.Option("", "--vault", help="Vault directory (default: working directory)"),
        no_clipboard: bool = typer.Option(False, "--no-clipboard", help="Only print the link"),
    ) -> None:
        """Copy a link to the heading above the cursor."""
        handle_stage_result(cmd_copy)(path, line, vault=vault, clipboard=not no_clipboard)

    @app.command(name="insert")
    def insert_cmd(
        path: str = typer.Argument(..., help="Markdown file holding the selection"),
        selection: str = typer.Option(..., "--selection", "-s", help="Selected text, used as the query"),
        vault: str = typer.Option("", "--vault", help="Vault directory (default: working directory)"),
        pick: int = typer.Option(0, "--pick", "-p", help="0-based match to insert"),
    ) -> None:
        """Replace the selection with a link to a matching heading."""
        handle_stage_result(cmd_insert)(path, selection, vault=vault, pick=pick)

    @app.command(name="pick")
    def pick_cmd(
        path: str = typer.Argument(..., help="Markdown file holding the selection"),
        selection: str = typer.Option(..., "--selection", "-s", help="Selected text, used as the first query"),
        vault: str = typer.Option("", "--vault", help="Vault directory (default: working directory)"),
    ) -> None:
        """Refine the heading search interactively, then insert the chosen link.

        Typing text re-runs the search; typing a number inserts that match.
        Prefix a query with '/' to search for digits.
        """
        _run_picker(Path(path).expanduser(), selection, vault)

    return app


def _run_picker(path: Path, selection: str, vault: str) -> None:
    from headlink.api.config.JsonSettingsStore import JsonSettingsStore
    from headlink.api.host.CollectingNotifier import CollectingNotifier
    from headlink.api.host.FileSelectionEditor import FileSelectionEditor
    from headlink.api.host.resolve_vault_path import resolve_vault_path
    from headlink.api.host.VaultDocumentSource import VaultDocumentSource
    from headlink.api.session.LinkController import LinkController
    from headlink.cli._TerminalCandidatePresenter import _TerminalCandidatePresenter
    from headlink.cli.display.CLIDisplay import CLIDisplay

    display = CLIDisplay()
    notifier = CollectingNotifier(display=display)
    try:
        controller = LinkController(
            store=JsonSettingsStore(),
            documents=VaultDocumentSource(resolve_vault_path(vault)),
            notifier=notifier,
        )
        session = controller.start_search(
            FileSelectionEditor(path, selection),
            presenter=_TerminalCandidatePresenter(display.stderr_console),
        )
    except (ValueError, OSError) as e:
        display.error(str(e))
        raise typer.Exit(1) from e
    if session is None:
        raise typer.Exit(1)

    while not session.closed:
        answer = typer.prompt(PICK_PROMPT, default="", show_default=False, err=True)
        if answer == "":
            display.warning("Cancelled")
            raise typer.Exit(1)
        if answer.isdigit():
            index = int(answer)
            if index >= len(session.results):
                display.error(f"No match #{index}")
                continue
            session.select(session.results[index])
            continue
        session.set_query(answer[1:] if answer.startswith("/") else answer)

    typer.echo(notifier.messages[-1])
