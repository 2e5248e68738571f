"""Heading Typer app factory."""

import typer

from headlink.api.heading.cmd_list import cmd_list
from headlink.api.heading.cmd_nearest import cmd_nearest
from headlink.api.heading.cmd_search import cmd_search
from headlink.cli._handle_stage_result import handle_stage_result


def heading() -> typer.Typer:
    """Create and configure the heading Typer app."""
    app = typer.Typer(
        name="heading",
        help="Heading lookup",
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

    @app.command(name="list")
    def list_cmd(path: str = typer.Argument(..., help="Markdown file")) -> None:
        """List the headings of a file."""
        handle_stage_result(cmd_list)(path)

    @app.command(name="nearest")
    def nearest_cmd(
        path: str = typer.Argument(..., help="Markdown file"),
        line: int = typer.Option(..., "--line", "-l", help="0-based cursor line"),
    ) -> None:
        """Find the heading at or above a line."""
        handle_stage_result(cmd_nearest)(path, line)

    @app.command(name="search")
    def search_cmd(
        query: str = typer.Argument("", help="Substring to match (case-insensitive)"),
        vault: str = typer.Option("", "--vault", help="Vault directory (default: working directory)"),
    ) -> None:
        """Search headings across the vault."""
        handle_stage_result(cmd_search)(query, vault=vault)

    return app
