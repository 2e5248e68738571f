"""Config Typer app factory."""

import typer

from headlink.api.config.cmd_reset import cmd_reset
from headlink.api.config.cmd_set_format import cmd_set_format
from headlink.api.config.cmd_show import cmd_show
from headlink.cli._handle_stage_result import handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Link format settings",
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

    @app.command(name="show")
    def show_cmd() -> None:
        """Show the link format and available placeholders."""
        handle_stage_result(cmd_show)()

    @app.command(name="set-format")
    def set_format_cmd(
        link_format: str = typer.Argument(..., help="Template using ${fileDir}, ${fileBasename}, ${headingText}"),
    ) -> None:
        """Set the link format."""
        handle_stage_result(cmd_set_format)(link_format)

    @app.command(name="reset")
    def reset_cmd() -> None:
        """Restore the default link format."""
        handle_stage_result(cmd_reset)()

    return app
