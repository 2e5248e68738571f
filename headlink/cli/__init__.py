"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from headlink.cli._create_app import _create_app
    from headlink.utils.logger import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from headlink import __version__

        print(f"headlink {__version__}")
        return 0

    configure_logging()
    app = _create_app()
    try:
        app(argv)
        return 0
    except SystemExit as e:
        # Click standalone mode and the stage runner both exit via sys.exit
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
