"""
Main CLI entry point.
"""

import typer

from uploadkit import __version__
from uploadkit.cli import processors


def version_callback(value: bool):
    """Callback to display version and exit."""
    if value:
        typer.echo(f"uploadkit version {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="uploadkit",
    help="uploadkit - declarative processing pipelines for file uploaders",
    add_completion=False,
)

app.add_typer(processors.app, name="processors")


@app.callback(invoke_without_command=True)
def entrypoint(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
):
    """
    uploadkit - declarative processing pipelines for file uploaders.

    Run 'uploadkit <command> --help' for help on a specific command.
    """
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def main():
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
