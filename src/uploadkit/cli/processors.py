"""
uploadkit processors - Inspect uploader pipelines.

Shows the declared processing steps of an uploader class and checks them
against the class without running anything.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from uploadkit.exceptions import UploadKitError

app = typer.Typer(name="processors", help="Inspect uploader processing pipelines")

console = Console()


def _load(target: str, project_dir: Path, env: str | None, use_config: bool) -> type:
    """Load the uploader and, when a config file exists, apply its processors."""
    from uploadkit.config.loader import DEFAULT_CONFIG_FILENAME, load_config
    from uploadkit.config.pipelines import apply_processor_config
    from uploadkit.utils.discovery import load_uploader

    try:
        uploader_cls = load_uploader(target, base_dir=project_dir)
        if use_config and (project_dir / DEFAULT_CONFIG_FILENAME).exists():
            apply_processor_config(uploader_cls, load_config(project_dir, env=env))
    except UploadKitError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}", soft_wrap=True)
        raise typer.Exit(1) from None
    return uploader_cls


@app.command("show")
def show(
    target: str = typer.Argument(..., help="Uploader as 'module:ClassName' or 'file.py:ClassName'"),
    env: str | None = typer.Option(None, help="Environment"),
    project_dir: Path = typer.Option(Path.cwd(), "--project-dir", "-d", help="Project directory"),
    use_config: bool = typer.Option(True, "--config/--no-config", help="Apply processors from uploadkit.yaml"),
) -> None:
    """
    Display the processing pipeline of an uploader.
    """
    from uploadkit.processing.registry import processors

    uploader_cls = _load(target, project_dir, env, use_config)
    steps = processors(uploader_cls)

    if not steps:
        console.print(f"[dim]{uploader_cls.__name__} declares no processors[/dim]")
        return

    table = Table(title=f"{uploader_cls.__name__} processors ({len(steps)})", show_header=True)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Operation", style="cyan")
    table.add_column("Arguments", style="green")

    for position, (operation, arguments) in enumerate(steps):
        args_str = ", ".join(repr(a) for a in arguments) if arguments else "-"
        table.add_row(str(position), str(operation), args_str)

    console.print(table)


@app.command("check")
def check(
    target: str = typer.Argument(..., help="Uploader as 'module:ClassName' or 'file.py:ClassName'"),
    env: str | None = typer.Option(None, help="Environment"),
    project_dir: Path = typer.Option(Path.cwd(), "--project-dir", "-d", help="Project directory"),
    use_config: bool = typer.Option(True, "--config/--no-config", help="Apply processors from uploadkit.yaml"),
) -> None:
    """
    Check that every declared processor exists and accepts its arguments.
    """
    from uploadkit.processing.checks import check_processors

    uploader_cls = _load(target, project_dir, env, use_config)
    issues = check_processors(uploader_cls)

    if not issues:
        console.print(f"[green]OK[/green] {uploader_cls.__name__} pipeline looks runnable")
        return

    console.print(f"[red]{len(issues)} problem(s) in {uploader_cls.__name__} pipeline:[/red]")
    for issue in issues:
        console.print(f"  {escape(str(issue))}", soft_wrap=True)
    raise typer.Exit(1)
