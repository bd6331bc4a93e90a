"""CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console

from gitglance.errors import GitglanceError

if TYPE_CHECKING:
    from gitglance.app import App
    from gitglance.config import Config

app = typer.Typer(
    name="gitglance",
    help="Browse git working-tree status in the terminal.",
    no_args_is_help=False,
)
console = Console()


def _get_config() -> Config:
    """Lazy import and load config."""
    from gitglance.config import Config

    return Config.load()


def _open_app(path: Path | None, config: Config) -> App:
    """Lazy import and open the repository, exiting on error."""
    from gitglance.app import App

    try:
        return App.open(path, config)
    except GitglanceError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def _setup_logging(debug: bool) -> None:
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=debug)],
        force=True,
    )


def _view_console() -> Console:
    """Console for the interactive panel. stdout is reserved for the selected path."""
    return Console(stderr=True)


def _browse(path: Path | None) -> None:
    from gitglance.ui import StatusView

    cfg = _get_config()
    glance = _open_app(path, cfg)
    try:
        entry = StatusView(glance, cfg, console=_view_console()).show()
    except GitglanceError as e:
        # Refresh from inside the view can fail if the repo disappears
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    if entry is not None:
        console.print(entry.display_path, markup=False, highlight=False, soft_wrap=True)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    debug: Annotated[bool, typer.Option("--debug", help="Enable debug logging")] = False,
):
    """Launch the interactive status list if no command given."""
    _setup_logging(debug)
    if ctx.invoked_subcommand is None:
        _browse(None)


@app.command()
def browse(
    path: Annotated[Path | None, typer.Argument(help="Directory inside the repository")] = None,
):
    """Interactively browse the working-tree status. Prints the selected path on exit."""
    _browse(path)


@app.command(name="ls")
@app.command(name="list")
def list_status(
    path: Annotated[Path | None, typer.Argument(help="Directory inside the repository")] = None,
    codes: Annotated[bool, typer.Option("--codes", "-c", help="Show status codes")] = False,
):
    """Print status paths, one per line."""
    cfg = _get_config()
    glance = _open_app(path, cfg)
    for entry in glance.items:
        line = f"{entry.code} {entry.display_path}" if codes else entry.display_path
        console.print(line, markup=False, highlight=False, soft_wrap=True)


@app.command()
def config(
    key: Annotated[str | None, typer.Argument(help="Config key")] = None,
    value: Annotated[str | None, typer.Argument(help="New value")] = None,
):
    """Show or set configuration values."""
    from rich.markup import escape

    from gitglance.config import ConfigMeta

    cfg = _get_config()

    if key is None:
        for name, desc, enabled in cfg.get_toggles():
            mark = "[green]on[/green]" if enabled else "[dim]off[/dim]"
            console.print(f"[cyan]{name}[/cyan] = {mark}  [dim]{escape(desc)}[/dim]")
        for name, desc in ConfigMeta.SETTINGS.items():
            current = escape(repr(getattr(cfg, name)))
            console.print(f"[cyan]{name}[/cyan] = {current}  [dim]{escape(desc)}[/dim]")
        return

    try:
        if value is None:
            console.print(repr(cfg.get(key)), markup=False, highlight=False)
            return
        cfg.set(key, value)
    except GitglanceError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except ValueError:
        console.print(f"[red]Error:[/red] Invalid value for {key}: {value}")
        raise typer.Exit(1)
    console.print(f"[green]✓[/green] {key} = {cfg.get(key)!r}")
