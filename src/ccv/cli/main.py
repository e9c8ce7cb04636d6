"""ccv command line entry point."""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from ccv import __version__
from ccv.cli.commands.next import run_next

app = typer.Typer(
    name="ccv",
    help="Print the next semantic version of a git repository from its conventional commits.",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"ccv version {__version__}")
        raise typer.Exit()


def verbose_callback(value: bool) -> None:
    """Send debug logging of the ccv package to stderr."""
    if value:
        handler = RichHandler(console=err_console, show_time=False, show_path=False)
        ccv_logger = logging.getLogger("ccv")
        ccv_logger.addHandler(handler)
        ccv_logger.setLevel(logging.DEBUG)


@app.command()
def main(
    path: Annotated[
        str | None,
        typer.Argument(help="Path to the repository (defaults to the current directory)"),
    ] = None,
    version_type: Annotated[
        bool,
        typer.Option("--type", "-t", help="Print the bump type (major, minor, patch) instead"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose", "-v", callback=verbose_callback, is_eager=True, help="Debug output"
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version and exit"
        ),
    ] = False,
) -> None:
    """Print the next version of the repository at PATH."""
    run_next(path, version_type, console, err_console)


if __name__ == "__main__":
    app()
