"""Implementation of the 'next' command.

The next command prints the next version, or its bump type, of a
repository. It never modifies the repository.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from ccv.config import load_config
from ccv.core.resolver import resolve
from ccv.exceptions import CcvError
from ccv.vcs.git import GitRepository

if TYPE_CHECKING:
    from rich.console import Console


def run_next(
    path: str | None,
    version_type: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Run the next command.

    [tool.ccv] is read from the nearest pyproject.toml between the path
    and the repository root.

    Args:
        path: Optional path to the repository
        version_type: Print the bump type instead of the version
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = Path(path) if path else Path.cwd()

    try:
        with GitRepository(project_path) as repo:
            config = load_config(project_path, stop=repo.path)
        resolution = resolve(project_path, config)
    except CcvError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    if version_type:
        console.print(resolution.version_type, markup=False, highlight=False)
    else:
        console.print(resolution.version, markup=False, highlight=False)
