"""Branch exit command implementation."""

import typer
from rich.console import Console

from knock_cli.core.branch import BranchStore
from knock_cli.core.errors import WorkspaceError

console = Console()


def command():
    """Exit the active branch."""
    try:
        BranchStore().exit_branch()
    except WorkspaceError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    console.print("‣ Successfully exited the branch")
