"""Branch switch command implementation."""

from typing import Optional

import typer
from rich.console import Console

from knock_cli.core.api import ApiError
from knock_cli.core.branch import BRANCH_FILE_NAME, BranchStore
from knock_cli.core.context import RunContext
from knock_cli.core.errors import WorkspaceError
from knock_cli.core.project_config import ProjectConfigError
from knock_cli.utils.options import (
    api_origin_option,
    build_api_client,
    force_option,
    service_token_option,
)
from knock_cli.utils.slug import parse_slug_argument

console = Console()


def command(
    slug: str = typer.Argument(
        ..., callback=parse_slug_argument, help="The slug of the branch to switch to"
    ),
    force: bool = force_option,
    service_token: Optional[str] = service_token_option,
    api_origin: Optional[str] = api_origin_option,
):
    """Switch to an existing branch with the given slug."""
    client = build_api_client(service_token, api_origin, console)

    try:
        context = RunContext()
    except ProjectConfigError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    branch_file = context.branch_file
    if branch_file is None:
        root = context.project_root
        branch_file = root / BRANCH_FILE_NAME
        if not BranchStore.has_branch_file(root) and not force:
            if not typer.confirm(f"Create a {BRANCH_FILE_NAME} file at {root}?"):
                return

    console.print(f"‣ Switching to branch `{slug}`")

    # Make sure the branch exists before recording it locally
    try:
        with console.status("[bold cyan]Fetching branch...[/bold cyan]"):
            branch = client.get_branch(slug)
    except ApiError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    try:
        BranchStore.set_branch(branch_file, branch["slug"])
    except WorkspaceError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    console.print(f"‣ Successfully switched to branch `{branch['slug']}`")

    if not BranchStore.is_ignored_by_git(branch_file):
        console.print(
            f"[yellow]‣ {branch_file} is not ignored by git. "
            f"Consider adding {BRANCH_FILE_NAME} to your .gitignore.[/yellow]"
        )
