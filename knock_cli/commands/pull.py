"""Shared implementation of the per-resource pull commands."""

from typing import Any, Callable, Dict, Optional

import typer
from rich.console import Console

from knock_cli.core.api import ApiError
from knock_cli.core.context import RunContext
from knock_cli.core.errors import WorkspaceError
from knock_cli.core.project_config import ProjectConfigError
from knock_cli.core.resource_dir import ResourceTarget, ResourceType
from knock_cli.core.writer import write_resource_dir
from knock_cli.utils.options import format_command_scope

console = Console()


def pull_resource(
    command_id: str,
    resource_type: ResourceType,
    key: Optional[str],
    environment: str,
    branch: Optional[str],
    force: bool,
    fetch: Callable[[str, str, Optional[str]], Dict[str, Any]],
) -> None:
    """Pull one resource into its local resource directory.

    Args:
        command_id: Id of the invoking command, e.g. "workflow:pull"
        resource_type: Type of resource being pulled
        key: Resource key from the command line, if given
        environment: Environment to pull from
        branch: Branch flag value, if given
        force: Skip the confirmation before creating a new directory
        fetch: Called as fetch(key, environment, branch) to get the resource
    """
    target = ResourceTarget(command_id=command_id, type=resource_type, key=key)

    try:
        context = RunContext()
        dir_context = context.resource_dir_for(target)
        branch = context.resolve_branch(branch)
    except (WorkspaceError, ProjectConfigError) as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    if dir_context is None:
        console.print(
            f"[red]ERROR:[/red] Missing {resource_type.value} key. Pass a key "
            f"or run {command_id} inside a {resource_type.value} directory."
        )
        raise typer.Exit(code=1)

    if dir_context.exists:
        console.print(f"‣ Found `{dir_context.key}` at {dir_context.abspath}")
    elif not force:
        prompt = (
            f"Create a new {resource_type.value} directory "
            f"`{dir_context.key}` at {dir_context.abspath}?"
        )
        if not typer.confirm(prompt):
            return

    try:
        with console.status(f"[bold cyan]Fetching {resource_type.value}...[/bold cyan]"):
            data = fetch(dir_context.key, environment, branch)
        write_resource_dir(dir_context, data)
    except ApiError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e
    except OSError as e:
        console.print(f"[red]ERROR:[/red] Failed to write {dir_context.abspath}: {e}")
        raise typer.Exit(code=1) from e

    action = "updated" if dir_context.exists else "created"
    scope = format_command_scope(environment, branch)
    console.print(
        f"‣ Successfully {action} `{dir_context.key}` at {dir_context.abspath} using {scope}"
    )
