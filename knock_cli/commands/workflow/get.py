"""Workflow get command implementation."""

from typing import Optional

import typer
from rich.console import Console

from knock_cli.core.api import ApiError
from knock_cli.core.context import RunContext
from knock_cli.core.errors import WorkspaceError
from knock_cli.core.project_config import ProjectConfigError
from knock_cli.utils.options import (
    api_origin_option,
    branch_option,
    build_api_client,
    environment_option,
    format_command_scope,
    json_option,
    service_token_option,
)

console = Console()


def command(
    workflow_key: str = typer.Argument(..., help="Key of the workflow to display"),
    environment: str = environment_option,
    branch: Optional[str] = branch_option,
    as_json: bool = json_option,
    service_token: Optional[str] = service_token_option,
    api_origin: Optional[str] = api_origin_option,
):
    """Display a single workflow from an environment."""
    client = build_api_client(service_token, api_origin, console)

    try:
        branch = RunContext().resolve_branch(branch)
        with console.status("[bold cyan]Fetching workflow...[/bold cyan]"):
            workflow = client.get_workflow(workflow_key, environment=environment, branch=branch)
    except (ApiError, WorkspaceError, ProjectConfigError) as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    if as_json:
        console.print_json(data=workflow)
        return

    scope = format_command_scope(environment, branch)
    console.print(f"‣ Showing workflow `{workflow['key']}` in {scope}\n")
    console.print(f"  Name:       {workflow.get('name')}")
    console.print(f"  Active:     {'Yes' if workflow.get('active') else 'No'}")
    console.print(f"  Steps:      {len(workflow.get('steps') or [])}")
    console.print(f"  Updated at: {workflow.get('updated_at')}")
