"""Commit list command implementation."""

from enum import Enum
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

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
    format_commit_author,
    json_option,
    service_token_option,
)

console = Console()


class CommitResourceType(str, Enum):
    EMAIL_LAYOUT = "email_layout"
    GUIDE = "guide"
    MESSAGE_TYPE = "message_type"
    PARTIAL = "partial"
    TRANSLATION = "translation"
    WORKFLOW = "workflow"


def command(
    environment: str = environment_option,
    branch: Optional[str] = branch_option,
    promoted: Optional[bool] = typer.Option(
        None,
        "--promoted/--no-promoted",
        help="Show only promoted or unpromoted changes",
    ),
    resource_types: Optional[List[CommitResourceType]] = typer.Option(
        None, "--resource-type", help="Filter by resource type (repeatable)"
    ),
    resource_id: Optional[str] = typer.Option(
        None, "--resource-id", help="Filter by resource identifier, requires --resource-type"
    ),
    after: Optional[str] = typer.Option(None, "--after", help="Cursor for the next page"),
    before: Optional[str] = typer.Option(None, "--before", help="Cursor for the previous page"),
    limit: Optional[int] = typer.Option(None, "--limit", max=100, help="Page size"),
    as_json: bool = json_option,
    service_token: Optional[str] = service_token_option,
    api_origin: Optional[str] = api_origin_option,
):
    """Display all commits in an environment."""
    resource_types = resource_types or []
    if resource_id and not resource_types:
        console.print("[red]ERROR:[/red] --resource-id must be used together with --resource-type")
        raise typer.Exit(code=1)
    if resource_id and len(resource_types) > 1:
        console.print(
            "[red]ERROR:[/red] --resource-id cannot be used with multiple --resource-type"
        )
        raise typer.Exit(code=1)

    client = build_api_client(service_token, api_origin, console)

    try:
        branch = RunContext().resolve_branch(branch)
        with console.status("[bold cyan]Fetching commits...[/bold cyan]"):
            resp = client.list_commits(
                environment,
                branch=branch,
                promoted=promoted,
                resource_types=[t.value for t in resource_types],
                resource_id=resource_id,
                after=after,
                before=before,
                limit=limit,
            )
    except (ApiError, WorkspaceError, ProjectConfigError) as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    if as_json:
        console.print_json(data=resp)
        return

    entries = resp.get("entries", [])
    qualifier = ""
    if promoted is True:
        qualifier = " (showing only promoted)"
    elif promoted is False:
        qualifier = " (showing only unpromoted)"

    scope = format_command_scope(environment, branch)
    console.print(f"‣ Showing {len(entries)} commits in {scope}{qualifier}\n")

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", no_wrap=True)
    table.add_column("Resource")
    table.add_column("Identifier")
    table.add_column("Author")
    table.add_column("Commit message")
    table.add_column("Created at")
    for entry in entries:
        resource = entry.get("resource") or {}
        table.add_row(
            entry["id"],
            resource.get("type", ""),
            resource.get("identifier", ""),
            format_commit_author(entry),
            (entry.get("commit_message") or "").strip(),
            entry.get("created_at") or "",
        )
    console.print(table)
