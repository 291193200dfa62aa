"""Layout list command implementation."""

from typing import Optional

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
    json_option,
    service_token_option,
)

console = Console()


def command(
    environment: str = environment_option,
    branch: Optional[str] = branch_option,
    after: Optional[str] = typer.Option(None, "--after", help="Cursor for the next page"),
    before: Optional[str] = typer.Option(None, "--before", help="Cursor for the previous page"),
    limit: Optional[int] = typer.Option(None, "--limit", max=100, help="Page size"),
    as_json: bool = json_option,
    service_token: Optional[str] = service_token_option,
    api_origin: Optional[str] = api_origin_option,
):
    """Display email layouts in an environment or branch."""
    client = build_api_client(service_token, api_origin, console)

    try:
        branch = RunContext().resolve_branch(branch)
        resp = client.list_layouts(
            environment, branch=branch, after=after, before=before, limit=limit
        )
    except (ApiError, WorkspaceError, ProjectConfigError) as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    if as_json:
        console.print_json(data=resp)
        return

    entries = resp.get("entries", [])
    scope = format_command_scope(environment, branch)
    console.print(f"‣ Showing {len(entries)} layouts in {scope}\n")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Key", no_wrap=True)
    table.add_column("Name")
    table.add_column("Updated at")
    for entry in entries:
        table.add_row(entry["key"], entry.get("name") or "", entry.get("updated_at") or "")
    console.print(table)
