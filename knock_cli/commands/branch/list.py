"""Branch list command implementation."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from knock_cli.core.api import ApiError
from knock_cli.core.branch import BranchStore
from knock_cli.core.errors import WorkspaceError
from knock_cli.utils.options import (
    DEFAULT_ENVIRONMENT,
    api_origin_option,
    build_api_client,
    json_option,
    service_token_option,
)

console = Console()


def command(
    after: Optional[str] = typer.Option(None, "--after", help="Cursor for the next page"),
    before: Optional[str] = typer.Option(None, "--before", help="Cursor for the previous page"),
    limit: Optional[int] = typer.Option(None, "--limit", max=100, help="Page size"),
    as_json: bool = json_option,
    service_token: Optional[str] = service_token_option,
    api_origin: Optional[str] = api_origin_option,
):
    """Display all existing branches off of the development environment."""
    client = build_api_client(service_token, api_origin, console)

    try:
        resp = client.list_branches(
            environment=DEFAULT_ENVIRONMENT, after=after, before=before, limit=limit
        )
        active = BranchStore().current_branch_slug()
    except (ApiError, WorkspaceError) as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    if as_json:
        console.print_json(data=resp)
        return

    entries = resp.get("entries", [])
    console.print(
        f"‣ Showing {len(entries)} branches off of the {DEFAULT_ENVIRONMENT} environment\n"
    )

    table = Table(show_header=True, header_style="bold")
    table.add_column("Slug", no_wrap=True)
    table.add_column("Created at")
    table.add_column("Updated at")
    table.add_column("Last commit at")
    for entry in entries:
        slug = entry["slug"]
        table.add_row(
            f"* {slug}" if slug == active else slug,
            entry.get("created_at") or "",
            entry.get("updated_at") or "",
            entry.get("last_commit_at") or "Never",
        )
    console.print(table)
