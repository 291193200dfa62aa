"""Commit get command implementation."""

from typing import Optional

import typer
from rich.console import Console

from knock_cli.core.api import ApiError
from knock_cli.utils.options import (
    api_origin_option,
    build_api_client,
    format_commit_author,
    json_option,
    service_token_option,
)

console = Console()


def command(
    commit_id: str = typer.Argument(..., help="ID of the commit to display"),
    as_json: bool = json_option,
    service_token: Optional[str] = service_token_option,
    api_origin: Optional[str] = api_origin_option,
):
    """Display a single commit based on an ID."""
    client = build_api_client(service_token, api_origin, console)

    try:
        with console.status("[bold cyan]Fetching commit...[/bold cyan]"):
            commit = client.get_commit(commit_id)
    except ApiError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    if as_json:
        console.print_json(data=commit)
        return

    resource = commit.get("resource") or {}
    console.print(
        f"‣ Showing commit `{commit['id']}` in `{commit.get('environment')}` environment\n"
    )
    console.print(f"  ID:         {commit['id']}")
    console.print(f"  Resource:   {resource.get('type')}")
    console.print(f"  Identifier: {resource.get('identifier')}")
    console.print(f"  Author:     {format_commit_author(commit)}")
    console.print(f"  Created at: {commit.get('created_at')}")

    if commit.get("commit_message"):
        console.print(f"\n{commit['commit_message']}")
