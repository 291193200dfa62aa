"""Branch create command implementation."""

from typing import Optional

import typer
from rich.console import Console

from knock_cli.core.api import ApiError
from knock_cli.utils.options import (
    api_origin_option,
    build_api_client,
    json_option,
    service_token_option,
)
from knock_cli.utils.slug import parse_slug_argument

console = Console()


def command(
    slug: str = typer.Argument(
        ..., callback=parse_slug_argument, help="The slug for the new branch"
    ),
    as_json: bool = json_option,
    service_token: Optional[str] = service_token_option,
    api_origin: Optional[str] = api_origin_option,
):
    """Create a new branch off of the development environment."""
    client = build_api_client(service_token, api_origin, console)

    try:
        with console.status("[bold cyan]Creating branch...[/bold cyan]"):
            branch = client.create_branch(slug)
    except ApiError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    if as_json:
        console.print_json(data=branch)
        return

    console.print(f"‣ Successfully created branch `{branch['slug']}`")
    console.print(f"  Created at: {branch.get('created_at')}")
