"""Branch delete command implementation."""

from typing import Optional

import typer
from rich.console import Console

from knock_cli.core.api import ApiError
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
        ..., callback=parse_slug_argument, help="The slug of the branch to delete"
    ),
    force: bool = force_option,
    service_token: Optional[str] = service_token_option,
    api_origin: Optional[str] = api_origin_option,
):
    """Delete an existing branch with the given slug."""
    client = build_api_client(service_token, api_origin, console)

    if not force and not typer.confirm(f"Delete branch `{slug}`?"):
        return

    try:
        with console.status("[bold cyan]Deleting branch...[/bold cyan]"):
            client.delete_branch(slug)
    except ApiError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    console.print(f"‣ Successfully deleted branch `{slug}`")
