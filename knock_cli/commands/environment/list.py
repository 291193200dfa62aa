"""Environment list command implementation."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from knock_cli.core.api import ApiError
from knock_cli.utils.options import (
    api_origin_option,
    build_api_client,
    json_option,
    service_token_option,
)

console = Console()


def command(
    as_json: bool = json_option,
    service_token: Optional[str] = service_token_option,
    api_origin: Optional[str] = api_origin_option,
):
    """Display all environments configured for the account."""
    client = build_api_client(service_token, api_origin, console)

    try:
        with console.status("[bold cyan]Fetching environments...[/bold cyan]"):
            environments = client.list_all_environments()
    except ApiError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    if as_json:
        console.print_json(data=environments)
        return

    console.print(f"‣ Showing {len(environments)} environments\n")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Slug", no_wrap=True)
    table.add_column("Name")
    table.add_column("Order")
    table.add_column("Owner")
    table.add_column("Updated at")
    for environment in environments:
        table.add_row(
            environment["slug"],
            environment.get("name") or "",
            str(environment.get("order", "")),
            environment.get("owner") or "",
            environment.get("updated_at") or "",
        )
    console.print(table)
