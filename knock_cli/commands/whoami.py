"""Whoami command implementation."""

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

console = Console()


def command(
    as_json: bool = json_option,
    service_token: Optional[str] = service_token_option,
    api_origin: Optional[str] = api_origin_option,
):
    """Verify the service token and show the account it belongs to."""
    client = build_api_client(service_token, api_origin, console)

    try:
        resp = client.whoami()
    except ApiError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    if as_json:
        console.print_json(data=resp)
        return

    console.print("‣ Verified as:")
    console.print(f"  Account name: {resp.get('account_name')}")
    console.print(f"  Account slug: {resp.get('account_slug')}")
    console.print(f"  Service token name: {resp.get('service_token_name')}")
