"""Commit promote command implementation."""

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

console = Console()


def command(
    to: Optional[str] = typer.Option(
        None, "--to", help="Destination environment to promote all changes into"
    ),
    only: Optional[str] = typer.Option(
        None, "--only", help="ID of a single commit to promote to the subsequent environment"
    ),
    force: bool = force_option,
    service_token: Optional[str] = service_token_option,
    api_origin: Optional[str] = api_origin_option,
):
    """Promote one or all commits to the subsequent environment.

    Pass exactly one of --to (promote everything) or --only (promote a single commit).
    """
    if to and only:
        console.print("[red]ERROR:[/red] `--to` and `--only` cannot be used together")
        raise typer.Exit(code=1)
    if not to and not only:
        console.print("[red]ERROR:[/red] You must specify either `--to` or `--only`")
        raise typer.Exit(code=1)

    client = build_api_client(service_token, api_origin, console)

    if only:
        if not force and not typer.confirm(f"Promote the commit `{only}`?"):
            return

        try:
            with console.status("[bold cyan]Promoting commit...[/bold cyan]"):
                resp = client.promote_one_change(only)
        except ApiError as e:
            console.print(f"[red]ERROR:[/red] {e}")
            raise typer.Exit(code=1) from e

        commit = (resp or {}).get("commit") or {}
        console.print(
            f"‣ Successfully promoted the commit `{only}` into "
            f"`{commit.get('environment')}` environment"
        )
        console.print(f"    Commit id: {commit.get('id')}")
        return

    if not force and not typer.confirm(f"Promote all changes to `{to}` environment?"):
        return

    try:
        with console.status("[bold cyan]Promoting changes...[/bold cyan]"):
            client.promote_all_changes(to)
    except ApiError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    console.print(f"‣ Successfully promoted all changes to `{to}` environment")
