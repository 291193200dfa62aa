"""Options and helpers shared by API-backed commands."""

from typing import Optional

import typer
from rich.console import Console

from knock_cli.core.api import ApiClient
from knock_cli.core.config import Config

DEFAULT_ENVIRONMENT = "development"

service_token_option = typer.Option(
    None,
    "--service-token",
    envvar="KNOCK_SERVICE_TOKEN",
    help="Service token to authenticate with",
)
api_origin_option = typer.Option(None, "--api-origin", hidden=True)
environment_option = typer.Option(
    DEFAULT_ENVIRONMENT, "--environment", "-e", help="The environment to use"
)
branch_option = typer.Option(
    None, "--branch", "-b", help="The branch to use (default: the active branch)"
)
json_option = typer.Option(False, "--json", help="Output the raw JSON response")
force_option = typer.Option(False, "--force", "-f", help="Remove the confirmation prompt")


def build_api_client(
    service_token: Optional[str],
    api_origin: Optional[str],
    console: Console,
    config: Optional[Config] = None,
) -> ApiClient:
    """Create an API client, exiting with code 2 when no token is available."""
    if config is None:
        try:
            config = Config()
        except RuntimeError as e:
            console.print(f"[red]ERROR:[/red] {e}")
            raise typer.Exit(code=1) from e

    token = config.resolve_service_token(service_token)
    if not token:
        console.print(
            "[red]ERROR:[/red] Missing service token. Pass --service-token, "
            "set KNOCK_SERVICE_TOKEN, or add service_token to "
            f"{config.config_file}"
        )
        raise typer.Exit(code=2)

    return ApiClient(token, api_origin=config.resolve_api_origin(api_origin))


def format_command_scope(environment: str, branch: Optional[str] = None) -> str:
    """Describe what a request was scoped to, e.g. "`my-branch` branch"."""
    if branch:
        return f"`{branch}` branch"
    return f"`{environment}` environment"


def format_commit_author(commit: dict) -> str:
    """Render a commit author as "Name <email>", or "<email>" without a name."""
    author = commit.get("author") or {}
    email = author.get("email", "")
    name = author.get("name")
    return f"{name} <{email}>" if name else f"<{email}>"
