"""Workflow pull command implementation."""

from typing import Optional

import typer
from rich.console import Console

from knock_cli.commands.pull import pull_resource
from knock_cli.core.resource_dir import ResourceType
from knock_cli.utils.options import (
    api_origin_option,
    branch_option,
    build_api_client,
    environment_option,
    force_option,
    service_token_option,
)

COMMAND_ID = "workflow:pull"

console = Console()


def command(
    workflow_key: Optional[str] = typer.Argument(
        None, help="Key of the workflow to pull (default: the enclosing workflow directory)"
    ),
    environment: str = environment_option,
    branch: Optional[str] = branch_option,
    force: bool = force_option,
    service_token: Optional[str] = service_token_option,
    api_origin: Optional[str] = api_origin_option,
):
    """Pull a workflow from an environment into the local file system."""
    client = build_api_client(service_token, api_origin, console)

    pull_resource(
        COMMAND_ID,
        ResourceType.WORKFLOW,
        workflow_key,
        environment,
        branch,
        force,
        lambda key, env, br: client.get_workflow(key, environment=env, branch=br),
    )
