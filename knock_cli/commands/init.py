"""Init command implementation."""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from knock_cli.core.project_config import (
    DEFAULT_KNOCK_DIR,
    PROJECT_CONFIG_FILE_NAME,
    write_project_config,
)
from knock_cli.core.resource_dir import ResourceType

console = Console()


def command(
    knock_dir: str = typer.Option(
        DEFAULT_KNOCK_DIR,
        "--knock-dir",
        "-d",
        help="Directory to store Knock resources in, relative to this directory",
    ),
):
    """Initialize a Knock project with a knock.json configuration file.

    Creates knock.json in the current directory along with a subdirectory
    per resource type under the resources directory.
    """
    cwd = Path.cwd()

    try:
        config = write_project_config(cwd, knock_dir)
    except FileExistsError as e:
        console.print(
            Panel(
                f"[yellow]{e}[/yellow]\n\nAborting.",
                title="⚠️  Project Exists",
                border_style="yellow",
            )
        )
        raise typer.Exit(code=1) from e
    except OSError as e:
        console.print(f"[red]ERROR:[/red] Failed to initialize project: {e}")
        raise typer.Exit(code=1) from e

    resource_dirs = "\n".join(
        f"  • {resource_type.value:<9} {config.resource_dir(resource_type)}"
        for resource_type in ResourceType
    )
    console.print(
        Panel(
            f"[green]✓[/green] Created [bold]{config.path}[/bold]\n\n"
            f"[dim]Resources directory:[/dim] {knock_dir}\n"
            f"{resource_dirs}",
            title=f"✅ Initialized {PROJECT_CONFIG_FILE_NAME}",
            border_style="green",
        )
    )
