"""Main Typer application instance."""

import logging

import typer

from knock_cli.commands import init, whoami
from knock_cli.commands.branch import create as branch_create
from knock_cli.commands.branch import delete as branch_delete
from knock_cli.commands.branch import exit as branch_exit
from knock_cli.commands.branch import list as branch_list
from knock_cli.commands.branch import switch as branch_switch
from knock_cli.commands.commit import get as commit_get
from knock_cli.commands.commit import list as commit_list
from knock_cli.commands.commit import promote as commit_promote
from knock_cli.commands.environment import list as environment_list
from knock_cli.commands.layout import list as layout_list
from knock_cli.commands.layout import pull as layout_pull
from knock_cli.commands.workflow import get as workflow_get
from knock_cli.commands.workflow import list as workflow_list
from knock_cli.commands.workflow import pull as workflow_pull

app = typer.Typer(
    name="knock",
    help="Command-line client for managing Knock environments, branches and resources",
    add_completion=False,
)

branch_app = typer.Typer(help="Create, switch between and remove branches", no_args_is_help=True)
workflow_app = typer.Typer(help="Manage workflows", no_args_is_help=True)
layout_app = typer.Typer(help="Manage email layouts", no_args_is_help=True)
environment_app = typer.Typer(help="Inspect environments", no_args_is_help=True)
commit_app = typer.Typer(help="Inspect and promote commits", no_args_is_help=True)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


# Register commands
app.command(name="init")(init.command)
app.command(name="whoami")(whoami.command)

branch_app.command(name="create")(branch_create.command)
branch_app.command(name="list")(branch_list.command)
branch_app.command(name="switch")(branch_switch.command)
branch_app.command(name="exit")(branch_exit.command)
branch_app.command(name="delete")(branch_delete.command)

workflow_app.command(name="list")(workflow_list.command)
workflow_app.command(name="get")(workflow_get.command)
workflow_app.command(name="pull")(workflow_pull.command)

layout_app.command(name="list")(layout_list.command)
layout_app.command(name="pull")(layout_pull.command)

environment_app.command(name="list")(environment_list.command)

commit_app.command(name="list")(commit_list.command)
commit_app.command(name="get")(commit_get.command)
commit_app.command(name="promote")(commit_promote.command)

app.add_typer(branch_app, name="branch")
app.add_typer(workflow_app, name="workflow")
app.add_typer(layout_app, name="layout")
app.add_typer(environment_app, name="environment")
app.add_typer(commit_app, name="commit")


def main():
    """Entry point for pip-installed command."""
    app()


if __name__ == "__main__":
    main()
