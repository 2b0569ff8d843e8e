# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from arenta import configuration as app_configuration
from arenta.terminal import configuration, task
from arenta.terminal.custom_typer import OrderedAliasedTyperGroup
from arenta.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="arenta - A daily task management tool with minimal overhead",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config")
for command_info in task.app.registered_commands:
    app.registered_commands.append(command_info)


@app.command("version, v")
def version() -> None:
    """Print the arenta version."""
    typer.echo(f"{app_configuration.APP_NAME} {app_configuration.VERSION}")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
) -> None:
    """
    arenta - A daily task management tool with minimal overhead

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
