# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from arenta import configuration
from arenta.repository.configuration import (
    CONFIGURATION_REPO,
)
from arenta.terminal.custom_typer import AliasedTyperGroup
from arenta.terminal.validate import validate_duration, validate_log_level

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("show, view")
def show() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row(
        "default_duration", f"{config.get('default_duration', 30)} minutes"
    )
    table.add_row("log_level", config.get("log_level", "WARNING"))
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above views",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory path for storing the task file",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to the platform data directory",
        ),
    ] = False,
    default_duration: Annotated[
        Optional[int],
        typer.Option(
            "--default-duration",
            callback=validate_duration,
            help="Minutes planned for a new task when only a start is given",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            callback=validate_log_level,
            help="valid input: DEBUG, INFO, WARNING, ERROR",
        ),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        data_path=data_path,
        remove_data_path=remove_data_path,
        default_duration=default_duration,
        log_level=log_level,
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    show()
