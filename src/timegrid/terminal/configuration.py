# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from timegrid import configuration
from timegrid.repository.configuration import CONFIGURATION_REPO
from timegrid.terminal.custom_typer import AliasedTyperGroup
from timegrid.terminal.error import report_errors

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("config_file", str(configuration.APP_CONFIG_PATH))
    table.add_row("data_path", config["data_path"] or str(configuration.DATA_PATH))
    table.add_row(
        "include_weekends",
        "✓ Enabled" if config["include_weekends"] else "✗ Disabled",
    )
    table.add_row("default_entry_minutes", str(config["default_entry_minutes"]))
    table.add_row("slot_increment_minutes", str(config["slot_increment_minutes"]))
    table.add_row("move_collision", config["move_collision"])
    table.add_row("log_level", config["log_level"])

    console.print(table)


@app.command("set, s")
@report_errors
def set_config(
    data_path: Annotated[Optional[str], typer.Option("--data-path")] = None,
    remove_data_path: Annotated[bool, typer.Option("--remove-data-path")] = False,
    include_weekends: Annotated[
        Optional[bool], typer.Option("--include-weekends/--exclude-weekends")
    ] = None,
    default_entry_minutes: Annotated[
        Optional[int], typer.Option("--default-entry-minutes")
    ] = None,
    slot_increment_minutes: Annotated[
        Optional[int], typer.Option("--slot-increment-minutes")
    ] = None,
    move_collision: Annotated[
        Optional[str], typer.Option("--move-collision", help="reject or allow")
    ] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level")] = None,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        include_weekends=include_weekends,
        default_entry_minutes=default_entry_minutes,
        slot_increment_minutes=slot_increment_minutes,
        move_collision=move_collision,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()
    view()
