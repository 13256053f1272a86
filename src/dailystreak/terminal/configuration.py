# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from dailystreak import configuration
from dailystreak.terminal.custom_typer import AliasedTyperGroup
from dailystreak.terminal.errors import report_errors
from dailystreak.terminal.state import get_state

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("show, s")
def show(ctx: typer.Context) -> None:
    """Show the active configuration."""
    state = get_state(ctx)
    config = state.configuration_repository.get_config()

    config_table = Table(box=box.SIMPLE)
    config_table.add_column("property")
    config_table.add_column("value")
    config_table.add_row("storage", config["storage"])
    config_table.add_row("data_path", str(configuration.get_data_path(config)))
    config_table.add_row("default_user", config["default_user"] or "")
    config_table.add_row("log_level", config["log_level"])

    console = Console()
    console.print(config_table)


@app.command("set", no_args_is_help=True)
def set_config(
    ctx: typer.Context,
    storage: Annotated[
        Optional[str], typer.Option("--storage", help="yaml or memory")
    ] = None,
    data_path: Annotated[Optional[str], typer.Option("--data-path")] = None,
    remove_data_path: Annotated[bool, typer.Option("--remove-data-path")] = False,
    default_user: Annotated[Optional[str], typer.Option("--default-user")] = None,
    remove_default_user: Annotated[
        bool, typer.Option("--remove-default-user")
    ] = False,
    log_level: Annotated[Optional[str], typer.Option("--log-level")] = None,
) -> None:
    """Update configuration values."""
    state = get_state(ctx)
    with report_errors():
        state.configuration_repository.update_config(
            storage=storage,
            data_path=data_path,
            remove_data_path=remove_data_path,
            default_user=default_user,
            remove_default_user=remove_default_user,
            log_level=log_level,
        )
        state.configuration_repository.flush()
    show(ctx)
