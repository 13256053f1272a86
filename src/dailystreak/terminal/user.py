# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from dailystreak.terminal.custom_typer import AliasedTyperGroup
from dailystreak.terminal.errors import report_errors
from dailystreak.terminal.state import get_state
from dailystreak.view.user import single_user_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    ctx: typer.Context,
    user_id: str,
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
) -> None:
    """Register a user, or rename an existing one."""
    state = get_state(ctx)
    with report_errors():
        user = state.service.register_user(user_id, name)
    single_user_view(user)


@app.command("show, s")
def show(ctx: typer.Context) -> None:
    """Show the current user and their selection."""
    state = get_state(ctx)
    with report_errors():
        user = state.service.get_user(state.user_id)
    single_user_view(user)
