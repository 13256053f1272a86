# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from dailystreak.initialize import initialize
from dailystreak.log import setup_logging
from dailystreak.repository.configuration import ConfigurationRepository
from dailystreak.terminal import configuration, user
from dailystreak.terminal.custom_typer import AliasedTyperGroup
from dailystreak.terminal.errors import report_errors
from dailystreak.terminal.parse import parse_day, parse_value
from dailystreak.terminal.state import CliState, get_state
from dailystreak.time import day_to_str
from dailystreak.view import state as view_state
from dailystreak.view.catalog import catalog_view
from dailystreak.view.dashboard import dashboard_view

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="dailystreak - daily habit streaks in the CLI",
    no_args_is_help=True,
)
app.add_typer(user.app, name="user, us")
app.add_typer(configuration.app, name="config, cf")


@app.callback()
def main_callback(
    ctx: typer.Context,
    user_id: Annotated[
        Optional[str],
        typer.Option(
            "--user",
            "-u",
            envvar="DAILYSTREAK_USER",
            help="User to act as (defaults to the configured default_user)",
        ),
    ] = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            envvar="DAILYSTREAK_CONFIG",
            help="Path to config.yaml",
        ),
    ] = None,
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
    dailystreak - daily habit streaks in the CLI

    Global options that apply to all commands.
    """
    configuration_repository = ConfigurationRepository(config_path)
    with report_errors():
        config = initialize(configuration_repository)
    setup_logging(config["log_level"])
    if no_header:
        view_state.set_show_header(False)
    ctx.obj = CliState(configuration_repository, config, user_id)


@app.command("dashboard, d")
def dashboard(
    ctx: typer.Context,
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-dt", help="YYYY-MM-DD, today, yesterday or -N"),
    ] = None,
) -> None:
    """Show today's tasks, streaks and the 30 day trend."""
    state = get_state(ctx)
    as_of = parse_day(date, state.today)
    with report_errors():
        view = state.service.get_dashboard(state.user_id, as_of)
    dashboard_view(view, day_to_str(as_of))


@app.command("complete, c", no_args_is_help=True)
def complete(
    ctx: typer.Context,
    task_id: str,
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-dt", help="YYYY-MM-DD, today, yesterday or -N"),
    ] = None,
    value: Annotated[
        Optional[str],
        typer.Option("--value", "-v", help="Rating for rated tasks, e.g. 0-10"),
    ] = None,
    notes: Annotated[Optional[str], typer.Option("--notes", "-n")] = None,
) -> None:
    """Mark a task as done for a day."""
    _record(ctx, task_id, True, date, value, notes)


@app.command("undo, u", no_args_is_help=True)
def undo(
    ctx: typer.Context,
    task_id: str,
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-dt", help="YYYY-MM-DD, today, yesterday or -N"),
    ] = None,
    notes: Annotated[Optional[str], typer.Option("--notes", "-n")] = None,
) -> None:
    """Mark a task as not done for a day. Streaks are left as they are."""
    _record(ctx, task_id, False, date, None, notes)


def _record(
    ctx: typer.Context,
    task_id: str,
    completed: bool,
    date: Optional[str],
    value: Optional[str],
    notes: Optional[str],
) -> None:
    state = get_state(ctx)
    day = parse_day(date, state.today)
    with report_errors():
        ack = state.service.record_completion(
            state.user_id, task_id, day, completed, parse_value(value), notes
        )
    streak = ack["streak"]
    typer.echo(
        f"{task_id} {'done' if completed else 'not done'} on {day_to_str(day)}: "
        f"streak {streak['current_streak']} (best {streak['best_streak']})"
    )


@app.command("select, s")
def select(
    ctx: typer.Context,
    career: Annotated[
        Optional[list[str]],
        typer.Option("--career", "-c", help="Career task id (repeatable)"),
    ] = None,
    personal: Annotated[
        Optional[list[str]],
        typer.Option("--personal", "-p", help="Personal task id (repeatable)"),
    ] = None,
    custom: Annotated[
        Optional[list[str]],
        typer.Option("--custom", "-cu", help="Custom task name (repeatable)"),
    ] = None,
) -> None:
    """Replace the set of tracked tasks."""
    state = get_state(ctx)
    with report_errors():
        selected_tasks = state.service.set_selected_tasks(
            state.user_id,
            {
                "career": career or [],
                "personal": personal or [],
                "custom": custom or [],
            },
        )
    catalog_view(selected_tasks)


@app.command("tasks, t")
def tasks(ctx: typer.Context) -> None:
    """List the task catalog and the current selection."""
    state = get_state(ctx)
    user_id = state.optional_user_id
    if user_id is None:
        catalog_view()
        return
    with report_errors():
        selected_tasks = state.service.get_selected_tasks(user_id)
    catalog_view(selected_tasks)


def run() -> None:
    app()
