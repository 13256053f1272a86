# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from dailystreak.model.user import User
from dailystreak.time import datetime_to_iso_str
from dailystreak.view.header import header


def single_user_view(user: User) -> None:
    """Display a user's profile and task selection."""
    header(user["name"], "user")

    user_table = Table(box=box.SIMPLE)
    user_table.add_column("property")
    user_table.add_column("value")

    user_table.add_row("id", user["user_id"])
    user_table.add_row("name", user["name"])
    user_table.add_row("career", ", ".join(user["selected_tasks"]["career"]))
    user_table.add_row("personal", ", ".join(user["selected_tasks"]["personal"]))
    user_table.add_row("custom", ", ".join(user["selected_tasks"]["custom"]))
    user_table.add_row("created", datetime_to_iso_str(user["created"]))
    user_table.add_row("updated", datetime_to_iso_str(user["updated"]))

    console = Console()
    console.print(user_table)
