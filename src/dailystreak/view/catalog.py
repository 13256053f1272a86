# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from dailystreak.catalog import CATALOG
from dailystreak.model.task import SelectedTasks


def catalog_view(selected_tasks: Optional[SelectedTasks] = None) -> None:
    """Display the catalog, marking tasks the user has selected."""
    table = Table(box=box.SIMPLE)
    table.add_column("id")
    table.add_column("name")
    table.add_column("group")
    table.add_column("rating")
    table.add_column("selected")

    for task in CATALOG:
        value_range = task["value_range"]
        selected = (
            selected_tasks is not None and task["id"] in selected_tasks[task["group"]]
        )
        table.add_row(
            task["id"],
            task["name"],
            task["group"],
            f"{value_range[0]}-{value_range[1]}" if value_range is not None else "",
            "X" if selected else "",
        )

    if selected_tasks is not None:
        for task_id in selected_tasks["custom"]:
            table.add_row(task_id, task_id, "custom", "", "X")

    console = Console()
    console.print(table)
