# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from dailystreak.model.dashboard import Dashboard, DashboardStats, TrendPoint
from dailystreak.view.header import header

GROUP_COLORS = {
    "career": "deep_sky_blue1",
    "personal": "spring_green2",
    "custom": "plum1",
}


def dashboard_view(dashboard: Dashboard, as_of: str) -> None:
    """
    Display today's task status, the summary stats and the 30 day trend.

    task                       group     done  streak  best  total  value  notes
    ───────────────────────────────────────────────────────────────────────────
    GitHub Commits             career    X     4       6     21
    Daily Productivity Rating  personal  -     2       2     2      7
    """
    header(dashboard["user"]["name"], f"dashboard {as_of}")

    console = Console()

    tasks_table = Table(box=box.SIMPLE)
    for column in ("task", "group", "done", "streak", "best", "total", "value", "notes"):
        tasks_table.add_column(column)

    for task in dashboard["tasks"]:
        color = GROUP_COLORS[task["group"]]
        tasks_table.add_row(
            f"[{color}]{task['name']}[/{color}]",
            task["group"],
            "X" if task["completed"] else "-",
            str(task["current_streak"]),
            str(task["best_streak"]),
            str(task["total_days_completed"]),
            str(task["value"]) if task["value"] is not None else "",
            task["notes"],
        )

    if dashboard["tasks"]:
        console.print(tasks_table)
    else:
        console.print("  No tasks selected.")

    console.print(stats_table(dashboard["stats"]))
    console.print(trend_row(dashboard["trend"]))


def stats_table(stats: DashboardStats) -> Table:
    table = Table(box=box.SIMPLE)
    table.add_column("property")
    table.add_column("value")

    table.add_row("tasks", str(stats["total_tasks"]))
    table.add_row("completed today", str(stats["completed_today"]))
    table.add_row("completion rate", f"{stats['completion_rate']}%")
    table.add_row("current streaks", str(stats["total_current_streaks"]))
    table.add_row(
        "average rating",
        str(stats["average_rating"]) if stats["average_rating"] is not None else "N/A",
    )
    return table


def trend_symbol(point: TrendPoint) -> tuple[str, str]:
    """Block and style for one day, shaded by completion percentage."""
    if point["total"] == 0 or point["completed"] == 0:
        return ("·", "grey50")
    if point["percentage"] >= 100:
        return ("█", "green1")
    if point["percentage"] >= 50:
        return ("▓", "green3")
    return ("░", "dark_green")


def trend_row(trend: list[TrendPoint]) -> Text:
    row = Text("  ")
    row.append(f"{trend[0]['date']} ", style="grey50")
    for point in trend:
        symbol, style = trend_symbol(point)
        row.append(symbol, style=style)
    row.append(f" {trend[-1]['date']}", style="grey50")
    return row
