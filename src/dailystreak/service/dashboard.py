# SPDX-License-Identifier: MIT

from collections import Counter
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

import pendulum

from dailystreak import catalog
from dailystreak.exceptions import UnknownUserError
from dailystreak.model.activity import Activity
from dailystreak.model.dashboard import (
    Dashboard,
    DashboardStats,
    DashboardTask,
    TrendPoint,
)
from dailystreak.repository.store import ActivityStore, StreakStore, UserStore
from dailystreak.service.validation import get_selected_task_ids
from dailystreak.time import day_range, day_to_str

TREND_DAYS = 30


def percentage(completed: int, total: int) -> int:
    """completed/total as a whole percentage, rounding halves up. 0 when total is 0."""
    if total <= 0:
        return 0
    return (200 * completed + total) // (2 * total)


def average_rating(activities: list[Activity]) -> Optional[float]:
    """Mean of rated values to one decimal, rounding halves up. None when unrated."""
    values: list[Union[int, float]] = [
        activity["value"]
        for activity in activities
        if activity["value"] is not None
        and catalog.get_value_range(activity["task_id"]) is not None
    ]
    if not values:
        return None
    mean = sum(Decimal(str(value)) for value in values) / len(values)
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class DashboardAggregator:
    """Read-only join of a user's selection, today's activities and streak state."""

    def __init__(
        self,
        users: UserStore,
        activities: ActivityStore,
        streaks: StreakStore,
    ) -> None:
        self._users = users
        self._activities = activities
        self._streaks = streaks

    def build_dashboard(self, user_id: str, as_of_day: pendulum.Date) -> Dashboard:
        user = self._users.get_user(user_id)
        if user is None:
            raise UnknownUserError(user_id)

        tasks: list[DashboardTask] = []
        for task_id, group in get_selected_task_ids(user["selected_tasks"]):
            activity = self._activities.get_activity(user_id, task_id, as_of_day)
            streak = self._streaks.get_streak(user_id, task_id)
            tasks.append(
                {
                    "id": task_id,
                    "name": catalog.get_task_name(task_id, group),
                    "group": group,
                    "completed": activity["completed"] if activity else False,
                    "value": activity["value"] if activity else None,
                    "notes": activity["notes"] if activity else "",
                    "current_streak": streak["current_streak"] if streak else 0,
                    "best_streak": streak["best_streak"] if streak else 0,
                    "total_days_completed": (
                        streak["total_days_completed"] if streak else 0
                    ),
                }
            )

        days = day_range(as_of_day, TREND_DAYS)
        window = self._activities.get_activities_in_range(user_id, days[0], days[-1])

        total_tasks = len(tasks)
        completed_today = len([task for task in tasks if task["completed"]])
        stats: DashboardStats = {
            "total_tasks": total_tasks,
            "completed_today": completed_today,
            "completion_rate": percentage(completed_today, total_tasks),
            "total_current_streaks": sum(task["current_streak"] for task in tasks),
            "average_rating": average_rating(window),
        }

        return {
            "user": {"id": user_id, "name": user["name"]},
            "tasks": tasks,
            "stats": stats,
            "trend": self.__build_trend(days, window, total_tasks),
        }

    def __build_trend(
        self,
        days: list[pendulum.Date],
        window: list[Activity],
        total_tasks: int,
    ) -> list[TrendPoint]:
        # The current selection size is the denominator for every day.
        completed_by_day = Counter(
            day_to_str(activity["day"]) for activity in window if activity["completed"]
        )
        return [
            {
                "date": date,
                "completed": completed_by_day[date],
                "total": total_tasks,
                "percentage": percentage(completed_by_day[date], total_tasks),
            }
            for date in map(day_to_str, days)
        ]
