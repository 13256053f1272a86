# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict, Union

from dailystreak.model.task import TaskGroup


class DashboardUser(TypedDict):
    id: str
    name: str


class DashboardTask(TypedDict):
    id: str
    name: str
    group: TaskGroup
    completed: bool
    value: Optional[Union[int, float]]
    notes: str
    current_streak: int
    best_streak: int
    total_days_completed: int


class DashboardStats(TypedDict):
    total_tasks: int
    completed_today: int
    completion_rate: int  # Percentage, 0-100
    total_current_streaks: int
    average_rating: Optional[float]


class TrendPoint(TypedDict):
    date: str  # YYYY-MM-DD
    completed: int
    total: int
    percentage: int


class Dashboard(TypedDict):
    user: DashboardUser
    tasks: list[DashboardTask]
    stats: DashboardStats
    trend: list[TrendPoint]
