# SPDX-License-Identifier: MIT

from typing import Optional

from dailystreak.model.task import TaskDefinition, TaskGroup

CATALOG: list[TaskDefinition] = [
    {"id": "github", "name": "GitHub Commits", "group": "career", "value_range": None},
    {"id": "leetcode", "name": "LeetCode Problems", "group": "career", "value_range": None},
    {"id": "gfg", "name": "GeeksforGeeks Practice", "group": "career", "value_range": None},
    {"id": "chess", "name": "Chess Games", "group": "career", "value_range": None},
    {"id": "detox", "name": "Digital Detox", "group": "personal", "value_range": None},
    {
        "id": "screentime",
        "name": "Screen Time Limit",
        "group": "personal",
        "value_range": None,
    },
    {"id": "running", "name": "Running", "group": "personal", "value_range": None},
    {"id": "gym", "name": "Gym Workout", "group": "personal", "value_range": None},
    {"id": "yoga", "name": "Yoga Practice", "group": "personal", "value_range": None},
    {"id": "swimming", "name": "Swimming", "group": "personal", "value_range": None},
    {
        "id": "productivity",
        "name": "Daily Productivity Rating",
        "group": "personal",
        "value_range": (0, 10),
    },
]

_CATALOG_BY_ID: dict[str, TaskDefinition] = {task["id"]: task for task in CATALOG}


def get_task_definition(task_id: str) -> Optional[TaskDefinition]:
    return _CATALOG_BY_ID.get(task_id)


def get_catalog_for_group(group: TaskGroup) -> list[TaskDefinition]:
    return [task for task in CATALOG if task["group"] == group]


def get_task_name(task_id: str, group: TaskGroup) -> str:
    """Catalog display name for career/personal ids; custom ids are their own name."""
    if group == "custom":
        return task_id
    task = _CATALOG_BY_ID.get(task_id)
    if task is None:
        return task_id
    return task["name"]


def get_value_range(task_id: str) -> Optional[tuple[float, float]]:
    task = _CATALOG_BY_ID.get(task_id)
    if task is None:
        return None
    return task["value_range"]
