# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

TaskGroup = Literal["career", "personal", "custom"]

TASK_GROUPS: tuple[TaskGroup, ...] = ("career", "personal", "custom")


class TaskDefinition(TypedDict):
    id: str
    name: str
    group: TaskGroup
    value_range: Optional[tuple[float, float]]  # inclusive bounds for rated tasks


class SelectedTasks(TypedDict):
    career: list[str]
    personal: list[str]
    custom: list[str]
