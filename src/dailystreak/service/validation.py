# SPDX-License-Identifier: MIT

from collections.abc import Mapping
from typing import Any, Optional, Union

from dailystreak import catalog
from dailystreak.exceptions import ValidationError
from dailystreak.model.task import TASK_GROUPS, SelectedTasks, TaskGroup
from dailystreak.template.user import get_selected_tasks_template


def validate_identifier(value: Any, kind: str) -> str:
    if not isinstance(value, str) or value.strip() == "":
        raise ValidationError(f"{kind} must be a non-empty string, got {value!r}")
    return value


def validate_completed(completed: Any) -> bool:
    if not isinstance(completed, bool):
        raise ValidationError(f"completed must be a boolean, got {completed!r}")
    return completed


def validate_notes(notes: Any) -> str:
    if notes is None:
        return ""
    if not isinstance(notes, str):
        raise ValidationError(f"notes must be a string, got {type(notes).__name__}")
    return notes


def validate_value(task_id: str, value: Any) -> Optional[Union[int, float]]:
    """
    Check a numeric rating against the task's value range.

    Only rated catalog tasks accept a value; everything else must pass None.
    """
    if value is None:
        return None
    # bool is an int subclass but never a rating
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"value must be a number, got {value!r}")

    value_range = catalog.get_value_range(task_id)
    if value_range is None:
        raise ValidationError(f"Task '{task_id}' does not take a value")
    low, high = value_range
    if not low <= value <= high:
        raise ValidationError(
            f"value for '{task_id}' must be between {low} and {high}, got {value}"
        )
    return value


def validate_selected_tasks(selected_tasks: Any) -> SelectedTasks:
    """
    Validate and normalize a task selection.

    Missing groups are empty. Ids are deduplicated within a group, keeping the
    first occurrence. Career and personal ids must come from the catalog group
    of the same name; custom ids are stripped and must not shadow a catalog
    id, so no id can land in two groups.
    """
    if not isinstance(selected_tasks, Mapping):
        raise ValidationError("selected tasks must be a mapping of group to task ids")

    unknown_groups = [group for group in selected_tasks if group not in TASK_GROUPS]
    if unknown_groups:
        raise ValidationError(
            f"Unknown task group(s): {', '.join(map(str, unknown_groups))}"
        )

    normalized = get_selected_tasks_template()

    for group in TASK_GROUPS:
        task_ids = selected_tasks.get(group) or []
        if isinstance(task_ids, str) or not isinstance(task_ids, (list, tuple)):
            raise ValidationError(f"'{group}' must be a list of task ids")

        catalog_ids = [task["id"] for task in catalog.get_catalog_for_group(group)]
        group_ids: list[str] = []
        for task_id in task_ids:
            task_id = validate_identifier(task_id, f"{group} task id")
            if group == "custom":
                task_id = task_id.strip()
                if catalog.get_task_definition(task_id) is not None:
                    raise ValidationError(
                        f"Custom task '{task_id}' clashes with a catalog task id"
                    )
            elif task_id not in catalog_ids:
                raise ValidationError(f"Unknown {group} task: '{task_id}'")
            group_ids.append(task_id)

        normalized[group] = list(dict.fromkeys(group_ids))

    return normalized


def get_selected_task_ids(selected_tasks: SelectedTasks) -> list[tuple[str, TaskGroup]]:
    """Selected ids paired with their group, in career, personal, custom order."""
    return [
        (task_id, group) for group in TASK_GROUPS for task_id in selected_tasks[group]
    ]
